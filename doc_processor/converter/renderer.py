"""Token → 文档块渲染。

每种 token 对应一个处理函数；未登记的 token 类型直接跳过，不报错。
列表按递归顺序写入同一个输出序列，嵌套关系只体现为缩进。
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from ..common.logging import get_logger
from .blocks import (
    ALIGN_CENTER,
    ALIGN_JUSTIFY,
    ALIGN_LEFT,
    LINE_RULE_AUTO,
    Block,
    Border,
    Indent,
    ParagraphBlock,
    Spacing,
    StyledRun,
    TableBlock,
)
from .inline import parse_inline_runs
from .styles import DEFAULT_STYLES, StyleSheet
from .tokens import (
    Blockquote,
    Code,
    Heading,
    HorizontalRule,
    ListToken,
    Paragraph,
    Table,
    Token,
)

logger = get_logger(__name__)

# 版式参数，长度单位英寸，行距单位磅
BODY_LINE_SPACING = 28
BODY_FIRST_LINE_INDENT = 0.29
LIST_LINE_SPACING = 18
LIST_INDENT_UNIT = 0.3
LIST_HANGING_ORDERED = 0.3
LIST_HANGING_BULLET = 0.2
LIST_SPACING = 0.05
NESTED_LIST_SPACING = 0.02
CODE_INDENT = 0.5
CODE_SPACING = 0.2
QUOTE_INDENT = 0.5
QUOTE_SPACING = 0.1
QUOTE_LINE_SPACING = 1.5
QUOTE_BORDER = Border(size=3, color="808080")
RULE_CHAR = "─"
RULE_WIDTH = 50
RULE_SPACING = 0.2
BULLET = "• "

TokenHandler = Callable[[Token, List[Block]], None]


def render_list(
    out: List[Block],
    token: ListToken,
    depth: int = 0,
    parent_marker: str = "",
    styles: StyleSheet = DEFAULT_STYLES,
) -> None:
    """把列表 token 渲染为列表项段落并追加到 out。"""
    index = token.start
    for item in token.items:
        text = item.text
        if text.strip():
            # 子条目文本可能重复父条目编号，按字面前缀去掉
            if depth > 0 and parent_marker and text.startswith(parent_marker):
                text = text[len(parent_marker):].strip()
            out.append(_list_item_paragraph(text, depth, token.ordered, index, styles))

        marker = f"{index}. " if token.ordered else ""
        if token.ordered:
            index += 1

        for sub_token in item.tokens:
            if isinstance(sub_token, ListToken):
                render_list(out, sub_token, depth + 1, marker, styles)


def _list_item_paragraph(
    text: str, depth: int, ordered: bool, index: int, styles: StyleSheet
) -> ParagraphBlock:
    marker = f"{index}. " if ordered else BULLET
    marker_run = StyledRun.from_style(marker, styles.body, bold=ordered)
    item_spacing = NESTED_LIST_SPACING if depth > 0 else LIST_SPACING
    return ParagraphBlock(
        runs=[marker_run, *parse_inline_runs(text.strip(), styles)],
        indent=Indent(
            left=LIST_INDENT_UNIT * (depth + 1),
            hanging=LIST_HANGING_ORDERED if ordered else LIST_HANGING_BULLET,
        ),
        spacing=Spacing(before=item_spacing, after=item_spacing, line=LIST_LINE_SPACING),
    )


class BlockRenderer:
    """按 token 类型分派渲染，输出有序的文档块序列。"""

    def __init__(self, styles: StyleSheet = DEFAULT_STYLES) -> None:
        self.styles = styles
        self._handlers: Dict[type, TokenHandler] = {
            Heading: self._render_heading,
            Paragraph: self._render_paragraph,
            Code: self._render_code,
            Table: self._render_table,
            ListToken: self._render_list,
            Blockquote: self._render_blockquote,
            HorizontalRule: self._render_rule,
        }

    def render(self, tokens: Sequence[Token]) -> List[Block]:
        blocks: List[Block] = []
        for token in tokens:
            handler = self._handlers.get(type(token))
            if handler is None:
                logger.debug("Skipping unsupported token: %r", token)
                continue
            handler(token, blocks)
        return blocks

    def _render_heading(self, token: Heading, out: List[Block]) -> None:
        style = self.styles.heading_style(token.depth)
        spacer = None
        spacing = Spacing(before=0, after=0)
        if token.depth == 1:
            spacer = Spacing(before=0.3)
            spacing = Spacing(before=0.5, after=0.3)
        elif token.depth == 2:
            spacer = Spacing(before=0.15, after=0.15)
        out.append(
            ParagraphBlock(
                runs=[StyledRun.from_style(token.text, style)],
                spacing=spacing,
                heading_level=token.depth,
                spacer=spacer,
            )
        )

    def _render_paragraph(self, token: Paragraph, out: List[Block]) -> None:
        out.append(
            ParagraphBlock(
                runs=parse_inline_runs(token.text, self.styles),
                alignment=ALIGN_JUSTIFY,
                indent=Indent(first_line=BODY_FIRST_LINE_INDENT),
                spacing=Spacing(line=BODY_LINE_SPACING),
            )
        )

    def _render_code(self, token: Code, out: List[Block]) -> None:
        code_style = self.styles.code
        runs: List[StyledRun] = []
        for index, line in enumerate(token.text.split("\n")):
            if index > 0:
                runs.append(StyledRun.break_marker(code_style))
            runs.append(StyledRun.from_style(line, code_style, code=True))
        out.append(
            ParagraphBlock(
                runs=runs,
                alignment=ALIGN_LEFT,
                indent=Indent(left=CODE_INDENT),
                spacing=Spacing(before=CODE_SPACING, after=CODE_SPACING),
            )
        )

    def _render_table(self, token: Table, out: List[Block]) -> None:
        body = self.styles.body

        def cell(text: str, header: bool) -> ParagraphBlock:
            return ParagraphBlock(
                runs=[StyledRun.from_style(text, body, bold=header)],
                alignment=ALIGN_CENTER if header else None,
            )

        out.append(
            TableBlock(
                header=[cell(text, True) for text in token.header],
                rows=[[cell(text, False) for text in row] for row in token.rows],
            )
        )

    def _render_list(self, token: ListToken, out: List[Block]) -> None:
        render_list(out, token, 0, "", self.styles)

    def _render_blockquote(self, token: Blockquote, out: List[Block]) -> None:
        for quote in token.tokens:
            if not isinstance(quote, Paragraph):
                continue
            out.append(
                ParagraphBlock(
                    runs=[StyledRun.from_style(quote.text, self.styles.body, italic=True)],
                    indent=Indent(left=QUOTE_INDENT, right=QUOTE_INDENT),
                    spacing=Spacing(
                        before=QUOTE_SPACING,
                        after=QUOTE_SPACING,
                        line=QUOTE_LINE_SPACING,
                        line_rule=LINE_RULE_AUTO,
                    ),
                    left_border=QUOTE_BORDER,
                )
            )

    def _render_rule(self, token: HorizontalRule, out: List[Block]) -> None:
        out.append(
            ParagraphBlock(
                runs=[StyledRun.from_style(RULE_CHAR * RULE_WIDTH, self.styles.body)],
                alignment=ALIGN_CENTER,
                spacing=Spacing(before=RULE_SPACING, after=RULE_SPACING),
            )
        )
