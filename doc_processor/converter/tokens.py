"""Markdown 结构化 token：封装 markdown-it-py 语法树，只保留渲染需要的字段。

markdown-it-py 配置::

    - CommonMark 基础语法
    - GFM 表格与删除线（gfm=True 时启用）

行内内容保留原始标记文本，由 inline 模块自行拆分样式。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode


@dataclass(frozen=True)
class Heading:
    depth: int
    text: str


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class Code:
    text: str
    language: str = ""


@dataclass(frozen=True)
class Table:
    header: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class ListItem:
    text: str
    tokens: Tuple["Token", ...] = ()


@dataclass(frozen=True)
class ListToken:
    ordered: bool
    items: Tuple[ListItem, ...]
    start: int = 1


@dataclass(frozen=True)
class Blockquote:
    tokens: Tuple["Token", ...] = ()


@dataclass(frozen=True)
class HorizontalRule:
    pass


@dataclass(frozen=True)
class Unsupported:
    """解析器产生但渲染器不处理的块，例如 HTML 块。"""

    type: str


Token = Union[
    Heading,
    Paragraph,
    Code,
    Table,
    ListToken,
    ListItem,
    Blockquote,
    HorizontalRule,
    Unsupported,
]


def create_parser(gfm: bool = True) -> MarkdownIt:
    """Create configured markdown-it parser."""
    md = MarkdownIt("commonmark")
    if gfm:
        md.enable("table")
        md.enable("strikethrough")
    return md


_parsers: dict[bool, MarkdownIt] = {}


def get_parser(gfm: bool = True) -> MarkdownIt:
    """Get or create the shared parser instance for the given dialect."""
    parser = _parsers.get(gfm)
    if parser is None:
        parser = create_parser(gfm)
        _parsers[gfm] = parser
    return parser


def tokenize(markdown: str, gfm: bool = True) -> List[Token]:
    """Parse markdown text into the top-level token stream."""
    root = SyntaxTreeNode(get_parser(gfm).parse(markdown))
    return [_convert(node) for node in root.children]


def _inline_text(node: SyntaxTreeNode) -> str:
    return "".join(child.content for child in node.children if child.type == "inline")


def _convert_children(node: SyntaxTreeNode) -> Tuple[Token, ...]:
    return tuple(_convert(child) for child in node.children)


def _convert_list(node: SyntaxTreeNode) -> ListToken:
    items = []
    for item in node.children:
        # 条目文本只取自身段落，子列表单独保留在 tokens 中
        paragraphs = [_inline_text(child) for child in item.children if child.type == "paragraph"]
        items.append(ListItem(text="\n".join(paragraphs), tokens=_convert_children(item)))
    ordered = node.type == "ordered_list"
    start = int(node.attrs.get("start", 1)) if ordered else 1
    return ListToken(ordered=ordered, items=tuple(items), start=start)


def _convert_table(node: SyntaxTreeNode) -> Table:
    header: Tuple[str, ...] = ()
    rows: List[Tuple[str, ...]] = []
    for section in node.children:
        for row in section.children:
            cells = tuple(_inline_text(cell) for cell in row.children)
            if section.type == "thead":
                header = cells
            else:
                rows.append(cells)
    return Table(header=header, rows=tuple(rows))


def _convert(node: SyntaxTreeNode) -> Token:
    if node.type == "heading":
        return Heading(depth=int(node.tag[1:]), text=_inline_text(node))
    if node.type == "paragraph":
        return Paragraph(text=_inline_text(node))
    if node.type in ("fence", "code_block"):
        text = node.content
        if text.endswith("\n"):
            text = text[:-1]
        return Code(text=text, language=(node.info or "").strip())
    if node.type == "table":
        return _convert_table(node)
    if node.type in ("bullet_list", "ordered_list"):
        return _convert_list(node)
    if node.type == "blockquote":
        return Blockquote(tokens=_convert_children(node))
    if node.type == "hr":
        return HorizontalRule()
    return Unsupported(type=node.type)
