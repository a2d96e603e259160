"""渲染结果的文档模型：带样式的文本片段、段落块与表格块。"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .styles import DEFAULT_COLOR, StyleEntry

ALIGN_LEFT = "left"
ALIGN_CENTER = "center"
ALIGN_JUSTIFY = "justify"

LINE_RULE_EXACT = "exact"
LINE_RULE_AUTO = "auto"


@dataclass(frozen=True)
class StyledRun:
    """样式统一的一段文本。line_break 为真时表示显式换行标记。"""

    text: str
    font: str
    size: float
    color: str = DEFAULT_COLOR
    bold: bool = False
    italic: bool = False
    strike: bool = False
    code: bool = False
    line_break: bool = False

    @classmethod
    def from_style(cls, text: str, style: StyleEntry, **flags) -> "StyledRun":
        flags.setdefault("bold", style.bold)
        return cls(text=text, font=style.font, size=style.size, **flags)

    @classmethod
    def break_marker(cls, style: StyleEntry) -> "StyledRun":
        return cls(text="", font=style.font, size=style.size, line_break=True)


@dataclass(frozen=True)
class Spacing:
    """段前段后间距（英寸）与行距（磅或倍数，取决于 line_rule）。"""

    before: Optional[float] = None
    after: Optional[float] = None
    line: Optional[float] = None
    line_rule: str = LINE_RULE_EXACT


@dataclass(frozen=True)
class Indent:
    """缩进（英寸）。hanging 为悬挂缩进。"""

    left: Optional[float] = None
    right: Optional[float] = None
    first_line: Optional[float] = None
    hanging: Optional[float] = None


@dataclass(frozen=True)
class Border:
    style: str = "single"
    size: int = 4
    color: str = DEFAULT_COLOR


@dataclass
class ParagraphBlock:
    """段落块。spacer 非空时在段落前额外输出一个空白段落。"""

    runs: List[StyledRun] = field(default_factory=list)
    alignment: Optional[str] = None
    spacing: Spacing = field(default_factory=Spacing)
    indent: Indent = field(default_factory=Indent)
    left_border: Optional[Border] = None
    heading_level: Optional[int] = None
    spacer: Optional[Spacing] = None

    @property
    def text(self) -> str:
        return "".join("\n" if run.line_break else run.text for run in self.runs)


@dataclass
class TableBlock:
    """表格块，每个单元格为一个段落。"""

    header: List[ParagraphBlock]
    rows: List[List[ParagraphBlock]]
    border: Border = field(default_factory=Border)

    @property
    def column_count(self) -> int:
        return max([len(self.header)] + [len(row) for row in self.rows])


Block = Union[ParagraphBlock, TableBlock]
