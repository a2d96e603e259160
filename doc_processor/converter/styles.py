"""固定排版样式表：语义角色 → 字体、字号、字重。"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_COLOR = "000000"


@dataclass(frozen=True)
class StyleEntry:
    """单个语义角色的排版属性，字号单位为磅。"""

    font: str
    size: float
    bold: bool = False


@dataclass(frozen=True)
class StyleSheet:
    """公文排版样式表，进程内只读共享。"""

    body: StyleEntry
    title: StyleEntry
    section: StyleEntry
    subsection: StyleEntry
    code: StyleEntry

    def heading_style(self, depth: int) -> StyleEntry:
        """按标题层级返回样式，四级及以下回退正文样式。"""
        if depth == 1:
            return self.title
        if depth == 2:
            return self.section
        if depth == 3:
            return self.subsection
        return self.body


DEFAULT_STYLES = StyleSheet(
    body=StyleEntry(font="仿宋_GB2312", size=16),  # 三号
    title=StyleEntry(font="小标宋体", size=18),  # 二号
    section=StyleEntry(font="楷体_GB2312", size=16),
    subsection=StyleEntry(font="仿宋_GB2312", size=16, bold=True),
    code=StyleEntry(font="Courier New", size=12),
)
