"""行内标记解析：把一段原始行内文本拆成带样式的文本片段。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .blocks import StyledRun
from .styles import DEFAULT_STYLES, StyleSheet


@dataclass
class InlineState:
    bold: bool = False
    italic: bool = False
    strike: bool = False
    code: bool = False


def parse_inline_runs(text: str, styles: StyleSheet = DEFAULT_STYLES) -> List[StyledRun]:
    """按标记切换样式状态；未闭合的标记保持开启到文本结尾，不视为错误。"""
    runs: List[StyledRun] = []
    buffer: List[str] = []
    state = InlineState()

    def flush_buffer() -> None:
        if not buffer:
            return
        style = styles.code if state.code else styles.body
        runs.append(
            StyledRun(
                text="".join(buffer),
                font=style.font,
                size=style.size,
                bold=state.bold,
                italic=state.italic,
                strike=state.strike,
                code=state.code,
            )
        )
        buffer.clear()

    i = 0
    while i < len(text):
        if text[i] == "`":
            flush_buffer()
            state.code = not state.code
            i += 1
            continue
        if text.startswith("***", i):
            flush_buffer()
            state.bold = not state.bold
            state.italic = not state.italic
            i += 3
            continue
        if text.startswith("**", i):
            flush_buffer()
            state.bold = not state.bold
            i += 2
            continue
        if text.startswith("~~", i):
            flush_buffer()
            state.strike = not state.strike
            i += 2
            continue
        if text[i] == "*":
            # 连续的 * 已由上面的分支处理，这里只剩单个斜体标记
            flush_buffer()
            state.italic = not state.italic
            i += 1
            continue
        buffer.append(text[i])
        i += 1

    flush_buffer()
    return runs
