"""转换流水线：修复嵌套列表 → 解析 → 渲染 → 组装 → 写盘。"""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..common.logging import get_logger
from .assembler import assemble, serialize_blocks
from .blocks import Block
from .normalizer import normalize_nested_lists
from .renderer import BlockRenderer
from .styles import DEFAULT_STYLES, StyleSheet
from .tokens import tokenize

logger = get_logger(__name__)


def render_markdown(
    markdown: str, *, gfm: bool = True, styles: StyleSheet = DEFAULT_STYLES
) -> List[Block]:
    """把 markdown 文本渲染为有序的文档块序列。"""
    tokens = tokenize(normalize_nested_lists(markdown), gfm=gfm)
    blocks = BlockRenderer(styles).render(tokens)
    logger.debug("Rendered %d token(s) into %d block(s)", len(tokens), len(blocks))
    return blocks


def render_markdown_to_bytes(
    markdown: str, *, gfm: bool = True, styles: StyleSheet = DEFAULT_STYLES
) -> bytes:
    return serialize_blocks(render_markdown(markdown, gfm=gfm, styles=styles))


def convert_markdown(
    markdown: str,
    output_path: Path,
    *,
    gfm: bool = True,
    styles: StyleSheet = DEFAULT_STYLES,
) -> Path:
    """完整转换并写出 docx 文件，返回写入路径。"""
    return assemble(render_markdown(markdown, gfm=gfm, styles=styles), output_path)
