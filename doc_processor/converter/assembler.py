"""文档组装：把渲染好的块序列写成单节 Word 文档。

输出需要可复现：核心属性固定取值，zip 条目时间戳统一为 1980-01-01，
同一份 markdown 两次转换得到逐字节相同的结果。
"""

from __future__ import annotations

import io
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Iterable

from docx import Document
from docx.enum.table import WD_CELL_VERTICAL_ALIGNMENT
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_LINE_SPACING
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt, RGBColor

from ..common.errors import DocumentSerializationError
from ..common.logging import get_logger
from .blocks import (
    ALIGN_CENTER,
    ALIGN_JUSTIFY,
    ALIGN_LEFT,
    LINE_RULE_EXACT,
    Block,
    Border,
    ParagraphBlock,
    Spacing,
    StyledRun,
    TableBlock,
)

logger = get_logger(__name__)

DOCUMENT_AUTHOR = "doc-processor"
FIXED_TIMESTAMP = datetime(2000, 1, 1)
ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)

_ALIGNMENTS = {
    ALIGN_LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    ALIGN_CENTER: WD_ALIGN_PARAGRAPH.CENTER,
    ALIGN_JUSTIFY: WD_ALIGN_PARAGRAPH.JUSTIFY,
}

# w:pPr 中排在 w:pBdr 之后的元素，插入边框时需保持顺序
_PBDR_SUCCESSORS = (
    "w:shd",
    "w:tabs",
    "w:suppressAutoHyphens",
    "w:kinsoku",
    "w:wordWrap",
    "w:overflowPunct",
    "w:topLinePunct",
    "w:autoSpaceDE",
    "w:autoSpaceDN",
    "w:bidi",
    "w:adjustRightInd",
    "w:snapToGrid",
    "w:spacing",
    "w:ind",
    "w:contextualSpacing",
    "w:mirrorIndents",
    "w:suppressOverlap",
    "w:jc",
    "w:textDirection",
    "w:textAlignment",
    "w:textboxTightWrap",
    "w:outlineLvl",
    "w:divId",
    "w:cnfStyle",
    "w:rPr",
    "w:sectPr",
    "w:pPrChange",
)
_TBL_BORDERS_SUCCESSORS = ("w:shd", "w:tblLayout", "w:tblCellMar", "w:tblLook")
_TABLE_EDGES = ("top", "left", "bottom", "right", "insideH", "insideV")


def ensure_rfonts(element, east_asia_font: str, ascii_font: str) -> None:
    r_pr = element.get_or_add_rPr()
    r_fonts = r_pr.find(qn("w:rFonts"))
    if r_fonts is None:
        r_fonts = OxmlElement("w:rFonts")
        r_pr.append(r_fonts)
    r_fonts.set(qn("w:eastAsia"), east_asia_font)
    r_fonts.set(qn("w:ascii"), ascii_font)
    r_fonts.set(qn("w:hAnsi"), ascii_font)


def _border_element(tag: str, border: Border):
    node = OxmlElement(f"w:{tag}")
    node.set(qn("w:val"), border.style)
    node.set(qn("w:sz"), str(border.size))
    node.set(qn("w:space"), "0")
    node.set(qn("w:color"), border.color)
    return node


def set_left_border(paragraph, border: Border) -> None:
    p_pr = paragraph._p.get_or_add_pPr()
    p_bdr = OxmlElement("w:pBdr")
    p_bdr.append(_border_element("left", border))
    p_pr.insert_element_before(p_bdr, *_PBDR_SUCCESSORS)


def set_table_borders(table, border: Border) -> None:
    tbl_pr = table._tbl.tblPr
    tbl_borders = OxmlElement("w:tblBorders")
    for edge in _TABLE_EDGES:
        tbl_borders.append(_border_element(edge, border))
    tbl_pr.insert_element_before(tbl_borders, *_TBL_BORDERS_SUCCESSORS)


def set_table_full_width(table) -> None:
    tbl_pr = table._tbl.tblPr
    tbl_w = tbl_pr.find(qn("w:tblW"))
    if tbl_w is None:
        tbl_w = OxmlElement("w:tblW")
        tbl_pr.insert_element_before(tbl_w, "w:jc", "w:tblInd", "w:tblBorders", *_TBL_BORDERS_SUCCESSORS)
    tbl_w.set(qn("w:type"), "pct")
    tbl_w.set(qn("w:w"), "5000")


def apply_run(paragraph, run_spec: StyledRun) -> None:
    run = paragraph.add_run(run_spec.text)
    if run_spec.line_break:
        run.add_break()
    run.font.name = run_spec.font
    ensure_rfonts(run._element, run_spec.font, run_spec.font)
    run.font.size = Pt(run_spec.size)
    run.font.color.rgb = RGBColor.from_string(run_spec.color)
    run.font.bold = run_spec.bold
    if run_spec.italic:
        run.font.italic = True
    if run_spec.strike:
        run.font.strike = True


def apply_spacing(paragraph, spacing: Spacing) -> None:
    fmt = paragraph.paragraph_format
    if spacing.before is not None:
        fmt.space_before = Inches(spacing.before)
    if spacing.after is not None:
        fmt.space_after = Inches(spacing.after)
    if spacing.line is None:
        return
    if spacing.line_rule == LINE_RULE_EXACT:
        fmt.line_spacing_rule = WD_LINE_SPACING.EXACTLY
        fmt.line_spacing = Pt(spacing.line)
    else:
        fmt.line_spacing = spacing.line


def fill_paragraph(paragraph, block: ParagraphBlock) -> None:
    if block.left_border is not None:
        set_left_border(paragraph, block.left_border)
    fmt = paragraph.paragraph_format
    if block.alignment is not None:
        paragraph.alignment = _ALIGNMENTS[block.alignment]
    apply_spacing(paragraph, block.spacing)
    indent = block.indent
    if indent.left is not None:
        fmt.left_indent = Inches(indent.left)
    if indent.right is not None:
        fmt.right_indent = Inches(indent.right)
    if indent.hanging is not None:
        fmt.first_line_indent = Inches(-indent.hanging)
    elif indent.first_line is not None:
        fmt.first_line_indent = Inches(indent.first_line)
    for run_spec in block.runs:
        apply_run(paragraph, run_spec)


def add_paragraph_block(doc, block: ParagraphBlock) -> None:
    if block.spacer is not None:
        apply_spacing(doc.add_paragraph(), block.spacer)
    style = f"Heading {block.heading_level}" if block.heading_level else None
    fill_paragraph(doc.add_paragraph(style=style), block)


def add_table_block(doc, block: TableBlock) -> None:
    col_count = block.column_count
    if col_count == 0:
        return
    table = doc.add_table(rows=1 + len(block.rows), cols=col_count)
    set_table_full_width(table)
    set_table_borders(table, block.border)

    def fill_row(row_index: int, cells: list[ParagraphBlock], header: bool) -> None:
        for col_index, cell_block in enumerate(cells[:col_count]):
            cell = table.cell(row_index, col_index)
            if header:
                cell.vertical_alignment = WD_CELL_VERTICAL_ALIGNMENT.CENTER
            fill_paragraph(cell.paragraphs[0], cell_block)

    fill_row(0, block.header, True)
    for row_index, row in enumerate(block.rows, start=1):
        fill_row(row_index, row, False)


def build_document(blocks: Iterable[Block]):
    """在默认模板的唯一节中按顺序写入所有块。"""
    doc = Document()
    props = doc.core_properties
    props.author = DOCUMENT_AUTHOR
    props.last_modified_by = DOCUMENT_AUTHOR
    props.created = FIXED_TIMESTAMP
    props.modified = FIXED_TIMESTAMP
    props.revision = 1
    for block in blocks:
        if isinstance(block, TableBlock):
            add_table_block(doc, block)
        else:
            add_paragraph_block(doc, block)
    return doc


def _normalize_container(data: bytes) -> bytes:
    """重写 zip，统一条目时间戳。"""
    output = io.BytesIO()
    with zipfile.ZipFile(io.BytesIO(data)) as source, zipfile.ZipFile(
        output, "w", compression=zipfile.ZIP_DEFLATED
    ) as target:
        for item in source.infolist():
            info = zipfile.ZipInfo(item.filename, date_time=ZIP_DATE_TIME)
            info.compress_type = zipfile.ZIP_DEFLATED
            target.writestr(info, source.read(item.filename))
    return output.getvalue()


def serialize_blocks(blocks: Iterable[Block]) -> bytes:
    """生成 docx 字节流。python-docx 拒绝内容时抛出 DocumentSerializationError。"""
    try:
        doc = build_document(blocks)
        buffer = io.BytesIO()
        doc.save(buffer)
    except (ValueError, KeyError, TypeError) as exc:
        raise DocumentSerializationError(str(exc)) from exc
    return _normalize_container(buffer.getvalue())


def write_document(data: bytes, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    logger.info("Wrote %d bytes to %s", len(data), output_path)
    return output_path


def assemble(blocks: Iterable[Block], output_path: Path) -> Path:
    """序列化并写盘；序列化成功后才创建目录与文件。"""
    return write_document(serialize_blocks(blocks), output_path)
