from pathlib import Path

import pytest
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn

from doc_processor.common.errors import DocumentSerializationError
from doc_processor.converter import convert_markdown, render_markdown_to_bytes
from doc_processor.converter.assembler import serialize_blocks
from doc_processor.converter.blocks import ParagraphBlock, StyledRun


def _convert(source: str, output_dir: Path):
    path = convert_markdown(source, output_dir / "doc.docx")
    return Document(str(path))


def test_title_and_body_written_in_order(output_dir: Path):
    doc = _convert("# Title\n\nHello **world**.\n", output_dir)
    paragraphs = doc.paragraphs
    # 标题前的空白段落 + 标题 + 正文
    assert [p.text for p in paragraphs] == ["", "Title", "Hello world."]
    assert paragraphs[1].style.name == "Heading 1"
    body = paragraphs[2]
    assert body.alignment == WD_ALIGN_PARAGRAPH.JUSTIFY
    assert [run.text for run in body.runs] == ["Hello ", "world", "."]
    assert body.runs[1].bold is True
    assert body.runs[0].bold is False


def test_runs_carry_east_asian_font(output_dir: Path):
    doc = _convert("正文\n", output_dir)
    run = doc.paragraphs[0].runs[0]
    r_fonts = run._element.rPr.rFonts
    assert r_fonts.get(qn("w:eastAsia")) == "仿宋_GB2312"
    assert run.font.size.pt == 16


def test_list_indentation(output_dir: Path):
    doc = _convert("1. a\n   - b\n", output_dir)
    top, nested = doc.paragraphs
    assert top.text == "1. a"
    assert top.paragraph_format.left_indent.twips == 432
    assert top.paragraph_format.first_line_indent.twips == -432
    assert nested.text == "• b"
    assert nested.paragraph_format.left_indent.twips == 864
    assert nested.paragraph_format.first_line_indent.twips == -288


def test_code_block_line_breaks(output_dir: Path):
    doc = _convert("```\na\nb\n```\n", output_dir)
    paragraph = doc.paragraphs[0]
    assert paragraph.text == "a\nb"
    assert paragraph.paragraph_format.left_indent.twips == 720


def test_table_grid(output_dir: Path):
    doc = _convert("| a | b |\n| --- | --- |\n| 1 |\n", output_dir)
    assert len(doc.tables) == 1
    table = doc.tables[0]
    assert [cell.text for cell in table.rows[0].cells] == ["a", "b"]
    assert [cell.text for cell in table.rows[1].cells] == ["1", ""]
    header_run = table.cell(0, 0).paragraphs[0].runs[0]
    assert header_run.bold is True
    assert table.cell(0, 0).paragraphs[0].alignment == WD_ALIGN_PARAGRAPH.CENTER

    tbl_pr = table._tbl.tblPr
    borders = tbl_pr.find(qn("w:tblBorders"))
    assert borders is not None
    assert len(borders) == 6
    assert tbl_pr.find(qn("w:tblW")).get(qn("w:type")) == "pct"


def test_blockquote_left_border(output_dir: Path):
    doc = _convert("> quoted\n", output_dir)
    paragraph = doc.paragraphs[0]
    assert paragraph.runs[0].italic is True
    border = paragraph._p.pPr.find(qn("w:pBdr")).find(qn("w:left"))
    assert border.get(qn("w:color")) == "808080"


def test_output_is_deterministic():
    source = "# 标题\n\n正文 **加粗** *斜体*\n\n| a |\n| --- |\n| 1 |\n\n- x\n"
    first = render_markdown_to_bytes(source)
    second = render_markdown_to_bytes(source)
    assert first.startswith(b"PK")
    assert first == second


def test_serializer_rejection_is_wrapped():
    blocks = [ParagraphBlock(runs=[StyledRun(text="bad\x00", font="Arial", size=12)])]
    with pytest.raises(DocumentSerializationError):
        serialize_blocks(blocks)


def test_no_file_written_when_serialization_fails(output_dir: Path):
    with pytest.raises(DocumentSerializationError):
        convert_markdown("bad \x01 text\n", output_dir / "doc.docx")
    assert not output_dir.exists()


def test_creates_missing_directories(output_dir: Path):
    path = convert_markdown("text\n", output_dir / "deeper" / "doc.docx")
    assert path.exists()
    assert path.read_bytes().startswith(b"PK")
