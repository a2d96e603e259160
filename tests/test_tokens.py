from doc_processor.converter.tokens import (
    Blockquote,
    Code,
    Heading,
    HorizontalRule,
    ListToken,
    Paragraph,
    Table,
    Unsupported,
    tokenize,
)


def test_block_kinds():
    source = (
        "# 标题\n\n"
        "正文 **加粗**\n\n"
        "```python\nprint(1)\n```\n\n"
        "| a | b |\n| --- | --- |\n| 1 | 2 |\n\n"
        "> 引用\n\n"
        "---\n\n"
        "3. c\n4. d\n\n"
        "<div>x</div>\n"
    )
    tokens = tokenize(source)
    assert [type(token) for token in tokens] == [
        Heading,
        Paragraph,
        Code,
        Table,
        Blockquote,
        HorizontalRule,
        ListToken,
        Unsupported,
    ]
    assert tokens[0] == Heading(depth=1, text="标题")
    assert tokens[1] == Paragraph(text="正文 **加粗**")
    assert tokens[2] == Code(text="print(1)", language="python")
    assert tokens[3] == Table(header=("a", "b"), rows=(("1", "2"),))
    assert tokens[4].tokens == (Paragraph(text="引用"),)
    assert tokens[6].ordered is True
    assert tokens[6].start == 3


def test_tables_require_gfm_flag():
    source = "| a | b |\n| --- | --- |\n| 1 | 2 |\n"
    assert isinstance(tokenize(source, gfm=True)[0], Table)
    assert isinstance(tokenize(source, gfm=False)[0], Paragraph)


def test_list_item_text_excludes_nested_list():
    tokens = tokenize("- parent\n  - child\n")
    item = tokens[0].items[0]
    assert item.text == "parent"
    nested = [token for token in item.tokens if isinstance(token, ListToken)]
    assert nested[0].items[0].text == "child"
    assert tokens[0].ordered is False
    assert tokens[0].start == 1


def test_multiline_paragraph_keeps_line_breaks():
    tokens = tokenize("first line\nsecond line\n")
    assert tokens == [Paragraph(text="first line\nsecond line")]
