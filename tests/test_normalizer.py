from doc_processor.converter.normalizer import normalize_nested_lists
from doc_processor.converter.tokens import ListToken, tokenize


def test_dash_lines_under_bold_numbered_item_are_indented():
    source = "1. **Step**\n- sub a\n- sub b\n"
    assert normalize_nested_lists(source) == "1. **Step**\n   - sub a\n   - sub b\n"


def test_dash_lines_without_numbered_item_are_untouched():
    source = "intro\n- a\n- b\n"
    assert normalize_nested_lists(source) == source


def test_numbered_item_without_bold_does_not_activate():
    source = "1. plain\n- a\n"
    assert normalize_nested_lists(source) == source


def test_blank_line_keeps_active_item():
    source = "2. **两步**\n- a\n\n- b\n"
    assert normalize_nested_lists(source) == "2. **两步**\n   - a\n\n   - b\n"


def test_other_lines_pass_through():
    source = "1. **Step**\ntext line\n# heading\n"
    assert normalize_nested_lists(source) == source


def test_idempotent_on_normalized_text():
    once = normalize_nested_lists("1. **Step**\n- sub a\n- sub b\n")
    assert normalize_nested_lists(once) == once


def test_idempotent_for_text_without_main_items():
    source = "para\n\n- a\n  - b\n\n> quote\n"
    once = normalize_nested_lists(source)
    assert normalize_nested_lists(once) == once


def test_normalized_text_parses_as_nested_list():
    raw = "1. **Step**\n- sub a\n- sub b\n"
    assert len(tokenize(raw)) == 2

    tokens = tokenize(normalize_nested_lists(raw))
    assert len(tokens) == 1
    outer = tokens[0]
    assert isinstance(outer, ListToken) and outer.ordered
    nested = [token for token in outer.items[0].tokens if isinstance(token, ListToken)]
    assert len(nested) == 1
    assert [item.text for item in nested[0].items] == ["sub a", "sub b"]
