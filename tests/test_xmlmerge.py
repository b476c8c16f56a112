import pytest

from pwlocalize.xmlmerge import (
    close_bracket,
    collect_blocks,
    end_line,
    extract_name,
    is_usable,
    merge,
    open_bracket,
)

HEADER_SOURCE = '<?xml version="1.0" encoding="UTF-16"?>\r'
HEADER_TRANSLATED = '<?xml version="1.0" encoding="UTF-16" standalone="yes"?>\r'

SOURCE = [
    HEADER_SOURCE,
    "<DIALOG>\r",
    '<LABEL Name="ok" x="1" y="2">\r',
    "<Text>zh</Text>\r",
    "</LABEL>\r",
    "</DIALOG>\r",
]

TRANSLATED = [
    HEADER_TRANSLATED,
    "<DIALOG>\r",
    '<LABEL Name="ok" x="1" y="2">\r',
    "<Text>ru</Text>\r",
    "</LABEL>\r",
    '<LABEL Name="extra" x="3" y="4"/>\r',
    "</DIALOG>\r",
]


def test_open_bracket_finds_label():
    assert open_bracket('\t<LABEL Name="a">') == 2


def test_open_bracket_prefers_list_order():
    assert open_bracket("<EDIT/><IMAGEPICTURE/>") == 0


def test_open_bracket_none_for_other_tags():
    assert open_bracket("<DIALOG>") is None


def test_close_bracket():
    assert close_bracket("\t</LABEL>\r", 2) is True
    assert close_bracket("\t</EDIT>\r", 2) is False


def test_close_bracket_rejects_unknown_index():
    with pytest.raises(IndexError):
        close_bracket("</LABEL>", 16)


def test_end_line():
    assert end_line(3, 3, '<EDIT Name="e"/>') is True
    assert end_line(3, 4, '<EDIT Name="e"/>') is False
    assert end_line(3, 3, '<EDIT Name="e">') is False


def test_extract_name():
    assert extract_name('<LABEL Name="Title" x="1">') == "Title"
    assert extract_name("<LABEL x=\"1\">") is None


def test_is_usable_accepts_plain_control():
    assert is_usable('<LABEL Name="a" x="5" y="3"/>\r') is True


@pytest.mark.parametrize(
    "block",
    [
        '<LABEL Name="a" x="-5" y="3"/>\r',
        '<LABEL Name="a" x="5" y="-3"/>\r',
        '<SUBDIALOG Name="a">\r<LABEL Name="b"/>\r</SUBDIALOG>\r',
    ],
)
def test_is_usable_rejects(block):
    assert is_usable(block) is False


def test_collect_blocks_multi_line():
    lines = [
        "<DIALOG>\r",
        '\t<LABEL Name="ok" x="1" y="2">\r',
        "\t\t<Text>Hi</Text>\r",
        "\t</LABEL>\r",
        "</DIALOG>\r",
    ]
    assert collect_blocks(lines) == {"ok": "".join(lines[1:4])}


def test_collect_blocks_single_line():
    line = '<EDIT Name="e" x="1" y="1"/>\r'
    assert collect_blocks(["<DIALOG>\r", line, "</DIALOG>\r"]) == {"e": line}


def test_collect_blocks_unterminated_block_runs_to_end():
    lines = ['<LABEL Name="x">\r', "<Text>a</Text>\r"]
    assert collect_blocks(lines) == {"x": "".join(lines)}


def test_merge_replaces_and_appends():
    assert merge(SOURCE, TRANSLATED) == [
        HEADER_TRANSLATED,
        "<DIALOG>\r",
        "".join(TRANSLATED[2:5]),
        "</DIALOG>\r",
        TRANSLATED[5],
    ]


def test_merge_keeps_source_block_with_negative_coordinates():
    translated = list(TRANSLATED)
    translated[2] = '<LABEL Name="ok" x="-1" y="2">\r'
    result = merge(SOURCE, translated)
    assert result[2] == "".join(SOURCE[2:5])
    assert result[-1] == TRANSLATED[5]
    assert len(result) == 5


def test_merge_without_translation_joins_blocks():
    assert merge(SOURCE, []) == [
        HEADER_SOURCE,
        "<DIALOG>\r",
        "".join(SOURCE[2:5]),
        "</DIALOG>\r",
    ]


def test_merge_replaces_single_line_control():
    source = ["<DIALOG>\r", '<EDIT Name="e" x="1" y="1"/>\r', "</DIALOG>\r"]
    translated = ["<DIALOG>\r", '<EDIT Name="e" x="7" y="8"/>\r', "</DIALOG>\r"]
    assert merge(source, translated) == translated


def test_merge_empty_source_gives_translated_blocks():
    assert merge([], TRANSLATED) == list(collect_blocks(TRANSLATED).values())