import pytest

from gw2dat.hexview import (
    BYTES_PER_LINE,
    HexLine,
    filter_text_char,
    format_hex_dump,
    format_offset,
    hex_lines,
    line_count,
    main,
)


def test_filter_text_char_printable():
    assert filter_text_char(ord("A")) == "A"
    assert filter_text_char(ord(" ")) == " "
    assert filter_text_char(ord("~")) == "~"


@pytest.mark.parametrize("value", [0, 10, 31, 127, 128, 173, 255])
def test_filter_text_char_non_printable(value):
    assert filter_text_char(value) == "."


def test_format_offset():
    assert format_offset(0) == "00000000h"
    assert format_offset(0x10) == "00000010h"
    assert format_offset(0xABCDEF12) == "abcdef12h"


@pytest.mark.parametrize(
    "size, expected", [(0, 1), (1, 1), (16, 1), (17, 2), (32, 2), (33, 3)]
)
def test_line_count(size, expected):
    assert line_count(size) == expected


def test_line_count_negative():
    with pytest.raises(ValueError):
        line_count(-1)


def test_hex_lines_round_trip():
    data = bytes(range(256)) + b"tail"
    lines = list(hex_lines(data))
    assert len(lines) == line_count(len(data))
    assert b"".join(line.data for line in lines) == data
    assert b"".join(bytes.fromhex(line.hex) for line in lines) == data
    assert [line.offset for line in lines] == [
        i * BYTES_PER_LINE for i in range(len(lines))
    ]


def test_hex_lines_empty_has_one_line():
    lines = list(hex_lines(b""))
    assert lines == [HexLine(0, b"")]


def test_hex_line_text_and_hex():
    line = HexLine(0, b"Hi\x00")
    assert line.text == "Hi."
    assert line.hex == "48 69 00"


def test_format_hex_dump_lines():
    data = b"ABCDEFGHIJKLMNOPQ"
    dump = format_hex_dump(data).splitlines()
    assert len(dump) == 2
    assert dump[0].startswith("00000000h")
    assert dump[0].endswith("ABCDEFGHIJKLMNOP")
    assert dump[1].startswith("00000010h")
    assert dump[1].endswith("Q")


def test_main_prints_dump(tmp_path, capsys):
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\x01hello")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.strip() == format_hex_dump(b"\x01hello")


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.bin")]) == 1
    assert "error" in capsys.readouterr().err