import pytest

from exif_sidecar.utils import exif_display


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, "row 0 at top and column 0 at left"),
        (6, "row 0 at right and column 0 at top"),
        (8, "row 0 at left and column 0 at bottom"),
        ((3,), "row 0 at bottom and column 0 at right"),
        (9, "unknown orientation 9"),
    ],
)
def test_display_orientation(value, expected) -> None:
    assert exif_display.display_orientation(value) == expected


def test_display_ascii_quotes_and_drops_nul() -> None:
    assert exif_display.display_ascii(b"Canon EOS 5D Mark IV\x00") == '"Canon EOS 5D Mark IV"'


def test_display_ascii_escapes() -> None:
    assert exif_display.display_ascii(b'a"b\\c\x01') == '"a\\"b\\\\c\\x01"'


def test_display_ascii_multiple_strings() -> None:
    assert exif_display.display_ascii(b"one\x00two\x00") == '"one", "two"'


def test_display_datetime_reformats_exif_datetime() -> None:
    assert exif_display.display_datetime(b"2019:07:26 13:25:33") == "2019-07-26 13:25:33"


def test_display_datetime_falls_back_to_ascii() -> None:
    assert exif_display.display_datetime(b"    :  :     :  :  ") == '"    :  :     :  :  "'
    assert exif_display.display_datetime(b"yesterday") == '"yesterday"'


def test_display_default() -> None:
    assert exif_display.display_default(72) == "72"
    assert exif_display.display_default((1, 2, 3)) == "1, 2, 3"
    assert exif_display.display_default(b"text") == '"text"'
