import pytest

from timemachinelogs.modes import MODE_PACK, MODE_UNPACK, Mode


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Pack", Mode.PACK),
        ("Unpack", Mode.UNPACK),
        (MODE_PACK, Mode.PACK),
        (MODE_UNPACK, Mode.UNPACK),
        ("PACK", Mode.PACK),
        ("uNpAcK", Mode.UNPACK),
    ],
)
def test_parse_known_modes(text, expected):
    assert Mode.parse(text) is expected


@pytest.mark.parametrize("text", ["", "zip", "packs", " pack"])
def test_parse_unknown_text(text):
    assert Mode.parse(text) is Mode.UNKNOWN


def test_parse_unknown_name_itself():
    assert Mode.parse("unknown") is Mode.UNKNOWN
    assert Mode.parse("unknown").is_valid() is False


def test_is_valid():
    assert Mode.PACK.is_valid() is True
    assert Mode.UNPACK.is_valid() is True
    assert Mode.UNKNOWN.is_valid() is False


@pytest.mark.parametrize("mode", list(Mode))
def test_str_round_trip(mode):
    assert Mode.parse(str(mode)) is mode


def test_str_values():
    assert str(Mode.parse("pack")) == "Pack"
    assert str(Mode.parse("UNPACK")) == "Unpack"
    assert str(Mode.parse("bogus")) == "Unknown"