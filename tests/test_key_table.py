import pytest

from teacodec.errors import (
    InvalidAlphabet,
    InvalidOffset,
    KeySpaceTooLarge,
    KeySpaceTooSmall,
    TeaCodecError,
)
from teacodec.keys.table import (
    DEFAULT_ALPHABET,
    DEFAULT_OFFSET,
    build_key_table,
    format_key,
)


def test_default_alphabet_shape():
    assert len(DEFAULT_ALPHABET) == 78
    assert len(set(DEFAULT_ALPHABET)) == 76
    assert DEFAULT_ALPHABET.isascii()


def test_default_table_key_space():
    table = build_key_table(DEFAULT_ALPHABET, DEFAULT_OFFSET)
    assert table.first_key == 105
    assert table.last_key == 182
    assert len(table) == 78
    assert table.forward[105] == "a"
    assert table.inverse["a"] == "105"


@pytest.mark.parametrize(
    "key, code",
    [(0, "000"), (7, "007"), (42, "042"), (105, "105"), (999, "999")],
)
def test_format_key_is_zero_padded(key, code):
    assert format_key(key) == code


def test_low_offset_keys_are_padded():
    table = build_key_table("x" * 99 + "y", 0)
    assert table.inverse["y"] == "099"
    assert table.lookup_code("099") == "y"
    assert table.lookup_code("99") is None
    assert table.forward[0] == "x"


class TestValidation:

    @pytest.mark.parametrize("alphabet", ["", "abcé", "日本", None, 123, ["a", "b"]])
    def test_invalid_alphabet(self, alphabet):
        with pytest.raises(InvalidAlphabet):
            build_key_table(alphabet, 200)

    @pytest.mark.parametrize("offset", [-1, 1.5, "325", None, True, float("nan")])
    def test_invalid_offset(self, offset):
        with pytest.raises(InvalidOffset):
            build_key_table("abc", offset)

    def test_integral_float_offset_is_accepted(self):
        table = build_key_table("abc", 200.0)
        assert table.offset == 200
        assert isinstance(table.offset, int)
        assert table.inverse["a"] == "200"

    def test_alphabet_checked_before_offset(self):
        with pytest.raises(InvalidAlphabet):
            build_key_table("", -5)

    def test_offset_checked_before_key_space(self):
        with pytest.raises(InvalidOffset):
            build_key_table("a", -1)

    @pytest.mark.parametrize(
        "length, offset, error",
        [
            (1, 98, KeySpaceTooSmall),
            (99, 0, KeySpaceTooSmall),
            (1, 999, KeySpaceTooLarge),
            (900, 100, KeySpaceTooLarge),
        ],
    )
    def test_key_space_bounds_fail(self, length, offset, error):
        with pytest.raises(error):
            build_key_table("a" * length, offset)

    @pytest.mark.parametrize(
        "length, offset", [(1, 99), (100, 0), (1, 998), (900, 99)]
    )
    def test_key_space_bounds_succeed(self, length, offset):
        table = build_key_table("a" * length, offset)
        assert len(table) == length

    def test_errors_carry_bad_request_status(self):
        with pytest.raises(TeaCodecError) as info:
            build_key_table("a", 1000)
        assert info.value.status_code == 400
        assert info.value.kind == "key_space_too_large"
        assert isinstance(info.value, ValueError)


class TestDuplicateCharacters:

    def test_last_occurrence_wins(self):
        table = build_key_table("abca", 100)
        assert table.inverse["a"] == "103"
        assert table.forward[100] == "a"
        assert table.forward[103] == "a"
        assert table.shadowed_keys == [100]

    def test_default_alphabet_shadowed_keys(self):
        table = build_key_table(DEFAULT_ALPHABET, DEFAULT_OFFSET)
        assert table.shadowed_keys == [144, 147]
        assert table.inverse["/"] == "181"
        assert table.inverse[" "] == "182"
        assert table.lookup_code("144") == "/"
        assert table.lookup_code("147") == " "


def test_table_is_read_only():
    table = build_key_table("abc", 200)
    with pytest.raises(TypeError):
        table.forward[200] = "z"
    with pytest.raises(TypeError):
        table.inverse["a"] = "999"
    with pytest.raises(AttributeError):
        table.offset = 5
