import pytest

from teacodec.errors import InvalidLength
from teacodec.keys.generator import BASE64_ALPHABET, generate_random_base_key
from teacodec.keys.table import build_key_table


def test_length_and_charset():
    key = generate_random_base_key(10)
    assert len(key) == 10
    assert set(key) <= set(BASE64_ALPHABET)


def test_default_length():
    assert len(generate_random_base_key()) == 64


def test_successive_calls_differ():
    assert generate_random_base_key(32) != generate_random_base_key(32)


@pytest.mark.parametrize("length", [1, 2, 3, 999, 1000])
def test_boundaries(length):
    assert len(generate_random_base_key(length)) == length


@pytest.mark.parametrize("length", [0, -1, 1001, 2.5, "10", True, None])
def test_invalid_length(length):
    with pytest.raises(InvalidLength):
        generate_random_base_key(length)


def test_generated_key_configures():
    key = generate_random_base_key(200)
    table = build_key_table(key, 300)
    assert len(table) == 200
