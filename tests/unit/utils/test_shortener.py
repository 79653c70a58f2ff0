"""Unit tests for the generate_shortcode function in shortener.py."""

import re
import uuid

import pytest

from s3shortener.utils import generate_shortcode
from s3shortener.utils import shortener


def test_generate_shortcode_default_length():
    result = generate_shortcode()
    assert isinstance(result, str)
    assert len(result) == 8


def test_generate_shortcode_is_hex_with_default_length():
    """The first 8 characters of a canonical UUID are its first hex group."""
    for _ in range(200):
        assert re.fullmatch(r'[0-9a-f]{8}', generate_shortcode())


def test_generate_shortcode_truncates_canonical_uuid_text(monkeypatch):
    fixed = uuid.UUID('3f2b8c1e-9d4a-4f6b-8e2a-7c5d1b0a9f3e')
    monkeypatch.setattr(shortener.uuid, 'uuid4', lambda: fixed)

    assert generate_shortcode() == '3f2b8c1e'
    assert generate_shortcode(length=13) == '3f2b8c1e-9d4a'
    assert generate_shortcode(length=36) == str(fixed)


@pytest.mark.parametrize('length', [1, 8, 9, 20, 36])
def test_generate_shortcode_alphabet(length):
    assert re.fullmatch(rf'[0-9a-f-]{{{length}}}', generate_shortcode(length=length))


def test_generate_shortcode_is_random():
    codes = {generate_shortcode() for _ in range(100)}
    assert len(codes) > 1


@pytest.mark.parametrize('length', [0, -1, 37])
def test_generate_shortcode_rejects_out_of_range_length(length):
    with pytest.raises(ValueError):
        generate_shortcode(length=length)


@pytest.mark.parametrize('length', ['8', 8.0, None, True])
def test_generate_shortcode_rejects_non_integer_length(length):
    with pytest.raises(TypeError):
        generate_shortcode(length=length)
