"""Shortcode generation utility

This module derives short codes from random (version 4) UUIDs. The UUID is
rendered in its canonical hyphenated form and truncated:

    3f2b8c1e-9d4a-4f6b-8e2a-7c5d1b0a9f3e
    ^^^^^^^^
    shortcode (length=8)

Properties of the derived code:
    - Alphabet is [0-9a-f-]. With the default length of 8 the code is exactly
      the first group of the UUID, so it contains hex digits only.
    - Entropy is 4 bits per hex digit: 32 bits at length 8. This is far below
      the 122 random bits of the full UUID, so collisions become likely after
      roughly 2**16 codes (birthday bound).
    - No uniqueness check is performed. Storing a colliding code overwrites
      the previous record (last write wins).

Functions:
    generate_shortcode(length=8):
        Generate a short code suitable for use as a URL slug and object key.

Example:
    >>> from s3shortener.utils import generate_shortcode
    >>> generate_shortcode()
    '3f2b8c1e'
"""

import uuid

from s3shortener.constants import Shortcode


UUID_TEXT_LENGTH = 36  # 32 hex digits + 4 hyphens


def generate_shortcode(length: int = Shortcode.LENGTH) -> str:
    """Generate a short code from the canonical text of a random UUID.

    Args:
        length (int, optional):
            Number of leading characters of the UUID text to keep.
            Defaults to 8.

    Returns:
        str: The first `length` characters of `str(uuid.uuid4())`.

    Raises:
        TypeError: If `length` is not an integer.
        ValueError: If `length` is outside 1..36.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if not 1 <= length <= UUID_TEXT_LENGTH:
        raise ValueError(f'Length must be between 1 and {UUID_TEXT_LENGTH} (given value: {length}).')

    return str(uuid.uuid4())[:length]
