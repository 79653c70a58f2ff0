"""Invocation payload parsing for the shorten_url lambda.

The runtime hands the lambda an envelope whose 'body' entry is a JSON document
serialized as a string:

    {"body": "{\"originalUrl\": \"https://example.com\", \"expirationTime\": \"1700000000\"}"}

Both fields travel as JSON strings, even though 'expirationTime' is numeric,
and every other value in the body must be a string as well. Presence of the
fields is not enforced here: an absent 'originalUrl' is stored as null, and an
absent 'expirationTime' fails in parse_expiration_time().
"""

import re
import json
from typing import Any

from s3shortener.types import LambdaEvent
from s3shortener.models import ShortenRequest
from s3shortener.constants import RequestKey, INT64_MIN, INT64_MAX
from s3shortener.exceptions import MissingOrMalformedBodyError, BodyParseError, InvalidExpirationFormatError


# Optional sign followed by ASCII digits only (no whitespace, no underscores)
DECIMAL_INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')
INT64_MAX_DIGITS = len(str(INT64_MAX))


def extract_body(event: LambdaEvent) -> str:
    """Return the raw JSON body carried by the event envelope.

    Raises:
        MissingOrMalformedBodyError:
            If 'body' is absent, null, not a string, or not valid UTF-8.
    """
    body = event.get(RequestKey.BODY)
    if body is None:
        raise MissingOrMalformedBodyError(f"Missing '{RequestKey.BODY}' in request envelope")
    if isinstance(body, (bytes, bytearray)):
        try:
            return body.decode('utf-8')
        except UnicodeDecodeError as e:
            raise MissingOrMalformedBodyError(f"Request '{RequestKey.BODY}' is not valid UTF-8") from e
    if not isinstance(body, str):
        raise MissingOrMalformedBodyError(f"Request '{RequestKey.BODY}' must be a JSON string (given type: {type(body).__name__})")
    return body


def _check_string_values(payload: dict[str, Any]) -> None:
    for key, value in payload.items():
        if value is not None and not isinstance(value, str):
            raise BodyParseError(f"Error parsing JSON body: '{key}' must be a string (given type: {type(value).__name__})")


def parse_body(body: str) -> ShortenRequest:
    """Decode the JSON body into a ShortenRequest.

    The body must be a JSON object whose values are all strings (or null).

    Raises:
        BodyParseError:
            If the body is not valid JSON, not a JSON object, or holds a non-string value.
    """
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError and the integer digit limit
        raise BodyParseError(f'Error parsing JSON body: {e}') from e

    if not isinstance(payload, dict):
        raise BodyParseError(f'Error parsing JSON body: expected an object (given type: {type(payload).__name__})')
    _check_string_values(payload)

    return ShortenRequest(
        original_url=payload.get(RequestKey.ORIGINAL_URL),
        expiration_time=payload.get(RequestKey.EXPIRATION_TIME),
    )


def parse_event(event: LambdaEvent) -> ShortenRequest:
    return parse_body(extract_body(event))


def parse_expiration_time(value: str | None) -> int:
    """Parse a base-10 string into a 64-bit signed integer.

    Stricter than int(): surrounding whitespace, digit separators and
    non-ASCII digits are rejected, and the result must fit in 64 bits.

    Raises:
        InvalidExpirationFormatError:
            If the value is missing or not a valid 64-bit decimal integer.

    Example:
        >>> parse_expiration_time('1700000000')
        1700000000
        >>> parse_expiration_time('not-a-number')
        InvalidExpirationFormatError: Invalid 'expirationTime': 'not-a-number' is not a base-10 integer
    """
    if value is None:
        raise InvalidExpirationFormatError(f"Missing '{RequestKey.EXPIRATION_TIME}' in JSON body")
    if not DECIMAL_INTEGER_PATTERN.fullmatch(value):
        raise InvalidExpirationFormatError(f"Invalid '{RequestKey.EXPIRATION_TIME}': {value!r} is not a base-10 integer")

    # Checked before int() so oversized inputs never reach the digit limit
    if len(value.lstrip('+-').lstrip('0')) > INT64_MAX_DIGITS:
        raise InvalidExpirationFormatError(f"Invalid '{RequestKey.EXPIRATION_TIME}': {value[:32]!r}... is out of 64-bit integer range")

    expiration_time = int(value)
    if not INT64_MIN <= expiration_time <= INT64_MAX:
        raise InvalidExpirationFormatError(f"Invalid '{RequestKey.EXPIRATION_TIME}': {value!r} is out of 64-bit integer range")
    return expiration_time
