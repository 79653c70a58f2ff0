import json
from dataclasses import dataclass
from typing import Self


# fmt: off
@dataclass(frozen=True)
class ShortenRequest:
    original_url: str | None     # Destination URL exactly as sent (None if absent)
    expiration_time: str | None  # Raw decimal string, parsed later (None if absent)
# fmt: on


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL record as persisted in the object store.

    Attributes:
        original_url (str | None):
            Destination URL, stored verbatim. None when the request omitted it.
        expiration_time (int):
            Expiration timestamp. Stored for later use, never enforced.

    Example:
        >>> record = ShortURLModel(original_url='https://example.com', expiration_time=1700000000)
        >>> record.to_json()
        '{"originalUrl": "https://example.com", "expirationTime": 1700000000}'
        >>> ShortURLModel.from_json(record.to_json()) == record
        True
    """

    original_url: str | None
    expiration_time: int

    def to_json(self) -> str:
        return json.dumps({'originalUrl': self.original_url, 'expirationTime': self.expiration_time})

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        """Deserialize a persisted record.

        Raises:
            json.JSONDecodeError: If `text` is not valid JSON.
            KeyError: If either field is missing.
        """
        payload = json.loads(text)
        return cls(original_url=payload['originalUrl'], expiration_time=payload['expirationTime'])
