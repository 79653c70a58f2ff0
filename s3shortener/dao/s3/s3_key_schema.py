"""Centralized S3 object key schema

All S3 object keys used by the application are generated through this class
so that the bucket layout is defined in one place.

Key layout:
    - Short URL record: [<prefix>/]<shortcode>.json

Example:
    >>> keys = S3KeySchema()
    >>> keys.link_key('3f2b8c1e')
    '3f2b8c1e.json'
    >>> S3KeySchema(prefix='links').link_key('3f2b8c1e')
    'links/3f2b8c1e.json'
"""

from s3shortener.constants import Storage


class S3KeySchema:
    """Generate S3 object keys, optionally namespaced under a prefix."""

    def __init__(self, prefix: str | None = None):
        self.prefix = prefix.strip('/') if prefix else None

    def _namespaced(self, key: str) -> str:
        return f'{self.prefix}/{key}' if self.prefix else key

    def link_key(self, shortcode: str) -> str:
        return self._namespaced(f'{shortcode}{Storage.OBJECT_EXTENSION}')
