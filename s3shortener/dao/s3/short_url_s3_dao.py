"""Data Access Object (DAO) implementation for persisting shortened URLs in S3

Each short URL is stored as its own JSON object. There is no index or
catalog: the object key alone identifies the record.

    s3://<bucket>/[<prefix>/]<shortcode>.json
    {"originalUrl": "https://example.com", "expirationTime": 1700000000}

Classes:
    ShortURLS3DAO:
        DAO for storing ShortURLModel records in an S3 bucket.
"""

import logging

from beartype import beartype

from s3shortener.constants import Storage
from s3shortener.models import ShortURLModel
from s3shortener.dao.base import ShortURLBaseDAO
from s3shortener.dao.s3.mixins import S3ClientMixin
from s3shortener.dao.s3.helpers import handle_s3_write_error


logger = logging.getLogger(__name__)


class ShortURLS3DAO(S3ClientMixin, ShortURLBaseDAO):
    """S3-based Data Access Object (DAO) for persisting short URL records

    Attributes (see S3ClientMixin):
        s3 (S3Client):
            boto3 S3 client.
        bucket (str):
            Target bucket name.
        keys (S3KeySchema):
            Key schema helper for generating object keys.

    Example:
        >>> dao = ShortURLS3DAO(bucket='my-shortener-bucket')
        >>> record = ShortURLModel(original_url='https://example.com', expiration_time=1700000000)
        >>> dao.insert(record, shortcode='3f2b8c1e')
        <ShortURLS3DAO>
    """

    @handle_s3_write_error
    @beartype
    def insert(self, short_url: ShortURLModel, shortcode: str, **kwargs) -> 'ShortURLS3DAO':
        """Write a short URL record to S3

        The object is written unconditionally. An existing object under the
        same key is overwritten.

        Args:
            short_url (ShortURLModel):
                Record to persist.
            shortcode (str):
                Short code used to derive the object key.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLS3DAO: self (for method chaining)

        Raises:
            StorageWriteError:
                If S3 rejects the request or is unreachable.
        """
        key = self.keys.link_key(shortcode)
        self.s3.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=short_url.to_json().encode('utf-8'),
            ContentType=Storage.CONTENT_TYPE,
        )
        logger.debug('Stored short URL record.', extra={'bucket': self.bucket, 'key': key})
        return self
