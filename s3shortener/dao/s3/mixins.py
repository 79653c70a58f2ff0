"""S3 mixin providing shared client initialization for S3-backed DAOs.

Classes:
    - S3ClientMixin: Base mixin to inject S3 key management and client setup.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLS3DAO(S3ClientMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLS3DAO(bucket='my-shortener-bucket', prefix='links')
        >>> dao.keys.link_key('3f2b8c1e')
        'links/3f2b8c1e.json'
"""

import boto3

from s3shortener.types import S3Client
from s3shortener.dao.s3.s3_key_schema import S3KeySchema
from s3shortener.utils.runtime import running_locally, localstack_endpoint


class S3ClientMixin:
    """Mixin S3 client setup for S3-backed DAOs.

    Attributes:
        s3 (S3Client):
            boto3 S3 client used by subclasses.

        bucket (str):
            Name of the bucket every object is written to.

        keys (S3KeySchema):
            Helper class for generating object keys.
    """

    def __init__(
        self,
        bucket: str,
        s3_client: S3Client | None = None,
        prefix: str | None = None,
    ):
        """Initialize an S3-based DAO

        The option is given to either use an existing S3 client instance or
        create one. In local mode the client targets LocalStack.

        Args:
            bucket (str):
                Target S3 bucket name (fixed per deployment).

            s3_client (S3Client | None):
                Pre-built boto3 S3 client. Created when omitted.

            prefix (str | None):
                Optional object key prefix.
        """
        if not bucket:
            raise ValueError('Bucket name must be a non-empty string.')

        # fmt: off
        s3_client_kwargs = {
            'endpoint_url': localstack_endpoint(),
        } if running_locally() else {}
        # fmt: on

        self.s3 = s3_client or boto3.client('s3', **s3_client_kwargs)
        self.bucket = bucket
        self.keys = S3KeySchema(prefix=prefix)
