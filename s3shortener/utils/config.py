"""Utility functions for application configuration management.

The shortener is configured exclusively through environment variables set
on the Lambda function by the deployment template:

    BUCKET_NAME         : S3 bucket receiving the short URL records (required)
    BUCKET_KEY_PREFIX   : Key prefix inside the bucket (optional)

The bucket is fixed per deployment. Lambdas read it once per invocation and
hand it to the DAO constructor.

Typical usage inside a Lambda handler:
    >>> from s3shortener.utils.config import bucket_name
    >>> bucket_name()
    'my-shortener-bucket'
"""

import os

from s3shortener.constants import ENV
from s3shortener.utils.helpers import require_environment


@require_environment(ENV.S3.BUCKET_NAME)
def bucket_name() -> str:
    """Return the target S3 bucket name by reading 'BUCKET_NAME'

    Raises:
        MissingEnvironmentVariableError: If `BUCKET_NAME` is unset or empty.
    """
    return os.environ[ENV.S3.BUCKET_NAME]


def bucket_key_prefix() -> str | None:
    """Return the object key prefix, or None if 'BUCKET_KEY_PREFIX' is unset or empty."""
    return os.environ.get(ENV.S3.KEY_PREFIX) or None
