import functools
from typing import Any
from collections.abc import Callable

from botocore.exceptions import BotoCoreError, ClientError

from s3shortener.dao.exceptions import StorageWriteError


__all__ = []


def handle_s3_write_error[F: Callable[..., Any]](method: F) -> F:
    """Wrap S3-writing DAO methods to surface every boto failure uniformly

    Network, permission, quota and serialization failures are not told apart:
    all of them become StorageWriteError carrying the underlying cause text.

    Args:
        method (Callable[..., Any]):
            DAO method performing S3 writes which may raise botocore exceptions.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises StorageWriteError on any boto failure.

    Example:
        >>> @handle_s3_write_error
        ... def put(self, key, body):
        ...     return self.s3.put_object(Bucket=self.bucket, Key=key, Body=body)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (ClientError, BotoCoreError) as e:
            raise StorageWriteError(f'Cannot save URL data on S3 bucket {self.bucket!r}: {e}') from e

    return wrapper
