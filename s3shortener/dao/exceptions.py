from s3shortener.exceptions import S3ShortenerError


class DAOError(S3ShortenerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include connection issues, timeouts, and permission failures.
    """

    error_code = 'dao:data_store_error'


class StorageWriteError(DataStoreError):
    """Raised when persisting an object to the store fails for any reason."""

    error_code = 'dao:storage_write_error'
