"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism (e.g., S3, DynamoDB, in-memory).

Responsibilities:
    - Provide an interface for persisting ShortURLModel records under a shortcode.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from s3shortener.models import ShortURLModel
        >>> from s3shortener.dao.s3 import ShortURLS3DAO

        >>> dao = ShortURLS3DAO(bucket='my-shortener-bucket')
        >>> short_url = ShortURLModel(original_url='https://example.com', expiration_time=1700000000)
        >>> dao.insert(short_url, shortcode='3f2b8c1e')
        <ShortURLS3DAO>
"""

from abc import ABC, abstractmethod

from s3shortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    NOTE:
        - Writes are blind overwrites. Inserting under an existing shortcode
          replaces the previous record (last write wins). Callers must not
          assume shortcodes are collision-free.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, shortcode: str, **kwargs) -> 'ShortURLBaseDAO':
        """Persist a ShortURLModel under the given shortcode.

        Args:
            short_url (ShortURLModel):
                The record to be persisted.

            shortcode (str):
                Short code identifying the record in the data store.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            StorageWriteError:
                If the data store rejects or fails the write.
        """
        pass
