import json

import pytest
from beartype.roar import BeartypeCallHintParamViolation
from botocore.exceptions import ClientError, EndpointConnectionError

from s3shortener.models import ShortURLModel
from s3shortener.dao.s3 import ShortURLS3DAO
from s3shortener.dao.exceptions import StorageWriteError, DataStoreError


class TestShortURLS3DAO:
    @pytest.fixture(autouse=True)
    def setup(self, s3_client, bucket) -> None:
        self.s3_client = s3_client
        self.bucket = bucket
        self.dao = ShortURLS3DAO(bucket=bucket, s3_client=s3_client)
        self.short_url = ShortURLModel(original_url='https://example.com', expiration_time=1700000000)

    def test_insert(self) -> None:
        result = self.dao.insert(short_url=self.short_url, shortcode='3f2b8c1e')

        assert result is self.dao
        self.s3_client.put_object.assert_called_once()
        kwargs = self.s3_client.put_object.call_args.kwargs
        assert kwargs['Bucket'] == self.bucket
        assert kwargs['Key'] == '3f2b8c1e.json'
        assert kwargs['ContentType'] == 'application/json'
        assert json.loads(kwargs['Body'].decode('utf-8')) == {'originalUrl': 'https://example.com', 'expirationTime': 1700000000}

    def test_insert_with_prefix(self, s3_client, bucket) -> None:
        dao = ShortURLS3DAO(bucket=bucket, s3_client=s3_client, prefix='links')

        dao.insert(short_url=self.short_url, shortcode='3f2b8c1e')

        assert s3_client.put_object.call_args.kwargs['Key'] == 'links/3f2b8c1e.json'

    def test_insert_overwrites_existing_key(self) -> None:
        second = ShortURLModel(original_url='https://other.example.com', expiration_time=1)

        self.dao.insert(short_url=self.short_url, shortcode='3f2b8c1e')
        self.dao.insert(short_url=second, shortcode='3f2b8c1e')

        assert self.s3_client.put_object.call_count == 2
        self.s3_client.head_object.assert_not_called()
        self.s3_client.get_object.assert_not_called()
        body = self.s3_client.put_object.call_args.kwargs['Body']
        assert ShortURLModel.from_json(body) == second

    def test_insert_with_client_error(self) -> None:
        self.s3_client.put_object.side_effect = ClientError(
            {'Error': {'Code': 'AccessDenied', 'Message': 'Access Denied'}},
            'PutObject',
        )

        with pytest.raises(StorageWriteError) as exc_info:
            self.dao.insert(short_url=self.short_url, shortcode='3f2b8c1e')

        assert 'Access Denied' in str(exc_info.value)
        assert 'AccessDenied' in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ClientError)
        assert isinstance(exc_info.value, DataStoreError)
        assert exc_info.value.error_code == 'dao:storage_write_error'

    def test_insert_with_connection_error(self) -> None:
        self.s3_client.put_object.side_effect = EndpointConnectionError(endpoint_url='https://s3.amazonaws.com')

        with pytest.raises(StorageWriteError, match='Could not connect to the endpoint URL'):
            self.dao.insert(short_url=self.short_url, shortcode='3f2b8c1e')

    def test_insert_with_invalid_model(self) -> None:
        with pytest.raises(BeartypeCallHintParamViolation):
            self.dao.insert(short_url={'originalUrl': 'https://example.com'}, shortcode='3f2b8c1e')

        self.s3_client.put_object.assert_not_called()
