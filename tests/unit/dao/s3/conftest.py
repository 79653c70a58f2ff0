from unittest.mock import MagicMock

import pytest
from pytest import MonkeyPatch

from s3shortener.constants import ENV
from s3shortener.types import S3Client


@pytest.fixture
def bucket() -> str:
    return 'test-shortener-bucket'


@pytest.fixture(autouse=True)
def _env(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv(ENV.App.APP_ENV, 'test')
    monkeypatch.delenv(ENV.App.AWS_SAM_LOCAL, raising=False)


@pytest.fixture
def s3_client() -> S3Client:
    """Mock a boto3 S3 client."""
    client = MagicMock()
    client.put_object.return_value = {'ETag': '"d41d8cd98f00b204e9800998ecf8427e"'}
    return client
