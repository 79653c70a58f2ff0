"""Unit tests for configuration utilities in config.py."""

import pytest
from pytest import MonkeyPatch

from s3shortener.constants import ENV
from s3shortener.exceptions import MissingEnvironmentVariableError
from s3shortener.utils.config import bucket_name, bucket_key_prefix


def test_bucket_name(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv(ENV.S3.BUCKET_NAME, 'test-shortener-bucket')
    assert bucket_name() == 'test-shortener-bucket'


@pytest.mark.parametrize('value', [None, ''])
def test_bucket_name_requires_environment(monkeypatch: MonkeyPatch, value: str | None) -> None:
    if value is None:
        monkeypatch.delenv(ENV.S3.BUCKET_NAME, raising=False)
    else:
        monkeypatch.setenv(ENV.S3.BUCKET_NAME, value)

    with pytest.raises(MissingEnvironmentVariableError, match="'BUCKET_NAME'"):
        bucket_name()


@pytest.mark.parametrize(
    'value, expected',
    [
        (None, None),
        ('', None),
        ('links', 'links'),
    ],
)
def test_bucket_key_prefix(monkeypatch: MonkeyPatch, value: str | None, expected: str | None) -> None:
    if value is None:
        monkeypatch.delenv(ENV.S3.KEY_PREFIX, raising=False)
    else:
        monkeypatch.setenv(ENV.S3.KEY_PREFIX, value)

    assert bucket_key_prefix() == expected
