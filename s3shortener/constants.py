from enum import StrEnum


class Shortcode:
    """Shortcode generation parameters."""

    LENGTH = 8  # Characters kept from the canonical UUID text (first group)


class Storage:
    """Object store layout."""

    OBJECT_EXTENSION = '.json'
    CONTENT_TYPE = 'application/json'


class RequestKey(StrEnum):
    BODY = 'body'
    ORIGINAL_URL = 'originalUrl'
    EXPIRATION_TIME = 'expirationTime'


class ResponseKey(StrEnum):
    CODE = 'code'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class S3(StrEnum):
        BUCKET_NAME = 'BUCKET_NAME'
        KEY_PREFIX = 'BUCKET_KEY_PREFIX'  # optional

    class LocalStack(StrEnum):
        ENDPOINT = 'LOCALSTACK_ENDPOINT'  # usually http://localstack:4566


# 64-bit signed integer bounds for expiration timestamps
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
