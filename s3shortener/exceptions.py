class S3ShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:s3shortener_error'


class RequestError(S3ShortenerError):
    """Base exception for all invalid invocation payloads."""

    error_code = 'request:request_error'


class MissingOrMalformedBodyError(RequestError):
    """Raised when the event envelope has no usable 'body' entry."""

    error_code = 'request:missing_or_malformed_body'


class BodyParseError(RequestError):
    """Raised when the request body is not a JSON object of string values."""

    error_code = 'request:body_parse_error'


class InvalidExpirationFormatError(RequestError):
    """Raised when 'expirationTime' is missing or not a base-10 64-bit integer."""

    error_code = 'request:invalid_expiration_format'


class ConfigurationError(S3ShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'
