import logging

from s3shortener.types import LambdaEvent, LambdaContext, LambdaResponse
from s3shortener.constants import ResponseKey
from s3shortener.models import ShortURLModel
from s3shortener.exceptions import S3ShortenerError
from s3shortener.dao.base import ShortURLBaseDAO
from s3shortener.dao.s3 import ShortURLS3DAO
from s3shortener.utils import generate_shortcode, bucket_name, bucket_key_prefix
from s3shortener.lambdas.shorten_url.request import parse_event, parse_expiration_time


logger = logging.getLogger(__name__)


def response_success(*, shortcode: str) -> LambdaResponse:
    return {ResponseKey.CODE.value: shortcode}


def process_request(event: LambdaEvent, *, dao: ShortURLBaseDAO) -> LambdaResponse:
    """Shorten the URL carried by `event` and persist it through `dao`.

    Procedure:
    - Step 1: Extract the JSON body from the event envelope
    - Step 2: Parse 'originalUrl' and 'expirationTime' from the body
    - Step 3: Parse 'expirationTime' into a 64-bit integer
    - Step 4: Generate a shortcode for the new link
    - Step 5: Store the record under the shortcode (via DAO)
    - Step 6: Respond with the shortcode

    Nothing is written unless steps 1-3 succeed. The shortcode is not checked
    for uniqueness, so a collision silently overwrites an earlier record.

    Raises:
        MissingOrMalformedBodyError: The envelope has no usable 'body'.
        BodyParseError: The body is not a JSON object of string values.
        InvalidExpirationFormatError: 'expirationTime' is missing or not an integer.
        StorageWriteError: The data store rejected the write.

    Example:
        >>> event = {'body': '{"originalUrl": "https://example.com", "expirationTime": "1700000000"}'}
        >>> process_request(event, dao=ShortURLS3DAO(bucket='my-shortener-bucket'))
        {'code': '3f2b8c1e'}
    """
    # 1, 2- Extract and parse the request body
    request = parse_event(event)

    # 3- Parse expiration time (fails before any storage interaction)
    expiration_time = parse_expiration_time(request.expiration_time)

    # 4- Generate shortcode for the new link
    shortcode = generate_shortcode()

    # 5- Store the record (blind overwrite, last write wins)
    short_url = ShortURLModel(original_url=request.original_url, expiration_time=expiration_time)
    dao.insert(short_url=short_url, shortcode=shortcode)

    # 6- Respond with the shortcode (without the object extension)
    return response_success(shortcode=shortcode)


def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle direct Lambda invocations to shorten URLs

    Responses:
        success:
            code: newly generated 8-character shortcode

    Failures are not translated into responses: every error is logged and
    re-raised so the Lambda runtime reports a failed invocation.

    Example:
        >>> event = {'body': '{"originalUrl": "https://example.com", "expirationTime": "1700000000"}'}
        >>> lambda_handler(event, None)
        {'code': '3f2b8c1e'}
    """
    try:
        dao = ShortURLS3DAO(bucket=bucket_name(), prefix=bucket_key_prefix())
        response = process_request(event, dao=dao)
    except S3ShortenerError as error:
        logger.exception(
            'Failed to shorten URL.',
            extra={'reason': str(error), 'error': error.__class__.__name__, 'errorCode': error.error_code},
        )
        raise
    else:
        logger.info('Successfully shortened URL.', extra={'shortcode': response[ResponseKey.CODE]})
        return response
