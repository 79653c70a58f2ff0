from s3shortener.utils.config import bucket_name, bucket_key_prefix
from s3shortener.utils.helpers import require_environment
from s3shortener.utils.runtime import running_locally
from s3shortener.utils.shortener import generate_shortcode
from s3shortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'bucket_name',
    'bucket_key_prefix',
    'require_environment',
    'running_locally',
    'initialize_logging',
]
