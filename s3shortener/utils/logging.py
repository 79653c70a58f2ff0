"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` in the lambda handler's `__init__.py` file
before any other logging is done.

Logging format:
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "s3shortener.lambdas.shorten_url.app",
    "message": "Shortened URL.",
    "shortcode": "3f2b8c1e"
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from s3shortener.constants import ENV


# Attributes every LogRecord carries. Anything else was passed via `extra`.
# 'message' and 'asctime' appear once another formatter has seen the record.
RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {'message', 'asctime'}


def _utc_timestamp(created: float) -> str:
    return datetime.fromtimestamp(created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras and exception tracebacks"""

    def format(self, record: logging.LogRecord) -> str:
        extras = {key: value for key, value in vars(record).items() if key not in RESERVED_ATTRS}
        log = {
            'timestamp': _utc_timestamp(record.created),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            **extras,
        }
        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # boto responses and exceptions in `extra` are not JSON-native
        return json.dumps(log, default=str)


# boto3 logs every request at DEBUG/INFO, keep it quiet unless it complains
NOISY_LOGGERS = ('boto3', 'botocore', 'urllib3')


def initialize_logging() -> None:
    log_level = os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'loggers': {name: {'level': 'WARNING'} for name in NOISY_LOGGERS},
            'root': {'level': log_level, 'handlers': ['stdout']},
        }
    )
