from s3shortener.dao.s3.s3_key_schema import S3KeySchema
from s3shortener.dao.s3.mixins import S3ClientMixin
from s3shortener.dao.s3.short_url_s3_dao import ShortURLS3DAO


__all__ = [
    'S3KeySchema',
    'S3ClientMixin',
    'ShortURLS3DAO',
]
