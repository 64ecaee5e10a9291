"""
Function entry point invoked with S3 ObjectCreated notifications.

Configure the function with handler 'thumbnailer.handler.lambda_handler'
and the DEST_BUCKET environment variable.
"""

import json
import logging
import os
from functools import lru_cache

from .errors import ThumbnailerError
from .events import parse_batch
from .log_setup import setup_logging
from .processor import EventProcessor
from .s3_client import S3Client
from .s3_config import S3Config

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_config() -> S3Config:
    """Process-wide configuration, read from the environment once."""
    return S3Config.from_env().require_valid()


@lru_cache(maxsize=1)
def get_processor() -> EventProcessor:
    """Lazy-initialized processor shared by warm invocations."""
    config = get_config()
    client = S3Client(config)
    return EventProcessor(
        source=client,
        destination=client,
        dest_bucket=config.dest_bucket,
        url_base=config.url_base,
    )


def lambda_handler(event, context):
    """
    Generate thumbnails for every record in an S3 notification event.

    Returns nothing; any error is re-raised so the invocation fails and
    the platform can redeliver the batch.
    """
    setup_logging(os.getenv('LOG_LEVEL', 'INFO'))
    processor = get_processor()
    logger.debug(json.dumps(event))

    try:
        records = parse_batch(event)
        stats = processor.process_batch(records)
    except ThumbnailerError:
        logger.exception("Thumbnail generation failed")
        raise

    logger.info(f"Processed {stats.records_processed} record(s), {stats.variants_written} thumbnail(s)")
