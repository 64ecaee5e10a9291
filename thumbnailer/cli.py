"""
Command Line Interface for running the thumbnail pipeline outside the function runtime.
"""

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

import urllib3

from .errors import ConfigurationError, ThumbnailerError
from .events import NotificationRecord, parse_batch
from .keys import encode_event_key, manifest_key
from .local_client import LocalClient, LocalConfig
from .log_setup import setup_logging
from .processor import EventProcessor
from .resize_engine import SIZES, ResizeEngine
from .s3_client import S3Client
from .s3_config import S3Config


def get_s3_config(args: argparse.Namespace) -> S3Config:
    """Get S3 configuration from environment and CLI overrides."""
    return S3Config.from_env().with_overrides(
        dest_bucket=getattr(args, 'dest_bucket', None),
        endpoint=getattr(args, 's3_endpoint', None),
        region=getattr(args, 's3_region', None),
    )


def get_storage_client(args: argparse.Namespace, config: S3Config, logger: logging.Logger):
    """Return a LocalClient when --local-root is given, otherwise an S3Client."""
    local_root = getattr(args, 'local_root', None)

    if local_root:
        local_config = LocalConfig(root_path=local_root)
        errors = local_config.validate()
        if errors:
            raise ConfigurationError(errors)
        logger.info(f"Storage: Local filesystem ({local_root})")
        return LocalClient(local_config, logger)

    if not config.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
    logger.info(f"Storage: S3 ({config.endpoint or 'AWS'})")
    return S3Client(config, logger)


def cmd_invoke(args: argparse.Namespace) -> int:
    """Execute invoke command: replay a saved notification event."""
    logger = setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        with open(args.event, 'r') as f:
            event = json.load(f)
    except FileNotFoundError:
        logger.error(f"Event file not found: {args.event}")
        return 1
    except json.JSONDecodeError as e:
        logger.error(f"Event file is not valid JSON: {e}")
        return 1

    try:
        config = get_s3_config(args).require_valid()
        client = get_storage_client(args, config, logger)
        records = parse_batch(event, logger)
        processor = EventProcessor(
            source=client,
            destination=client,
            dest_bucket=config.dest_bucket,
            url_base=config.url_base,
            logger=logger,
        )
        stats = processor.process_batch(records)
    except ConfigurationError as e:
        for problem in e.problems:
            logger.error(problem)
        return 1
    except (ThumbnailerError, ValueError) as e:
        logger.error(f"Invocation failed: {e}")
        return 1

    print(f"Done: {stats.summary()}")
    return 0


def cmd_resize(args: argparse.Namespace) -> int:
    """Execute resize command: run the pipeline on one local file."""
    logger = setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    source = Path(args.image).resolve()
    if not source.is_file():
        logger.error(f"Image not found: {args.image}")
        return 1

    output_dir = Path(args.output_dir).resolve()
    output_dir.mkdir(parents=True, exist_ok=True)

    processor = EventProcessor(
        source=LocalClient(LocalConfig(root_path=str(source.parent)), logger),
        destination=LocalClient(LocalConfig(root_path=str(output_dir)), logger),
        dest_bucket='',
        engine=ResizeEngine(quality=args.quality, logger=logger),
        sizes=args.size or SIZES,
        url_base=output_dir.as_uri(),
        logger=logger,
    )
    record = NotificationRecord(bucket='', raw_key=encode_event_key(source.name))

    try:
        manifest = processor.process_record(record)
    except (ThumbnailerError, ValueError) as e:
        logger.error(f"Resize failed: {e}")
        return 1

    for entry in manifest:
        print(f"  {entry.key} ({entry.width}x{entry.height})")
    print(f"Manifest: {output_dir / manifest_key(source.name)}")
    return 0


def cmd_make_event(args: argparse.Namespace) -> int:
    """Execute make-event command: write a minimal notification event."""
    record = NotificationRecord(
        bucket=args.bucket,
        raw_key=encode_event_key(args.key),
        size=args.object_size,
        event_name='ObjectCreated:Put',
    )
    event = {'Records': [record.to_dict()]}
    text = json.dumps(event, indent=2)

    if args.output:
        with open(args.output, 'w') as f:
            f.write(text + '\n')
    else:
        print(text)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='thumbnailer',
        description='Run the S3 thumbnail pipeline locally',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m thumbnailer make-event --bucket uploads --key "my photo.jpg" -o event.json
  python -m thumbnailer invoke --event event.json --dest-bucket uploads-thumbs
  python -m thumbnailer invoke --event event.json --dest-bucket thumbs --local-root ./buckets
  python -m thumbnailer resize photo.jpg --output-dir ./out

Storage options:
  Use --local-root for local filesystem (one directory per bucket),
  or DEST_BUCKET / S3_* environment variables for S3.
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Invoke command
    invoke_parser = subparsers.add_parser('invoke', help='Process a saved S3 notification event')
    invoke_parser.add_argument('-e', '--event', required=True, help='Event JSON file')
    invoke_parser.add_argument('-d', '--dest-bucket', help='Override DEST_BUCKET')
    invoke_parser.add_argument('--local-root', metavar='PATH',
                               help='Use local filesystem instead of S3')
    invoke_parser.add_argument('--s3-endpoint', help='Override S3_ENDPOINT')
    invoke_parser.add_argument('--s3-region', help='Override S3_REGION')
    invoke_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    # Resize command
    resize_parser = subparsers.add_parser('resize', help='Generate thumbnails for a local image')
    resize_parser.add_argument('image', help='Image file')
    resize_parser.add_argument('-o', '--output-dir', required=True, help='Directory for output files')
    resize_parser.add_argument('-s', '--size', type=int, action='append',
                               help=f"Thumbnail size, repeatable (default: {', '.join(map(str, SIZES))})")
    resize_parser.add_argument('-q', '--quality', type=int, default=80, help='JPEG/WebP quality (default: 80)')
    resize_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    # Make-event command
    event_parser = subparsers.add_parser('make-event', help='Write a minimal S3 notification event')
    event_parser.add_argument('-b', '--bucket', required=True, help='Source bucket')
    event_parser.add_argument('-k', '--key', required=True, help='Object key (unencoded)')
    event_parser.add_argument('--object-size', type=int, help='Object size in bytes')
    event_parser.add_argument('-o', '--output', help='Output file (default: stdout)')

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'invoke':
        return cmd_invoke(parsed_args)
    elif parsed_args.command == 'resize':
        return cmd_resize(parsed_args)
    elif parsed_args.command == 'make-event':
        return cmd_make_event(parsed_args)

    return 1
