"""
Main entry point for running the package as a module.

Usage:
    python -m thumbnailer make-event --bucket uploads --key photo.jpg -o event.json
    python -m thumbnailer invoke --event event.json --dest-bucket uploads-thumbs
    python -m thumbnailer resize photo.jpg --output-dir ./out
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
