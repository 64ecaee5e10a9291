"""Tests for CLI module."""

import io
import json

import pytest
from PIL import Image

from thumbnailer.cli import create_parser, main


class TestCreateParser:
    """Tests for argument parser creation."""

    def test_parser_created(self):
        parser = create_parser()
        assert parser is not None

    def test_invoke_command(self):
        parser = create_parser()
        args = parser.parse_args(['invoke', '-e', 'event.json', '-d', 'thumbs', '--local-root', '/tmp/b'])

        assert args.command == 'invoke'
        assert args.event == 'event.json'
        assert args.dest_bucket == 'thumbs'
        assert args.local_root == '/tmp/b'

    def test_resize_command(self):
        parser = create_parser()
        args = parser.parse_args(['resize', 'photo.jpg', '-o', 'out', '-s', '64', '-s', '128'])

        assert args.command == 'resize'
        assert args.image == 'photo.jpg'
        assert args.size == [64, 128]
        assert args.quality == 80

    def test_resize_default_sizes(self):
        args = create_parser().parse_args(['resize', 'photo.jpg', '-o', 'out'])

        assert args.size is None

    def test_make_event_command(self):
        args = create_parser().parse_args(['make-event', '-b', 'uploads', '-k', 'a b.jpg'])

        assert args.command == 'make-event'
        assert args.bucket == 'uploads'
        assert args.key == 'a b.jpg'


class TestMain:
    """Tests for main entry point."""

    def test_no_command(self):
        """Test running without command shows help."""
        result = main([])
        assert result == 1

    def test_make_event_stdout(self, capsys):
        result = main(['make-event', '-b', 'uploads', '-k', 'my photo.jpg'])

        assert result == 0
        event = json.loads(capsys.readouterr().out)
        assert event['Records'][0]['s3']['bucket']['name'] == 'uploads'
        assert event['Records'][0]['s3']['object']['key'] == 'my+photo.jpg'

    def test_invoke_local(self, tmp_path, sample_image_bytes, monkeypatch):
        """Test replaying an event against local storage."""
        monkeypatch.delenv('DEST_BUCKET', raising=False)
        (tmp_path / 'uploads').mkdir()
        (tmp_path / 'uploads' / 'my photo.jpg').write_bytes(sample_image_bytes)
        event_file = tmp_path / 'event.json'
        assert main(['make-event', '-b', 'uploads', '-k', 'my photo.jpg', '-o', str(event_file)]) == 0

        result = main([
            'invoke', '-e', str(event_file), '-d', 'thumbs', '--local-root', str(tmp_path)
        ])

        assert result == 0
        manifest = json.loads((tmp_path / 'thumbs' / 'my photo.jpg.thumbnails.json').read_text())
        assert [e['key'] for e in manifest] == [
            'my photo-50x50.jpeg', 'my photo-100x100.jpeg', 'my photo-200x200.jpeg'
        ]

    def test_invoke_missing_dest_bucket(self, tmp_path, monkeypatch):
        monkeypatch.delenv('DEST_BUCKET', raising=False)
        event_file = tmp_path / 'event.json'
        event_file.write_text(json.dumps({'Records': []}))

        assert main(['invoke', '-e', str(event_file), '--local-root', str(tmp_path)]) == 1

    def test_invoke_missing_source(self, tmp_path, monkeypatch):
        monkeypatch.delenv('DEST_BUCKET', raising=False)
        event_file = tmp_path / 'event.json'
        main(['make-event', '-b', 'uploads', '-k', 'gone.jpg', '-o', str(event_file)])

        result = main(['invoke', '-e', str(event_file), '-d', 'thumbs', '--local-root', str(tmp_path)])

        assert result == 1
        assert not (tmp_path / 'thumbs').exists()

    def test_invoke_event_not_found(self, tmp_path):
        assert main(['invoke', '-e', str(tmp_path / 'nope.json'), '-d', 'thumbs']) == 1

    def test_resize(self, tmp_path, sample_png_bytes, capsys):
        image = tmp_path / 'logo.png'
        image.write_bytes(sample_png_bytes)
        out = tmp_path / 'out'

        result = main(['resize', str(image), '-o', str(out), '-s', '32'])

        assert result == 0
        assert Image.open(io.BytesIO((out / 'logo-32x32.png').read_bytes())).size == (32, 32)
        manifest = json.loads((out / 'logo.png.thumbnails.json').read_text())
        assert manifest[0]['url'].startswith('file://')
        assert 'logo-32x32.png' in capsys.readouterr().out

    def test_resize_not_an_image(self, tmp_path):
        bad = tmp_path / 'bad.jpg'
        bad.write_bytes(b'nope')

        assert main(['resize', str(bad), '-o', str(tmp_path / 'out')]) == 1

    def test_resize_missing_file(self, tmp_path):
        assert main(['resize', str(tmp_path / 'none.jpg'), '-o', str(tmp_path / 'out')]) == 1
