import io
import json
import os
import sys
import tempfile
import unittest
from unittest.mock import patch

from podcast_feed_maker.cli import main
from podcast_feed_maker.errors import ConfigError
from podcast_feed_maker.models import Channel, Feed


class TestCLI(unittest.TestCase):
    @patch('podcast_feed_maker.cli.generate_feed')
    @patch('sys.stdout')
    def test_main_with_default_args(self, mock_stdout, mock_generate_feed):
        """Test the CLI with default arguments."""
        mock_generate_feed.return_value = Feed(channel=Channel())

        with patch.object(sys, 'argv', ['podcast-feed-maker']):
            main()

        mock_generate_feed.assert_called_once_with(
            "data.json", "feed.xml", config_path="", write=True
        )

    @patch('podcast_feed_maker.cli.generate_feed')
    @patch('sys.stdout')
    def test_main_with_custom_args(self, mock_stdout, mock_generate_feed):
        """Test the single-dash flags."""
        mock_generate_feed.return_value = Feed(channel=Channel())

        argv = ['podcast-feed-maker', '-config', 'show.conf', '-source', 'in.json', '-target', 'out.xml']
        with patch.object(sys, 'argv', argv):
            main()

        mock_generate_feed.assert_called_once_with(
            "in.json", "out.xml", config_path="show.conf", write=True
        )

    @patch('podcast_feed_maker.cli.generate_feed')
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_dry_run(self, mock_stdout, mock_generate_feed):
        """Test the --dry-run flag."""
        mock_generate_feed.return_value = Feed(channel=Channel())

        with patch.object(sys, 'argv', ['podcast-feed-maker', '--dry-run']):
            main()

        mock_generate_feed.assert_called_once_with(
            "data.json", "feed.xml", config_path="", write=False
        )
        self.assertIn("0 item(s) would be written", mock_stdout.getvalue())

    @patch('podcast_feed_maker.__version__', '0.1.0')
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_version_flag(self, mock_stdout):
        """Test the --version flag."""
        with patch.object(sys, 'argv', ['podcast-feed-maker', '--version']):
            with self.assertRaises(SystemExit) as ctx:
                main()

        self.assertEqual(ctx.exception.code, 0)
        self.assertIn("podcast-feed-maker version 0.1.0", mock_stdout.getvalue())

    @patch('podcast_feed_maker.cli.generate_feed')
    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout')
    def test_error_handling(self, mock_stdout, mock_stderr, mock_generate_feed):
        """Test error handling in the CLI."""
        mock_generate_feed.side_effect = ConfigError("Test error")

        with patch.object(sys, 'argv', ['podcast-feed-maker', '-config', 'bad.conf']):
            with self.assertRaises(SystemExit) as ctx:
                main()

        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Error: Test error", mock_stderr.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout')
    def test_undecodable_yaml_config(self, mock_stdout, mock_stderr):
        """A YAML config that is not UTF-8 ends in a clean error exit."""
        with tempfile.TemporaryDirectory() as tmp:
            config = os.path.join(tmp, "show.yaml")
            with open(config, "wb") as file:
                file.write(b"title: \xff\xfe\n")

            argv = ['podcast-feed-maker', '-config', config, '-target', os.path.join(tmp, "feed.xml")]
            with patch.object(sys, 'argv', argv):
                with self.assertRaises(SystemExit) as ctx:
                    main()

        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Error: Cannot read config file", mock_stderr.getvalue())

    @patch('sys.stdout')
    def test_end_to_end(self, mock_stdout):
        """Run the real pipeline from the command line."""
        with tempfile.TemporaryDirectory() as tmp:
            config = os.path.join(tmp, "show.conf")
            source = os.path.join(tmp, "data.json")
            target = os.path.join(tmp, "feed.xml")
            with open(config, "w", encoding="utf-8") as file:
                file.write("title=Show\nauthor=Alice\n")
            with open(source, "w", encoding="utf-8") as file:
                json.dump([{"title": "Ep1", "audio_url": "http://x/1.m4a", "duration": 120}], file)

            argv = ['podcast-feed-maker', '-config', config, '-source', source, '-target', target]
            with patch.object(sys, 'argv', argv):
                main()

            with open(target, encoding="utf-8") as file:
                content = file.read()

        self.assertIn("<title>Ep1</title>", content)
        self.assertIn('length="120"', content)


if __name__ == "__main__":
    unittest.main()
