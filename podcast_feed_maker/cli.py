"""Command-line interface for the podcast feed maker."""

import argparse
import sys

from podcast_feed_maker.errors import FeedError
from podcast_feed_maker.generator import generate_feed


def main():
    """Entry point for the podcast-feed-maker command."""
    parser = argparse.ArgumentParser(
        description="Generate an iTunes podcast RSS feed from a JSON episode list."
    )

    parser.add_argument(
        "-config",
        "--config",
        type=str,
        default="",
        help="Channel config file, key=value lines or YAML (default: prompt for each field)"
    )
    parser.add_argument(
        "-source",
        "--source",
        type=str,
        default="data.json",
        help="Input JSON episode list (default: data.json)"
    )
    parser.add_argument(
        "-target",
        "--target",
        type=str,
        default="feed.xml",
        help="Output XML file (default: feed.xml)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build the feed without writing the target file"
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit"
    )

    # Parse arguments from the command line
    args = parser.parse_args()

    if args.version:
        from podcast_feed_maker import __version__
        print(f"podcast-feed-maker version {__version__}")
        sys.exit(0)

    print(f"Source file: {args.source}, Target file: {args.target}")

    try:
        feed = generate_feed(
            args.source,
            args.target,
            config_path=args.config,
            write=not args.dry_run,
        )
    except FeedError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.dry_run:
        print(f"Dry-run completed: {len(feed.channel.items)} item(s) would be written.")
    else:
        print(f"RSS feed successfully generated at {args.target}")


if __name__ == "__main__":
    main()
