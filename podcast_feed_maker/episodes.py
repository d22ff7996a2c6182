"""Map source episode records onto feed items."""

import json

from pydantic import TypeAdapter, ValidationError

from podcast_feed_maker.errors import SourceError
from podcast_feed_maker.models import ENCLOSURE_TYPE, Enclosure, Episode, FeedItem
from podcast_feed_maker.channel import choose

_EPISODE_LIST = TypeAdapter(list[Episode])


def read_episodes(source_path):
    """Read the JSON array of episodes at source_path.

    Args:
        source_path (str): Path to the episode JSON file.

    Returns:
        list[Episode]: The episodes, in file order.
    """
    try:
        with open(source_path, "r", encoding="utf-8") as file:
            data = json.load(file)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Cannot read source file '{source_path}': {e}") from e
    except json.JSONDecodeError as e:
        raise SourceError(f"Invalid JSON in '{source_path}': {e}") from e

    try:
        return _EPISODE_LIST.validate_python(data)
    except ValidationError as e:
        raise SourceError(f"Invalid episode list in '{source_path}': {e}") from e


def build_item(channel, episode):
    """Derive one feed item from an episode, borrowing channel fields."""
    duration = str(episode.duration)
    return FeedItem(
        title=episode.title,
        author=channel.author,
        subtitle=episode.title,
        summary=channel.summary,
        # Channel artwork wins over episode artwork
        image=choose(channel.image, episode.image),
        enclosure=Enclosure(url=episode.audio_url, type=ENCLOSURE_TYPE, length=duration),
        guid=episode.audio_url,
        pub_date=episode.create_time,
        duration=duration,
    )


def map_episodes(channel, episodes):
    """Return a copy of channel holding one item per episode, in order."""
    items = []
    for episode in episodes:
        print(f"Processing episode {episode.title}...")
        items.append(build_item(channel, episode))
    return channel.model_copy(update={"items": items})


def load_items(channel, source_path):
    """Read source_path and attach its episodes to channel as items."""
    return map_episodes(channel, read_episodes(source_path))
