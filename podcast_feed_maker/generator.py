"""Core functionality for generating the podcast RSS feed."""

import xml.etree.ElementTree as ET

from podcast_feed_maker.channel import resolve_channel
from podcast_feed_maker.episodes import load_items
from podcast_feed_maker.errors import OutputError
from podcast_feed_maker.models import Feed

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def _add_item(channel_element, item):
    element = ET.SubElement(channel_element, "item")
    ET.SubElement(element, "title").text = item.title
    ET.SubElement(element, "itunes:author").text = item.author
    ET.SubElement(element, "itunes:subtitle").text = item.subtitle
    ET.SubElement(element, "itunes:summary").text = item.summary
    ET.SubElement(element, "itunes:image", href=item.image)
    ET.SubElement(
        element,
        "enclosure",
        url=item.enclosure.url,
        type=item.enclosure.type,
        length=item.enclosure.length,
    )
    ET.SubElement(element, "guid").text = item.guid
    ET.SubElement(element, "pubDate").text = item.pub_date
    ET.SubElement(element, "itunes:duration").text = item.duration


def build_feed_element(feed):
    """Build the <rss> element tree for a feed.

    Args:
        feed (Feed): The feed to serialize.

    Returns:
        xml.etree.ElementTree.Element: The root <rss> element.
    """
    rss = ET.Element(
        "rss",
        attrib={"xmlns:itunes": feed.itunes_namespace},
        version=feed.version,
    )
    channel = feed.channel
    channel_element = ET.SubElement(rss, "channel")
    ET.SubElement(channel_element, "copyright").text = channel.copyright
    ET.SubElement(channel_element, "language").text = channel.language
    ET.SubElement(channel_element, "link").text = channel.link
    ET.SubElement(channel_element, "title").text = channel.title
    ET.SubElement(channel_element, "itunes:author").text = channel.author
    ET.SubElement(channel_element, "itunes:subtitle").text = channel.subtitle
    ET.SubElement(channel_element, "itunes:summary").text = channel.summary

    owner = ET.SubElement(channel_element, "itunes:owner")
    ET.SubElement(owner, "itunes:name").text = channel.owner_name

    ET.SubElement(channel_element, "description").text = channel.description
    ET.SubElement(channel_element, "itunes:image", href=channel.image)

    category = ET.SubElement(channel_element, "itunes:category", text=channel.category)
    ET.SubElement(category, "category", text=channel.subcategory)

    for item in channel.items:
        _add_item(channel_element, item)

    return rss


def render_feed(feed):
    """Return the full XML document for a feed, declaration included."""
    try:
        body = ET.tostring(build_feed_element(feed), encoding="unicode")
    except (TypeError, ValueError) as e:
        raise OutputError(f"Failed to serialize feed: {e}") from e
    return f"{XML_DECLARATION}\n{body}"


def write_feed(feed, output_file_path):
    """Serialize a feed and write it to output_file_path in one write."""
    document = render_feed(feed)
    try:
        with open(output_file_path, "w", encoding="utf-8") as file:
            file.write(document)
    except OSError as e:
        raise OutputError(f"Cannot write feed to '{output_file_path}': {e}") from e


def generate_feed(source_path, output_file_path, config_path=None, prompter=None, write=True):
    """Resolve the channel, map the episodes and write the feed.

    Args:
        source_path (str): Path to the JSON episode list.
        output_file_path (str): Path to save the generated RSS feed.
        config_path (str): Optional channel config file; prompts are used when empty.
        prompter: Object with a prompt(label) method for interactive mode.
        write (bool): When False, build the feed without writing it.

    Returns:
        Feed: The feed that was (or would be) written.
    """
    channel = resolve_channel(config_path, prompter)
    feed = Feed(channel=load_items(channel, source_path))
    if write:
        write_feed(feed, output_file_path)
    return feed
