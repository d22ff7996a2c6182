"""Resolve channel metadata from interactive prompts or a config file."""

import sys
from typing import Protocol

import yaml

from podcast_feed_maker.errors import ConfigError
from podcast_feed_maker.models import Channel

DEFAULT_COPYRIGHT = "个人 @iWant.link"
DEFAULT_LANGUAGE = "zh-ch"

# Config keys and the channel field each one fills
CONFIG_FIELDS = {
    "copyright": "copyright",
    "language": "language",
    "link": "link",
    "title": "title",
    "author": "author",
    "subtitle": "subtitle",
    "summary": "summary",
    "description": "description",
    "image": "image",
    "category": "category",
}

YAML_SUFFIXES = (".yaml", ".yml")


class Prompter(Protocol):
    def say(self, message: str) -> None:
        ...

    def prompt(self, label: str) -> str:
        ...


class ConsolePrompter:
    """Ask questions on a text stream pair, stdout/stdin by default."""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def say(self, message: str) -> None:
        print(message, file=self.stdout)

    def prompt(self, label: str) -> str:
        self.say(label)
        self.stdout.flush()
        return self.stdin.readline().strip()


def choose(*values):
    """Return the first non-empty value, or an empty string."""
    return next((value for value in values if value), "")


def resolve_channel_interactive(prompter: Prompter) -> Channel:
    """Build a channel by asking for each field.

    Empty answers fall back to defaults for copyright, subtitle (the title)
    and language only. Every other field may be left empty.
    """
    prompter.say("fill course info")

    copyright_text = choose(
        prompter.prompt(f"copyright(default {DEFAULT_COPYRIGHT})"), DEFAULT_COPYRIGHT
    )
    title = prompter.prompt("title")
    subtitle = choose(prompter.prompt("subtitle(default title)"), title)
    language = choose(
        prompter.prompt(f"language(default {DEFAULT_LANGUAGE})"), DEFAULT_LANGUAGE
    )
    link = prompter.prompt("link")
    author = prompter.prompt("author")
    description = prompter.prompt("desc")
    image = prompter.prompt("image")
    category = prompter.prompt("category")
    subcategory = prompter.prompt("sub category")

    return Channel(
        copyright=copyright_text,
        title=title,
        subtitle=subtitle,
        language=language,
        link=link,
        author=author,
        owner_name=author,
        description=description,
        summary=description,
        image=image,
        category=category,
        subcategory=subcategory,
    )


def parse_key_value_config(text, source="<config>"):
    """Parse newline-delimited key=value pairs into a dict.

    Each line must hold exactly one '=' with a non-empty key. Later
    duplicates override earlier ones. Lines end at a newline only, with an
    optional carriage return before it.
    """
    values = {}
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line_number, line in enumerate(lines, start=1):
        if line.endswith("\r"):
            line = line[:-1]
        pair = line.split("=")
        if len(pair) != 2 or not pair[0]:
            raise ConfigError(
                f"Malformed line {line_number} in config file '{source}': {line!r} "
                "(expected key=value)"
            )
        key, value = pair
        values[key] = value
    return values


def read_yaml_config(config_path):
    """Read a YAML mapping of channel keys."""
    try:
        with open(config_path, "r", encoding="utf-8") as file:
            data = yaml.safe_load(file)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file '{config_path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax in '{config_path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{config_path}' must contain a mapping")

    return {
        str(key): "" if value is None else str(value) for key, value in data.items()
    }


def read_channel_config(config_path):
    """Read raw channel settings from a key=value or YAML config file."""
    if str(config_path).lower().endswith(YAML_SUFFIXES):
        return read_yaml_config(config_path)

    try:
        with open(config_path, "r", encoding="utf-8", newline="") as file:
            text = file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file '{config_path}': {e}") from e

    return parse_key_value_config(text, source=config_path)


def channel_from_config(values):
    """Map config values onto a channel.

    Missing keys become empty strings; no defaults are applied here.
    """
    for key in values:
        if key not in CONFIG_FIELDS:
            print(f"Ignoring unknown config key '{key}'")

    fields = {field: values.get(key, "") for key, field in CONFIG_FIELDS.items()}
    fields["owner_name"] = fields["author"]
    return Channel(**fields)


def resolve_channel(config_path=None, prompter=None):
    """Resolve the channel from config_path when given, else interactively."""
    if config_path:
        return channel_from_config(read_channel_config(config_path))
    return resolve_channel_interactive(prompter or ConsolePrompter())
