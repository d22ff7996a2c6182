"""Data models for channels, episodes and feed items."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

ITUNES_NAMESPACE = "http://www.itunes.com/dtds/podcast-1.0.dtd"
RSS_VERSION = "2.0"
ENCLOSURE_TYPE = "audio/x-m4a"


class Enclosure(BaseModel):
    url: str = ""
    type: str = ENCLOSURE_TYPE
    length: str = "0"


class FeedItem(BaseModel):
    """One <item> of the feed, derived from a single episode."""

    title: str = ""
    author: str = ""
    subtitle: str = ""
    summary: str = ""
    image: str = ""
    enclosure: Enclosure = Field(default_factory=Enclosure)
    guid: str = ""
    pub_date: str = ""
    duration: str = "0"


class Channel(BaseModel):
    """Feed-level metadata plus the ordered items it owns."""

    copyright: str = ""
    language: str = ""
    link: str = ""
    title: str = ""
    author: str = ""
    subtitle: str = ""
    summary: str = ""
    description: str = ""
    owner_name: str = ""
    image: str = ""
    category: str = ""
    subcategory: str = ""
    items: list[FeedItem] = Field(default_factory=list)


class Episode(BaseModel):
    """A source record from the episode JSON array."""

    model_config = ConfigDict(strict=True, extra="ignore")

    title: str = ""
    audio_url: str = ""
    image: str = ""
    duration: int = 0
    create_time: str = ""

    @field_validator("title", "audio_url", "image", "create_time", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("duration", mode="before")
    @classmethod
    def _null_to_zero(cls, value):
        return 0 if value is None else value


class Feed(BaseModel):
    """Root document: one channel and the RSS protocol constants."""

    channel: Channel
    version: str = RSS_VERSION
    itunes_namespace: str = ITUNES_NAMESPACE
