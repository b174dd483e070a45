"""Typed records returned by the API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Account(Record):
    """A user account; ``acct`` is ``username@domain`` for remote users."""
    id: str
    username: str
    acct: str
    display_name: str = ""
    url: str = ""
    note: str = ""
    avatar: str = ""
    header: str = ""
    locked: bool = False
    bot: bool = False
    followers_count: int = 0
    following_count: int = 0
    statuses_count: int = 0
    created_at: str = ""


class Tag(Record):
    name: str
    url: str


class Mention(Record):
    id: str
    username: str
    url: str
    acct: str


class CustomEmoji(Record):
    shortcode: str
    url: str
    static_url: str
    visible_in_picker: bool = True
    category: Optional[str] = None


class PollOption(Record):
    title: str
    votes_count: Optional[int] = None


class Poll(Record):
    id: str
    expires_at: Optional[str] = None
    expired: bool = False
    multiple: bool = False
    votes_count: int = 0
    voters_count: Optional[int] = None
    options: list[PollOption] = Field(default_factory=list)
    emojis: list[CustomEmoji] = Field(default_factory=list)
    voted: Optional[bool] = None
    own_votes: Optional[list[int]] = None


class MediaAttachment(Record):
    id: str
    media_type: str = Field(alias="type")
    url: Optional[str] = None
    preview_url: Optional[str] = None
    remote_url: Optional[str] = None
    description: Optional[str] = None
    blurhash: Optional[str] = None


class Status(Record):
    """A post. Reblogs carry the original post in ``reblog``."""
    id: str
    created_at: str
    uri: str
    content: str
    account: Account
    url: Optional[str] = None
    in_reply_to_id: Optional[str] = None
    in_reply_to_account_id: Optional[str] = None
    sensitive: bool = False
    spoiler_text: str = ""
    visibility: str = "public"
    language: Optional[str] = None
    replies_count: int = 0
    reblogs_count: int = 0
    favourites_count: int = 0
    favourited: Optional[bool] = None
    reblogged: Optional[bool] = None
    bookmarked: Optional[bool] = None
    reblog: Optional[Status] = None
    media_attachments: list[MediaAttachment] = Field(default_factory=list)
    mentions: list[Mention] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    emojis: list[CustomEmoji] = Field(default_factory=list)
    poll: Optional[Poll] = None


class Context(Record):
    ancestors: list[Status] = Field(default_factory=list)
    descendants: list[Status] = Field(default_factory=list)


class Conversation(Record):
    """A direct-message thread."""
    id: str
    unread: bool = False
    accounts: list[Account] = Field(default_factory=list)
    last_status: Optional[Status] = None


class Notification(Record):
    id: str
    notification_type: str = Field(alias="type")
    created_at: str
    account: Account
    status: Optional[Status] = None


class Relationship(Record):
    id: str
    following: bool = False
    followed_by: bool = False
    blocking: bool = False
    blocked_by: bool = False
    muting: bool = False
    muting_notifications: bool = False
    requested: bool = False
    domain_blocking: bool = False
    endorsed: bool = False
    note: str = ""


class Instance(Record):
    uri: str
    title: str
    description: str = ""
    email: str = ""
    version: str = ""


class MastodonList(Record):
    id: str
    title: str
    replies_policy: str = "list"


class AppRegistration(Record):
    id: Optional[str] = None
    name: str
    website: Optional[str] = None
    redirect_uri: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    vapid_key: Optional[str] = None


class SearchResults(Record):
    accounts: list[Account] = Field(default_factory=list)
    statuses: list[Status] = Field(default_factory=list)
    hashtags: list[Tag] = Field(default_factory=list)


# Request records


class CreateStatusParams(Record):
    status: str
    in_reply_to_id: Optional[str] = None
    media_ids: Optional[list[str]] = None
    sensitive: Optional[bool] = None
    spoiler_text: Optional[str] = None
    visibility: Optional[str] = None
    language: Optional[str] = None


class RegisterAppParams(Record):
    client_name: str
    redirect_uris: str = "urn:ietf:wg:oauth:2.0:oob"
    scopes: str = "read"
    website: Optional[str] = None


class CreateListParams(Record):
    title: str
    replies_policy: Optional[str] = None
