from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Chat:
    id: int
    username: str = ""


@dataclass(frozen=True)
class User:
    id: int
    username: str = ""


@dataclass(frozen=True)
class Audio:
    file_id: str = ""
    duration: int = 0


@dataclass(frozen=True)
class Document:
    file_id: str = ""
    file_name: str = ""


@dataclass(frozen=True)
class Message:
    message_id: int
    chat: Chat
    text: str = ""
    location: Location | None = None
    audio: Audio | None = None
    voice: Audio | None = None
    document: Document | None = None


@dataclass(frozen=True)
class CallbackQuery:
    id: str
    from_user: User
    data: str = ""
    message: Message | None = None
    inline_message_id: str = ""


@dataclass(frozen=True)
class Update:
    update_id: int
    message: Message | None = None
    callback_query: CallbackQuery | None = None


@dataclass(frozen=True)
class InlineButton:
    text: str
    callback_data: str
