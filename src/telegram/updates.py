from __future__ import annotations

import json
import math
import re
from typing import Any

from .models import Audio, CallbackQuery, Chat, Document, Location, Message, Update, User

_DECIMAL = re.compile(r"[+-]?[0-9]+")


class UpdateError(ValueError):
    pass


class UpdateDecodeError(UpdateError):
    pass


class InvalidUpdateError(UpdateError):
    pass


def _object(payload: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise UpdateDecodeError(f"field {key!r} must be an object, got {type(value).__name__}")
    return value


def _int(payload: dict[str, Any], key: str) -> int:
    value = payload.get(key)
    if value is None:
        return 0
    # bool is an int subclass but never a valid Telegram id
    if isinstance(value, bool) or not isinstance(value, int):
        raise UpdateDecodeError(f"field {key!r} must be an integer, got {type(value).__name__}")
    return value


def _float(payload: dict[str, Any], key: str) -> float:
    value = payload.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise UpdateDecodeError(f"field {key!r} must be a number, got {type(value).__name__}")
    try:
        number = float(value)
    except OverflowError as exc:
        raise UpdateDecodeError(f"field {key!r} is out of range") from exc
    if not math.isfinite(number):
        raise UpdateDecodeError(f"field {key!r} must be a finite number, got {number!r}")
    return number


def _str(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise UpdateDecodeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _parse_audio(raw: dict[str, Any] | None) -> Audio | None:
    if raw is None:
        return None
    return Audio(file_id=_str(raw, "file_id"), duration=_int(raw, "duration"))


def _parse_message(raw: dict[str, Any] | None) -> Message | None:
    if raw is None:
        return None

    chat = _object(raw, "chat") or {}
    location = _object(raw, "location")
    document = _object(raw, "document")
    return Message(
        message_id=_int(raw, "message_id"),
        text=_str(raw, "text"),
        chat=Chat(id=_int(chat, "id"), username=_str(chat, "username")),
        location=(
            Location(latitude=_float(location, "latitude"), longitude=_float(location, "longitude"))
            if location is not None
            else None
        ),
        audio=_parse_audio(_object(raw, "audio")),
        voice=_parse_audio(_object(raw, "voice")),
        document=(
            Document(file_id=_str(document, "file_id"), file_name=_str(document, "file_name"))
            if document is not None
            else None
        ),
    )


def _parse_callback_query(raw: dict[str, Any] | None) -> CallbackQuery | None:
    if raw is None:
        return None

    sender = _object(raw, "from") or {}
    return CallbackQuery(
        id=_str(raw, "id"),
        from_user=User(id=_int(sender, "id"), username=_str(sender, "username")),
        data=_str(raw, "data"),
        message=_parse_message(_object(raw, "message")),
        inline_message_id=_str(raw, "inline_message_id"),
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} is not valid JSON")


def parse_update(body: bytes | str) -> Update:
    """Decode a webhook body into an :class:`Update`.

    Raises :class:`UpdateDecodeError` when the body is not JSON of the expected
    shape and :class:`InvalidUpdateError` when ``update_id`` is missing or zero.
    """
    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except (TypeError, ValueError) as exc:
        raise UpdateDecodeError(f"could not decode incoming update: {exc}") from exc
    if not isinstance(payload, dict):
        raise UpdateDecodeError(f"update must be a JSON object, got {type(payload).__name__}")

    update = Update(
        update_id=_int(payload, "update_id"),
        message=_parse_message(_object(payload, "message")),
        callback_query=_parse_callback_query(_object(payload, "callback_query")),
    )
    if update.update_id == 0:
        raise InvalidUpdateError("invalid update id of 0 indicates failure to parse incoming update")
    return update


def encode_index(index: int) -> str:
    return str(index)


def decode_index(data: str, default: int = 0) -> int:
    if not _DECIMAL.fullmatch(data):
        return default
    return int(data)
