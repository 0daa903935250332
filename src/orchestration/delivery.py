from __future__ import annotations

import logging
from typing import Callable, Protocol

from telegram.client import TelegramTransportError
from telegram.models import InlineButton, Location

_LOGGER = logging.getLogger("bot.delivery")


class MessageSender(Protocol):
    def send_text(self, chat_id: int, text: str, reply_markup: InlineButton | None = None) -> str:
        ...

    def edit_text(self, chat_id: int, message_id: int, text: str, reply_markup: InlineButton) -> str:
        ...

    def send_location(self, chat_id: int, location: Location) -> str:
        ...


def _guarded(chat_id: int, call: Callable[[], str]) -> str | None:
    try:
        body = call()
    except TelegramTransportError as exc:
        _LOGGER.error("got error %s from telegram, response body is %s", exc.message, exc.body)
        return None
    _LOGGER.info("successfully delivered to chat id %s", chat_id)
    return body


def deliver_text(
    sender: MessageSender,
    chat_id: int,
    text: str,
    reply_markup: InlineButton | None = None,
) -> str | None:
    return _guarded(chat_id, lambda: sender.send_text(chat_id, text, reply_markup=reply_markup))


def deliver_edit(
    sender: MessageSender,
    chat_id: int,
    message_id: int,
    text: str,
    reply_markup: InlineButton,
) -> str | None:
    return _guarded(chat_id, lambda: sender.edit_text(chat_id, message_id, text, reply_markup))


def deliver_location(sender: MessageSender, chat_id: int, location: Location) -> str | None:
    return _guarded(chat_id, lambda: sender.send_location(chat_id, location))
