from __future__ import annotations

import json
import logging
from typing import Any

import requests

from .models import InlineButton, Location

_LOGGER = logging.getLogger("bot.telegram")

LOCATION_ACCURACY_METERS = 2


class TelegramTransportError(RuntimeError):
    def __init__(self, *, message: str, body: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.body = body


def encode_reply_markup(button: InlineButton) -> str:
    keyboard = {"inline_keyboard": [[{"text": button.text, "callback_data": button.callback_data}]]}
    return json.dumps(keyboard, ensure_ascii=False)


class TelegramClient:
    def __init__(
        self,
        bot_token: str,
        base_url: str = "https://api.telegram.org",
        timeout_seconds: float | None = None,
    ) -> None:
        api_url = f"{base_url.rstrip('/')}/bot{bot_token}"
        self._send_message_url = f"{api_url}/sendMessage"
        self._edit_message_url = f"{api_url}/editMessageText"
        self._send_location_url = f"{api_url}/sendLocation"
        self._timeout_seconds = timeout_seconds

    def _post_form(self, url: str, form: dict[str, Any]) -> str:
        try:
            response = requests.post(url, data=form, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            body = exc.response.text if exc.response is not None else ""
            _LOGGER.error("error when posting to the chat: %s", exc)
            raise TelegramTransportError(message=str(exc), body=body) from exc

        body = response.text
        _LOGGER.info("Body of Telegram response: %s", body)
        return body

    def send_text(self, chat_id: int, text: str, reply_markup: InlineButton | None = None) -> str:
        _LOGGER.info("Sending text message to chat_id: %s", chat_id)
        form: dict[str, Any] = {"chat_id": str(chat_id), "text": text}
        if reply_markup is not None:
            form["reply_markup"] = encode_reply_markup(reply_markup)
        return self._post_form(self._send_message_url, form)

    def edit_text(self, chat_id: int, message_id: int, text: str, reply_markup: InlineButton) -> str:
        _LOGGER.info("Editing message %s in chat_id: %s", message_id, chat_id)
        form = {
            "chat_id": str(chat_id),
            "message_id": str(message_id),
            "text": text,
            "reply_markup": encode_reply_markup(reply_markup),
        }
        return self._post_form(self._edit_message_url, form)

    def send_location(self, chat_id: int, location: Location) -> str:
        _LOGGER.info("Sending location message to chat_id: %s", chat_id)
        form = {
            "chat_id": str(chat_id),
            "longitude": repr(location.longitude),
            "latitude": repr(location.latitude),
            "horizontal_accuracy": str(LOCATION_ACCURACY_METERS),
        }
        return self._post_form(self._send_location_url, form)
