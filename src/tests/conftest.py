from __future__ import annotations

from typing import Any, Callable

import pytest

import content
from config import CelebrationConfig, Settings, TreasureHuntConfig
from telegram.client import TelegramTransportError
from telegram.models import InlineButton, Location


class FakeTelegramClient:
    def __init__(self, failing_chat_ids: set[int] | None = None) -> None:
        self.calls: list[dict[str, Any]] = []
        self._failing_chat_ids = failing_chat_ids or set()

    def _record(self, call: dict[str, Any]) -> str:
        self.calls.append(call)
        if call["chat_id"] in self._failing_chat_ids:
            raise TelegramTransportError(message="connection reset", body="partial")
        return '{"ok":true}'

    def send_text(self, chat_id: int, text: str, reply_markup: InlineButton | None = None) -> str:
        return self._record({"method": "send_text", "chat_id": chat_id, "text": text, "reply_markup": reply_markup})

    def edit_text(self, chat_id: int, message_id: int, text: str, reply_markup: InlineButton) -> str:
        return self._record(
            {
                "method": "edit_text",
                "chat_id": chat_id,
                "message_id": message_id,
                "text": text,
                "reply_markup": reply_markup,
            }
        )

    def send_location(self, chat_id: int, location: Location) -> str:
        return self._record({"method": "send_location", "chat_id": chat_id, "location": location})

    def methods(self) -> list[str]:
        return [call["method"] for call in self.calls]


@pytest.fixture
def telegram() -> FakeTelegramClient:
    return FakeTelegramClient()


@pytest.fixture
def make_telegram() -> Callable[..., FakeTelegramClient]:
    def factory(failing_chat_ids: set[int] | None = None) -> FakeTelegramClient:
        return FakeTelegramClient(failing_chat_ids=failing_chat_ids)

    return factory


@pytest.fixture
def celebration_config() -> CelebrationConfig:
    return CelebrationConfig(
        allowed_usernames=frozenset({"antonhulikau", "okalitova"}),
        phrases=("first", "second", "third"),
        welcome_text="welcome",
        button_label="celebrate",
    )


@pytest.fixture
def hunt_config() -> TreasureHuntConfig:
    return TreasureHuntConfig(
        allowed_usernames=frozenset({"antonhulikau", "sonicfelidae"}),
        supervisor_chat_id=49208041,
        secret_word="afsio",
        locations=content.TREASURE_HUNT_LOCATIONS,
        radius_meters=2000.0,
    )


@pytest.fixture
def settings(celebration_config: CelebrationConfig, hunt_config: TreasureHuntConfig) -> Settings:
    return Settings(
        telegram_bot_token="test-token",
        telegram_api_base_url="https://api.telegram.org",
        telegram_http_timeout_seconds=None,
        log_level="DEBUG",
        host="127.0.0.1",
        port=8080,
        celebration=celebration_config,
        treasure_hunt=hunt_config,
    )
