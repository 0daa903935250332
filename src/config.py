from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

import content
from telegram.models import Location


@dataclass(frozen=True)
class CelebrationConfig:
    allowed_usernames: frozenset[str]
    phrases: tuple[str, ...]
    welcome_text: str = content.CELEBRATION_WELCOME_TEXT
    button_label: str = content.CELEBRATION_BUTTON_LABEL


@dataclass(frozen=True)
class TreasureHuntConfig:
    allowed_usernames: frozenset[str]
    supervisor_chat_id: int
    secret_word: str
    locations: tuple[Location, ...]
    radius_meters: float = content.TREASURE_HUNT_RADIUS_METERS


@dataclass(frozen=True)
class Settings:
    telegram_bot_token: str
    telegram_api_base_url: str
    telegram_http_timeout_seconds: float | None
    log_level: str
    host: str
    port: int
    celebration: CelebrationConfig
    treasure_hunt: TreasureHuntConfig


class ConfigError(ValueError):
    pass


def _require_env(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise ConfigError(f"Missing required environment variable: {name}")
    return value


def _optional_env(name: str) -> str | None:
    return os.getenv(name, "").strip() or None


def _parse_usernames(name: str, raw: str | None, default: tuple[str, ...]) -> frozenset[str]:
    if raw is None:
        return frozenset(default)

    usernames = frozenset(chunk.strip().lstrip("@") for chunk in raw.split(",") if chunk.strip())
    if not usernames:
        raise ConfigError(f"{name} must contain at least one username")
    return usernames


def _parse_int(name: str, raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"Invalid {name}: {raw}") from exc


def _parse_float(name: str, raw: str | None, default: float | None) -> float | None:
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"Invalid {name}: {raw}") from exc


def parse_locations(raw: str) -> tuple[Location, ...]:
    """Parse ``"lat,lon;lat,lon"`` into an ordered tuple of locations."""
    locations: list[Location] = []
    for chunk in raw.split(";"):
        item = chunk.strip()
        if not item:
            continue
        parts = [part.strip() for part in item.split(",")]
        if len(parts) != 2:
            raise ConfigError(f"Invalid TREASURE_HUNT_LOCATIONS entry: {item}")
        try:
            locations.append(Location(latitude=float(parts[0]), longitude=float(parts[1])))
        except ValueError as exc:
            raise ConfigError(f"Invalid TREASURE_HUNT_LOCATIONS entry: {item}") from exc

    if not locations:
        raise ConfigError("TREASURE_HUNT_LOCATIONS did not contain any coordinates")
    return tuple(locations)


def load_settings() -> Settings:
    load_dotenv()

    raw_locations = _optional_env("TREASURE_HUNT_LOCATIONS")
    locations = parse_locations(raw_locations) if raw_locations else content.TREASURE_HUNT_LOCATIONS

    celebration = CelebrationConfig(
        allowed_usernames=_parse_usernames(
            "CELEBRATION_ALLOWED_USERNAMES",
            _optional_env("CELEBRATION_ALLOWED_USERNAMES"),
            content.CELEBRATION_ALLOWED_USERNAMES,
        ),
        phrases=content.CELEBRATION_PHRASES,
    )
    if not celebration.phrases:
        raise ConfigError("Celebration phrase list must not be empty")

    treasure_hunt = TreasureHuntConfig(
        allowed_usernames=_parse_usernames(
            "TREASURE_HUNT_ALLOWED_USERNAMES",
            _optional_env("TREASURE_HUNT_ALLOWED_USERNAMES"),
            content.TREASURE_HUNT_ALLOWED_USERNAMES,
        ),
        supervisor_chat_id=_parse_int(
            "TREASURE_HUNT_SUPERVISOR_CHAT_ID",
            _optional_env("TREASURE_HUNT_SUPERVISOR_CHAT_ID"),
            content.TREASURE_HUNT_SUPERVISOR_CHAT_ID,
        ),
        secret_word=_optional_env("TREASURE_HUNT_SECRET_WORD") or content.TREASURE_HUNT_SECRET_WORD,
        locations=locations,
        radius_meters=_parse_float(
            "TREASURE_HUNT_RADIUS_METERS",
            _optional_env("TREASURE_HUNT_RADIUS_METERS"),
            content.TREASURE_HUNT_RADIUS_METERS,
        ),
    )

    return Settings(
        telegram_bot_token=_require_env("TELEGRAM_BOT_TOKEN"),
        telegram_api_base_url=_optional_env("TELEGRAM_API_BASE_URL") or "https://api.telegram.org",
        telegram_http_timeout_seconds=_parse_float(
            "TELEGRAM_HTTP_TIMEOUT_SECONDS",
            _optional_env("TELEGRAM_HTTP_TIMEOUT_SECONDS"),
            None,
        ),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip() or "INFO",
        host=os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=_parse_int("PORT", _optional_env("PORT"), 8080),
        celebration=celebration,
        treasure_hunt=treasure_hunt,
    )
