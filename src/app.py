from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool

from config import Settings, load_settings
from logging_config import configure_logging
from orchestration.celebration import handle_celebration_update
from orchestration.delivery import MessageSender
from orchestration.treasure_hunt import handle_treasure_hunt_update
from telegram.client import TelegramClient
from telegram.models import Update
from telegram.updates import UpdateError, parse_update

_LOGGER = logging.getLogger("bot.app")


def _read_update(body: bytes) -> Update | None:
    try:
        return parse_update(body)
    except UpdateError as exc:
        _LOGGER.warning("error parsing update: %s", exc)
        return None


def create_app(settings: Settings, sender: MessageSender | None = None) -> FastAPI:
    telegram = sender or TelegramClient(
        settings.telegram_bot_token,
        base_url=settings.telegram_api_base_url,
        timeout_seconds=settings.telegram_http_timeout_seconds,
    )
    app = FastAPI(title="Celebration & Treasure Hunt Bots", version="0.1.0")

    @app.get("/healthz")
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/celebration/webhook")
    async def celebration_webhook(request: Request) -> dict[str, str]:
        update = _read_update(await request.body())
        if update is None:
            return {"status": "ignored"}
        await run_in_threadpool(handle_celebration_update, update, telegram, settings.celebration)
        return {"status": "ok"}

    @app.post("/treasure-hunt/webhook")
    async def treasure_hunt_webhook(request: Request) -> dict[str, str]:
        update = _read_update(await request.body())
        if update is None:
            return {"status": "ignored"}
        await run_in_threadpool(handle_treasure_hunt_update, update, telegram, settings.treasure_hunt)
        return {"status": "ok"}

    return app


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    logger = logging.getLogger("bot")
    logger.info(
        "Starting webhook server on %s:%s (celebration users: %d, hunt users: %d, hunt hints: %d)",
        settings.host,
        settings.port,
        len(settings.celebration.allowed_usernames),
        len(settings.treasure_hunt.allowed_usernames),
        len(settings.treasure_hunt.locations),
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
