from __future__ import annotations

import logging

import content
from config import TreasureHuntConfig
from geo.distance import within_radius
from telegram.models import Location, Message, Update

from .delivery import MessageSender, deliver_location, deliver_text

_LOGGER = logging.getLogger("bot.treasure_hunt")

START_COMMAND = "/start"
UNLOCK_COMMAND = "/unlock"


def nearby_hints(
    probe: Location,
    candidates: tuple[Location, ...],
    radius_meters: float,
) -> list[tuple[int, Location]]:
    return [
        (index, candidate)
        for index, candidate in enumerate(candidates)
        if within_radius(candidate, probe, radius_meters)
    ]


def _handle_location(
    message: Message,
    location: Location,
    sender: MessageSender,
    config: TreasureHuntConfig,
) -> None:
    chat_id = message.chat.id
    # overlapping geofences each reveal their own hint
    matches = nearby_hints(location, config.locations, config.radius_meters)
    for index, candidate in matches:
        deliver_text(sender, chat_id, content.HUNT_CHECK_PLACE_TEXT)
        deliver_text(
            sender,
            config.supervisor_chat_id,
            content.SUPERVISOR_CHECKING_TEMPLATE.format(index=index),
        )
        deliver_location(sender, chat_id, candidate)

    if not matches:
        deliver_text(sender, chat_id, content.HUNT_NO_HINTS_TEXT)


def handle_treasure_hunt_update(update: Update, sender: MessageSender, config: TreasureHuntConfig) -> None:
    message = update.message
    if message is None or message.chat.username not in config.allowed_usernames:
        _LOGGER.debug("ignoring update %s from a chat outside the allow-list", update.update_id)
        return

    chat_id = message.chat.id
    text = message.text

    if text == START_COMMAND:
        deliver_text(sender, chat_id, content.HUNT_START_TEXT)
        deliver_text(sender, config.supervisor_chat_id, content.SUPERVISOR_STARTED_TEXT)
    elif text == UNLOCK_COMMAND:
        deliver_text(sender, chat_id, content.HUNT_UNLOCK_PROMPT)
    elif text.lower() == config.secret_word.lower():
        deliver_text(sender, chat_id, content.HUNT_SUCCESS_TEXT)
        deliver_text(sender, config.supervisor_chat_id, content.SUPERVISOR_SOLVED_TEXT)
    elif message.location is not None and message.location.latitude > 0:
        _handle_location(message, message.location, sender, config)
    else:
        deliver_text(sender, chat_id, content.HUNT_WRONG_PASSWORD_TEXT)
        deliver_text(
            sender,
            config.supervisor_chat_id,
            content.SUPERVISOR_ATTEMPT_TEMPLATE.format(text=text),
        )

    _LOGGER.info("processed update %s", update)
