from __future__ import annotations

import logging

from config import CelebrationConfig
from telegram.models import InlineButton, Update
from telegram.updates import decode_index, encode_index

from .delivery import MessageSender, deliver_edit, deliver_text

_LOGGER = logging.getLogger("bot.celebration")

START_COMMAND = "/start"


def next_index(index: int, count: int) -> int:
    return (index + 1) % count


def _button(config: CelebrationConfig, index: int) -> InlineButton:
    return InlineButton(text=config.button_label, callback_data=encode_index(index))


def handle_celebration_update(update: Update, sender: MessageSender, config: CelebrationConfig) -> None:
    message = update.message
    callback = update.callback_query

    if message is not None and message.text == START_COMMAND:
        deliver_text(sender, message.chat.id, config.welcome_text, reply_markup=_button(config, 0))
    elif callback is not None and callback.from_user.username in config.allowed_usernames:
        if callback.message is None:
            _LOGGER.warning("callback %s carries no message to edit", callback.id)
            return

        # the payload comes back from the client and may be stale or out of range
        index = decode_index(callback.data) % len(config.phrases)
        deliver_edit(
            sender,
            callback.message.chat.id,
            callback.message.message_id,
            config.phrases[index],
            _button(config, next_index(index, len(config.phrases))),
        )
    else:
        _LOGGER.debug("no action for update %s", update.update_id)

    _LOGGER.info("processed update %s", update)
