import pytest

from orchestration.celebration import handle_celebration_update, next_index
from telegram.models import CallbackQuery, Chat, InlineButton, Message, Update, User


def _start_update(username: str = "stranger") -> Update:
    return Update(
        update_id=1,
        message=Message(message_id=10, chat=Chat(id=42, username=username), text="/start"),
    )


def _click_update(data: str, username: str = "okalitova") -> Update:
    return Update(
        update_id=2,
        callback_query=CallbackQuery(
            id="cb",
            from_user=User(id=7, username=username),
            data=data,
            message=Message(message_id=55, chat=Chat(id=42)),
        ),
    )


@pytest.mark.parametrize("count", [1, 2, 3, 7])
def test_next_index_cycles_back_after_count_steps(count: int) -> None:
    for start in range(count):
        index = start
        seen = []
        for _ in range(count):
            index = next_index(index, count)
            assert 0 <= index < count
            seen.append(index)
        assert index == start
        assert sorted(seen) == list(range(count))


def test_start_sends_welcome_with_first_button(telegram, celebration_config) -> None:
    handle_celebration_update(_start_update(), telegram, celebration_config)
    assert telegram.calls == [
        {
            "method": "send_text",
            "chat_id": 42,
            "text": "welcome",
            "reply_markup": InlineButton(text="celebrate", callback_data="0"),
        }
    ]


def test_allowed_click_edits_message_and_advances_index(telegram, celebration_config) -> None:
    handle_celebration_update(_click_update("1"), telegram, celebration_config)
    assert telegram.calls == [
        {
            "method": "edit_text",
            "chat_id": 42,
            "message_id": 55,
            "text": "second",
            "reply_markup": InlineButton(text="celebrate", callback_data="2"),
        }
    ]


def test_click_on_last_phrase_wraps_to_zero(telegram, celebration_config) -> None:
    handle_celebration_update(_click_update("2"), telegram, celebration_config)
    assert telegram.calls[0]["text"] == "third"
    assert telegram.calls[0]["reply_markup"].callback_data == "0"


def test_non_numeric_payload_shows_first_phrase(telegram, celebration_config) -> None:
    handle_celebration_update(_click_update("garbage"), telegram, celebration_config)
    assert telegram.calls[0]["text"] == "first"
    assert telegram.calls[0]["reply_markup"].callback_data == "1"


def test_out_of_range_payload_stays_in_bounds(telegram, celebration_config) -> None:
    handle_celebration_update(_click_update("10"), telegram, celebration_config)
    assert telegram.calls[0]["text"] == "second"
    assert telegram.calls[0]["reply_markup"].callback_data == "2"


def test_click_from_unknown_user_is_ignored(telegram, celebration_config) -> None:
    handle_celebration_update(_click_update("0", username="intruder"), telegram, celebration_config)
    assert telegram.calls == []


def test_plain_text_is_ignored(telegram, celebration_config) -> None:
    update = Update(update_id=3, message=Message(message_id=1, chat=Chat(id=42), text="hello"))
    handle_celebration_update(update, telegram, celebration_config)
    assert telegram.calls == []


def test_click_without_message_is_ignored(telegram, celebration_config) -> None:
    update = Update(
        update_id=4,
        callback_query=CallbackQuery(id="cb", from_user=User(id=7, username="okalitova"), data="0"),
    )
    handle_celebration_update(update, telegram, celebration_config)
    assert telegram.calls == []


def test_transport_failure_is_swallowed(make_telegram, celebration_config) -> None:
    client = make_telegram(failing_chat_ids={42})
    handle_celebration_update(_start_update(), client, celebration_config)
    assert client.methods() == ["send_text"]
