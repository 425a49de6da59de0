import time

from netron.chat_state import ActiveChat, ChatMessage, current_timestamp, short_id


def _message(text, timestamp=1, own=False):
    return ChatMessage("peer", "nick", text, timestamp, own)


def test_current_timestamp_is_milliseconds_now():
    before = time.time_ns() // 1_000_000
    stamp = current_timestamp()
    after = time.time_ns() // 1_000_000
    assert before <= stamp <= after


def test_short_id_truncates_long_values():
    assert short_id("abcdefghijklmnop") == "abcdefgh"


def test_short_id_keeps_short_values():
    assert short_id("abc") == "abc"


def test_short_id_uses_text_form():
    assert short_id(1234567890123) == "12345678"


def test_add_message_keeps_order():
    chat = ActiveChat("topic")
    first, second = _message("one", 1), _message("two", 2)
    chat.add_message(first)
    chat.add_message(second)
    assert chat.messages == [first, second]


def test_new_chat_starts_empty():
    chat = ActiveChat("topic")
    assert chat.messages == []
    assert chat.online_users == {}


def test_set_online_replaces_nickname():
    chat = ActiveChat("topic")
    chat.set_online("peer-a", "alice")
    chat.set_online("peer-a", "alicia")
    chat.set_online("peer-b", "bob")
    assert chat.online_users == {"peer-a": "alicia", "peer-b": "bob"}


def test_message_key_is_timestamp_and_text():
    message = _message("hello", 42, own=True)
    assert message.key == (42, "hello")
    assert message.is_own is True


def test_chats_do_not_share_lists():
    first, second = ActiveChat("a"), ActiveChat("b")
    first.add_message(_message("x"))
    assert len(second.messages) == 0