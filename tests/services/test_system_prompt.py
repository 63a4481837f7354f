"""System prompt tests."""

from disaster_sms.services.system_prompt import (
    CONTINUE_PROMPT, build_system_prompt, build_user_message,
)


def test_prompt_names_megathread_and_limits():
    prompt = build_system_prompt("https://www.reddit.com/r/x/comments/1/", 150, 5)
    assert "https://www.reddit.com/r/x/comments/1/" in prompt
    assert "150 characters or less" in prompt
    assert "up to 5 messages" in prompt
    assert "send_sms" in prompt
    assert "get_reddit_post" in prompt


def test_user_message_carries_query():
    assert build_user_message("roads?") == {
        "role": "user", "content": "User query: roads?",
    }


def test_continue_prompt_asks_for_final_answer():
    assert "final SMS-ready answer" in CONTINUE_PROMPT
