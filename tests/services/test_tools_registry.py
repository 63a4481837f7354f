"""Tools Registry tests — tool list and SMS limits in the send_sms schema."""

from disaster_sms.services.tools_registry import get_tools


def _by_name(tools):
    return {t["name"]: t for t in tools}


def test_two_tools_exposed(settings):
    assert set(_by_name(get_tools(settings))) == {"get_reddit_post", "send_sms"}


def test_get_reddit_post_requires_url(settings):
    schema = _by_name(get_tools(settings))["get_reddit_post"]["input_schema"]
    assert schema["required"] == ["url"]
    assert schema["properties"]["url"]["type"] == "string"


def test_send_sms_schema_uses_settings_limits(settings):
    custom = settings.model_copy(update={"sms_max_length": 150, "sms_max_messages": 4})
    messages = _by_name(get_tools(custom))["send_sms"]["input_schema"]["properties"]["messages"]
    assert messages["maxItems"] == 4
    assert messages["minItems"] == 1
    assert messages["items"]["maxLength"] == 150
    assert "150 characters" in messages["description"]
