import pytest

from slackhook import (
    Attachment,
    AttachmentConstructionError,
    IconType,
    InvalidAttachmentInput,
    Message,
    TransportError,
)


class TestMessageFields:
    def test_new_message_is_empty(self, message, transport):
        assert message.transport is transport
        assert message.text is None
        assert message.channel is None
        assert message.username is None
        assert message.icon is None
        assert message.icon_type is None
        assert message.get_attachments() == []

    def test_setters_store_values_verbatim(self, message):
        message.set_text("  *bold*  ").set_channel("@alice").set_username("Bot")

        assert message.get_text() == "  *bold*  "
        assert message.get_channel() == "@alice"
        assert message.get_username() == "Bot"

    def test_aliases_chain(self, message):
        result = message.to("#ops").from_("deploy-bot").with_icon(":rocket:")

        assert result is message
        assert message.channel == "#ops"
        assert message.username == "deploy-bot"
        assert message.icon == ":rocket:"

    def test_constructor_defaults(self, transport):
        message = Message(transport, channel="#general", username="Bot", icon=":ghost:")

        assert message.channel == "#general"
        assert message.username == "Bot"
        assert message.icon_type == IconType.EMOJI

    def test_defaults_can_be_overridden(self, transport):
        message = Message(transport, channel="#general").to("#random")

        assert message.channel == "#random"


class TestMessageIcon:
    def test_emoji_icon(self, message):
        message.set_icon(":ghost:")

        assert message.icon == ":ghost:"
        assert message.icon_type == IconType.EMOJI

    def test_url_icon(self, message):
        message.set_icon("http://example.com/x.png")

        assert message.get_icon() == "http://example.com/x.png"
        assert message.get_icon_type() == IconType.URL

    def test_single_colon_is_url(self, message):
        message.set_icon(":")

        assert message.icon_type == IconType.URL

    def test_changing_icon_reclassifies(self, message):
        message.set_icon(":ghost:")
        message.set_icon("https://example.com/ghost.png")

        assert message.icon_type == IconType.URL

    @pytest.mark.parametrize("cleared", [None, ""])
    def test_clearing_icon_resets_type(self, message, cleared):
        message.set_icon(":ghost:")

        message.set_icon(cleared)

        assert message.icon is None
        assert message.icon_type is None

    def test_clearing_icon_stays_chainable(self, message):
        result = message.set_icon(None).set_text("still chaining")

        assert result is message
        assert message.text == "still chaining"


class TestMessageAttachments:
    def test_attach_instance(self, message, alert_attachment):
        result = message.attach(alert_attachment)

        assert result is message
        assert message.get_attachments() == [alert_attachment]

    def test_attach_mapping(self, message):
        message.attach({"color": "#ff0000", "text": "alert"})

        attachments = message.get_attachments()
        assert len(attachments) == 1
        assert isinstance(attachments[0], Attachment)
        assert attachments[0].color == "#ff0000"
        assert attachments[0].text == "alert"

    def test_attach_preserves_order(self, message, alert_attachment, info_attachment):
        message.attach(alert_attachment).attach({"text": "middle"}).attach(info_attachment)

        texts = [a.text for a in message.get_attachments()]
        assert texts == ["alert", "middle", "info"]

    @pytest.mark.parametrize("value", [42, "text", None, ["color", "red"], 3.5])
    def test_attach_rejects_other_types(self, message, alert_attachment, value):
        message.attach(alert_attachment)

        with pytest.raises(InvalidAttachmentInput, match="keyed mapping"):
            message.attach(value)

        assert message.get_attachments() == [alert_attachment]

    def test_attach_invalid_fields_leaves_message_untouched(self, message, alert_attachment):
        message.attach(alert_attachment)

        with pytest.raises(AttachmentConstructionError):
            message.attach({"not_a_field": True})

        assert message.get_attachments() == [alert_attachment]

    def test_get_attachments_returns_copy(self, message, alert_attachment):
        message.attach(alert_attachment)

        message.get_attachments().append("garbage")
        message.get_attachments().clear()

        assert message.get_attachments() == [alert_attachment]
        assert message.attachments == (alert_attachment,)

    def test_set_attachments_replaces(self, message, alert_attachment, info_attachment):
        message.attach({"text": "old"})

        result = message.set_attachments([alert_attachment, info_attachment])

        assert result is message
        assert message.get_attachments() == [alert_attachment, info_attachment]

    def test_set_attachments_coerces_mappings(self, message):
        message.set_attachments([{"text": "a"}, {"text": "b"}])

        assert [a.text for a in message.get_attachments()] == ["a", "b"]

    def test_set_attachments_accepts_generator(self, message):
        message.set_attachments({"text": str(i)} for i in range(3))

        assert len(message.get_attachments()) == 3

    def test_set_empty_attachments_clears(self, message, alert_attachment, info_attachment):
        message.attach(alert_attachment).attach(info_attachment)

        message.set_attachments([])

        assert message.get_attachments() == []

    def test_set_attachments_failure_keeps_previous(self, message, alert_attachment):
        message.attach(alert_attachment)

        with pytest.raises(InvalidAttachmentInput):
            message.set_attachments([{"text": "fine"}, 42])

        assert message.get_attachments() == [alert_attachment]

    def test_clear_attachments_is_idempotent(self, message, alert_attachment):
        message.attach(alert_attachment)

        assert message.clear_attachments() is message
        assert message.get_attachments() == []

        message.clear_attachments()
        assert message.get_attachments() == []


class TestMessageSend:
    def test_send_with_text_dispatches_once(self, message, transport):
        result = message.send("hello")

        assert result is None
        assert message.text == "hello"
        transport.dispatch.assert_called_once_with(message)
        assert transport.dispatch.call_args.args[0].text == "hello"

    def test_send_without_text_keeps_existing(self, message, transport):
        message.set_text("hi")

        message.send()

        assert message.text == "hi"
        transport.dispatch.assert_called_once_with(message)

    def test_send_with_empty_text_keeps_existing(self, message, transport):
        message.set_text("hi")

        message.send("")

        assert message.text == "hi"

    def test_send_can_be_repeated(self, message, transport):
        message.send("one")
        message.send("two")

        assert transport.dispatch.call_count == 2

    def test_transport_error_propagates_and_keeps_fields(self, message, transport):
        transport.dispatch.side_effect = TransportError("boom", status_code=500)
        message.to("#ops").attach({"text": "details"})

        with pytest.raises(TransportError) as exc_info:
            message.send("hello")

        assert exc_info.value.status_code == 500
        assert message.text == "hello"
        assert message.channel == "#ops"
        assert len(message.get_attachments()) == 1


class TestMessagePayload:
    def test_empty_message_payload(self, message):
        assert message.to_payload() == {}

    def test_full_payload(self, message):
        message.set_text("Deploy finished").to("#deploys").from_("ci").with_icon(":rocket:")
        message.attach({"color": "good", "text": "v1.4.2"})

        assert message.to_payload() == {
            "text": "Deploy finished",
            "channel": "#deploys",
            "username": "ci",
            "icon_emoji": ":rocket:",
            "attachments": [{"color": "good", "text": "v1.4.2"}],
        }

    def test_url_icon_payload_key(self, message):
        message.with_icon("https://example.com/bot.png")

        assert message.to_payload() == {"icon_url": "https://example.com/bot.png"}
