"""Tests for TurnContext."""

import pytest

from topiary.topics import TurnContext


class TestText:
    @pytest.mark.parametrize(
        "activity, expected",
        [
            ("hello", "hello"),
            ({"text": "hi", "type": "message"}, "hi"),
            ({"type": "conversationUpdate"}, None),
            ({"text": 42}, None),
            (None, None),
        ],
    )
    def test_text(self, activity, expected):
        assert TurnContext(conversation_id="c", activity=activity).text == expected


class TestSend:
    @pytest.mark.asyncio
    async def test_send_collects_responses(self):
        """Should keep outbound messages in order."""
        context = TurnContext(conversation_id="c", activity="hi")
        await context.send("one")
        await context.send({"text": "two"})
        assert context.responses == ["one", {"text": "two"}]

    def test_defaults(self):
        context = TurnContext(conversation_id="c", activity="hi")
        assert context.conversation_state == {}
        assert context.turn_number == 0
        assert context.responses == []
