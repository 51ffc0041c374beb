"""Envelope model tests."""

import pytest

from ghcard.schemas import EventEnvelope


class TestEventEnvelope:
    def test_defaults(self):
        envelope = EventEnvelope()
        assert envelope.event_name == ""
        assert envelope.action is None
        assert envelope.payload == {}
        assert envelope.branch is None

    @pytest.mark.parametrize(
        "ref, expected",
        [
            ("refs/heads/main", "main"),
            ("refs/tags/v1.0", "v1.0"),
            ("refs/heads/feature/a", "feature/a"),
            ("refs/pull/1/merge", "refs/pull/1/merge"),
        ],
    )
    def test_branch_from_ref(self, ref, expected):
        assert EventEnvelope(ref=ref).branch == expected

    def test_ref_name_wins_over_ref(self):
        assert EventEnvelope(ref="refs/heads/a", ref_name="b").branch == "b"

    def test_from_webhook(self):
        payload = {
            "action": "opened",
            "ref": "refs/tags/v2",
            "sender": {"login": "alice"},
            "repository": {"full_name": "o/r"},
        }
        envelope = EventEnvelope.from_webhook("release", payload, "https://ghe.example/")
        assert envelope.event_name == "release"
        assert envelope.action == "opened"
        assert envelope.actor == "alice"
        assert envelope.repository == "o/r"
        assert envelope.server_url == "https://ghe.example"
        assert envelope.ref_name == "v2"
        assert envelope.payload is not payload
        assert envelope.payload == payload

    def test_from_webhook_tolerates_missing_parts(self):
        envelope = EventEnvelope.from_webhook("push", {"sender": None})
        assert envelope.actor == ""
        assert envelope.repository == ""
        assert envelope.ref is None

    def test_extra_keys_are_kept(self):
        envelope = EventEnvelope(event_name="push", run_id="42", workflow="notify")
        assert envelope.model_extra == {"run_id": "42", "workflow": "notify"}
