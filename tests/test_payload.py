"""Tests for the transcript document parser."""

import json

import pytest

from conftest import transcript_doc
from transcripts.errors import PayloadError
from transcripts.payload import TranscriptPayload, parse_payload


class TestParsePayload:
    def test_extracts_contact_id_and_transcript(self):
        entries = [{"ParticipantId": "AGENT", "Content": "hi"}, {"ParticipantId": "CUSTOMER", "Content": "hello"}]
        payload = parse_payload(transcript_doc("C1", entries))
        assert payload.contact_id == "C1"
        assert payload.transcript == entries

    def test_transcript_is_rewrapped(self):
        payload = parse_payload(transcript_doc("C1", [{"text": "hi"}]))
        assert payload.wrapped() == {"Transcripts": [{"text": "hi"}]}
        assert payload.to_json() == '{"Transcripts":[{"text":"hi"}]}'

    def test_empty_transcript_is_allowed(self):
        assert parse_payload(transcript_doc("C1", [])).to_json() == '{"Transcripts":[]}'

    def test_non_ascii_kept_verbatim(self):
        payload = parse_payload(transcript_doc("C1", [{"text": "¿qué?"}]))
        assert json.loads(payload.to_json()) == {"Transcripts": [{"text": "¿qué?"}]}
        assert "¿qué?" in payload.to_json()

    def test_extra_fields_are_ignored(self):
        doc = json.dumps({
            "Version": "1.1.0",
            "Transcript": [1, "two", None],
            "CustomerMetadata": {"ContactId": "C9", "InstanceId": "i-1"},
        })
        assert parse_payload(doc) == TranscriptPayload("C9", [1, "two", None])

    @pytest.mark.parametrize("text", [
        "not json",
        "[]",
        json.dumps({"CustomerMetadata": {"ContactId": "C1"}}),
        json.dumps({"Transcript": {}, "CustomerMetadata": {"ContactId": "C1"}}),
        json.dumps({"Transcript": []}),
        json.dumps({"Transcript": [], "CustomerMetadata": {}}),
        json.dumps({"Transcript": [], "CustomerMetadata": {"ContactId": ""}}),
        json.dumps({"Transcript": [], "CustomerMetadata": {"ContactId": 42}}),
        json.dumps({"Transcript": [], "CustomerMetadata": "C1"}),
    ])
    def test_invalid_documents_raise(self, text):
        with pytest.raises(PayloadError):
            parse_payload(text)
