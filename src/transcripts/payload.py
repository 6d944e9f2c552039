# src/transcripts/payload.py
import json
from dataclasses import dataclass
from typing import Any, List

from .errors import PayloadError


@dataclass(frozen=True)
class TranscriptPayload:
    contact_id: str
    transcript: List[Any]

    def wrapped(self) -> dict:
        # persisted shape differs from the source document
        return {"Transcripts": self.transcript}

    def to_json(self) -> str:
        return json.dumps(self.wrapped(), separators=(",", ":"), ensure_ascii=False)


def parse_payload(text: str) -> TranscriptPayload:
    """
    Parse a transcript document:
      {"Transcript": [...], "CustomerMetadata": {"ContactId": "..."}}
    Transcript entries are opaque and passed through as-is.
    """
    try:
        doc = json.loads(text)
    except ValueError as e:
        raise PayloadError(f"Transcript document is not valid JSON: {e}") from e
    if not isinstance(doc, dict):
        raise PayloadError("Transcript document must be a JSON object")

    transcript = doc.get("Transcript")
    if not isinstance(transcript, list):
        raise PayloadError("'Transcript' missing or not an array")

    meta = doc.get("CustomerMetadata")
    contact_id = meta.get("ContactId") if isinstance(meta, dict) else None
    if not isinstance(contact_id, str) or not contact_id:
        raise PayloadError("'CustomerMetadata.ContactId' missing or not a string")

    return TranscriptPayload(contact_id=contact_id, transcript=transcript)
