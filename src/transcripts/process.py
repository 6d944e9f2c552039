# src/transcripts/process.py
import logging
from datetime import datetime
from typing import Iterable, Optional

from .clients import AwsClients
from .envelope import extract_storage_ref
from .payload import parse_payload
from .records import ContactRecordStore, upsert_transcript
from .storage import fetch_text, normalize_key

logger = logging.getLogger(__name__)


def process_message(body: str, clients: AwsClients, now: Optional[datetime] = None) -> dict:
    # 1) S3 event notification -> bucket/key
    ref = extract_storage_ref(body)
    logger.info("S3 object: bucket=%s key=%s", ref.bucket, ref.key)

    # 2) Transcript document
    text = fetch_text(clients.s3, ref.bucket, ref.key)
    payload = parse_payload(text)
    logger.info("Contact ID : %s (%d transcript entries)", payload.contact_id, len(payload.transcript))

    # 3) Update the contact record, only if it already exists
    key = normalize_key(ref.key)
    outcome = upsert_transcript(
        ContactRecordStore(clients.table),
        payload.contact_id,
        payload.to_json(),
        ref.bucket,
        key,
        now=now,
    )
    return {"contact_id": payload.contact_id, "bucket": ref.bucket, "key": key, "outcome": outcome.value}


def process_batch(records: Iterable[dict], clients: AwsClients, now: Optional[datetime] = None) -> dict:
    """
    Run every SQS record through process_message, one after another.

    A failing message is logged and skipped; it never stops the rest of the batch.
    """
    processed, failed = [], []
    for rec in records:
        message_id = rec.get("messageId")
        body = rec.get("body", "")
        logger.debug("SQS body (%s): %s", message_id, body)
        try:
            result = process_message(body, clients, now=now)
        except Exception:
            logger.error("Failed to process message %s", message_id, exc_info=True)
            failed.append(message_id)
            continue
        processed.append({"message_id": message_id, **result})
    return {"ok": True, "processed": processed, "failed": failed}
