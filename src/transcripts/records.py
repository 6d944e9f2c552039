# src/transcripts/records.py
import logging
from datetime import datetime
from enum import Enum
from typing import Optional

from .config import COMPLETED_STATUS, PARTITION_KEY

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class UpsertOutcome(str, Enum):
    UPDATED = "updated"
    RECORD_MISSING = "record_missing"
    NOT_ACKNOWLEDGED = "not_acknowledged"


def format_timestamp(dt: datetime) -> str:
    return dt.strftime(TIMESTAMP_FORMAT)


class ContactRecordStore:
    """Thin wrapper over the contact trace record table (boto3 Table resource)."""

    def __init__(self, table, partition_key: str = PARTITION_KEY):
        self._table = table
        self.partition_key = partition_key

    def get(self, contact_id: str) -> Optional[dict]:
        resp = self._table.get_item(Key={self.partition_key: contact_id}, ConsistentRead=True)
        return resp.get("Item")

    def put(self, item: dict) -> int:
        """Replace the item; returns the HTTP status of the acknowledgment."""
        resp = self._table.put_item(Item=item)
        return resp.get("ResponseMetadata", {}).get("HTTPStatusCode", 0)


def upsert_transcript(
    store: ContactRecordStore,
    contact_id: str,
    payload_json: str,
    bucket: str,
    key: str,
    now: Optional[datetime] = None,
) -> UpsertOutcome:
    """
    Stamp an existing contact record with its transcript and mark it completed.

    Records are never created here: when no record exists for contact_id
    nothing is written. There is no conditional write, so a concurrent
    change between the read and the put is overwritten.
    """
    item = store.get(contact_id)
    logger.info("Is item available ? : %s", item is not None)

    if item is None:
        logger.info("Item(%s) does not exist in DynamoDB, skipping", contact_id)
        return UpsertOutcome.RECORD_MISSING

    updated = dict(item)
    updated.update({
        store.partition_key: contact_id,
        "Transcript": payload_json,
        "UpdatedAt": format_timestamp(now or datetime.now()),
        "TranscriptS3URI": {"S3BucketName": bucket, "S3Key": key},
        "Status": COMPLETED_STATUS,
    })

    status = store.put(updated)
    if 200 <= status < 300:
        logger.info("Data saved in db (ContactId=%s)", contact_id)
        return UpsertOutcome.UPDATED

    logger.warning("put_item for ContactId=%s not acknowledged (HTTP %s)", contact_id, status)
    return UpsertOutcome.NOT_ACKNOWLEDGED
