# src/transcripts/envelope.py
import json
from typing import NamedTuple

from .errors import EnvelopeError


class StorageRef(NamedTuple):
    bucket: str
    key: str


def extract_storage_ref(body: str) -> StorageRef:
    """
    Pull bucket/key out of an S3 event notification carried in an SQS body.

    Only Records[0] is looked at. The key is returned as sent by S3
    (still percent-escaped); see storage.normalize_key.
    """
    try:
        s3 = json.loads(body)["Records"][0]["s3"]
        bucket = s3["bucket"]["name"]
        key = s3["object"]["key"]
    except (ValueError, KeyError, IndexError, TypeError) as e:
        raise EnvelopeError(f"Not an S3 event notification: {e!r}") from e

    if not isinstance(bucket, str) or not isinstance(key, str):
        raise EnvelopeError("Records[0].s3 bucket name / object key must be strings")
    return StorageRef(bucket, key)
