# src/transcripts/storage.py
import logging

from botocore.exceptions import BotoCoreError, ClientError

from .errors import ObjectFetchError

logger = logging.getLogger(__name__)


def normalize_key(key: str) -> str:
    if key.startswith("/"):
        key = key[1:]
    # a trailing '/' is left alone (see DESIGN.md, open questions)
    # S3 notifications escape ':' in timestamped keys
    return key.replace("%3A", ":")


def fetch_text(s3, bucket: str, key: str) -> str:
    """Read the whole object as UTF-8 text. No retries."""
    key = normalize_key(key)
    logger.info("S3 read: bucket=%s key=%s", bucket, key)
    try:
        resp = s3.get_object(Bucket=bucket, Key=key)
        return resp["Body"].read().decode("utf-8")
    except ClientError as e:
        code = e.response.get("Error", {}).get("Code", "Unknown")
        raise ObjectFetchError(bucket, key, code) from e
    except (BotoCoreError, UnicodeDecodeError) as e:
        raise ObjectFetchError(bucket, key, str(e)) from e
