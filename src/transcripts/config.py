# src/transcripts/config.py
import os

def _get_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "y"}

REGION           = os.getenv("AWS_REGION", "us-east-1")
S3_REGION        = os.getenv("S3_REGION", REGION)

CONTACT_TABLE    = os.getenv("CONTACT_TABLE", "OttConnectContactTraceRecord-Dev")
PARTITION_KEY    = os.getenv("CONTACT_PARTITION_KEY", "ContactId")
COMPLETED_STATUS = os.getenv("COMPLETED_STATUS", "Completed")

LOG_LEVEL        = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_EVENTS       = _get_bool("LOG_EVENTS", "true")
