#!/usr/bin/env python3
# tools/replay_event.py
import sys, json, argparse, uuid
from pathlib import Path

# --- Repo imports (works regardless of CWD)
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

from transcripts.clients import get_clients
from transcripts.logging_config import setup_logging
from transcripts.process import process_batch

def s3_notification(bucket: str, key: str) -> str:
    """SQS body as delivered by an S3 -> SQS event notification (only the fields we read)."""
    return json.dumps({"Records": [{"s3": {"bucket": {"name": bucket}, "object": {"key": key}}}]})

def sqs_event_for(bucket: str, key: str) -> dict:
    return {"Records": [{"messageId": str(uuid.uuid4()), "body": s3_notification(bucket, key)}]}

def load_event(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        event = json.load(f)
    if not isinstance(event, dict) or "Records" not in event:
        raise SystemExit(f"{path}: expected an SQS event with a top-level 'Records' array")
    return event

# --------------------------
# CLI
# --------------------------
def main(argv=None):
    ap = argparse.ArgumentParser(description="Replay an SQS event (or one S3 object) through the transcript sync pipeline.")
    ap.add_argument("--event", help="Path to a saved SQS event JSON")
    ap.add_argument("--bucket", help="Bucket of a single transcript object to replay")
    ap.add_argument("--key", help="Key of a single transcript object to replay (may be %%3A-escaped)")
    ap.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    args = ap.parse_args(argv)

    if args.event:
        event = load_event(args.event)
    elif args.bucket and args.key:
        event = sqs_event_for(args.bucket, args.key)
    else:
        ap.error("pass --event FILE or both --bucket and --key")

    setup_logging(args.log_level)
    summary = process_batch(event["Records"], get_clients())
    print(json.dumps(summary, indent=2))
    return 1 if summary["failed"] else 0

if __name__ == "__main__":
    sys.exit(main())
