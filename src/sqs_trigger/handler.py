# src/sqs_trigger/handler.py
import json
import logging

from transcripts.clients import get_clients
from transcripts.config import LOG_EVENTS
from transcripts.logging_config import setup_logging
from transcripts.process import process_batch

setup_logging()
logger = logging.getLogger(__name__)


def handler(event, context):
    if LOG_EVENTS:
        logger.info("SQS Input : %s", json.dumps(event))
    records = event.get("Records", [])
    summary = process_batch(records, get_clients())
    logger.info("Batch done: %d processed, %d failed", len(summary["processed"]), len(summary["failed"]))
    return summary
