# src/transcripts/clients.py
import logging
from typing import Any, Callable, Optional

import boto3

from .config import CONTACT_TABLE, REGION, S3_REGION

logger = logging.getLogger(__name__)


def _s3_client():
    return boto3.client("s3", region_name=S3_REGION)


def _contact_table():
    return boto3.resource("dynamodb", region_name=REGION).Table(CONTACT_TABLE)


class AwsClients:
    """
    S3 client + DynamoDB table, each created on first use and then reused.

    Pass ready-made objects (or factories) to swap in test doubles.
    """

    def __init__(
        self,
        s3: Any = None,
        table: Any = None,
        s3_factory: Callable[[], Any] = _s3_client,
        table_factory: Callable[[], Any] = _contact_table,
    ):
        self._s3 = s3
        self._table = table
        self._s3_factory = s3_factory
        self._table_factory = table_factory

    @property
    def s3(self):
        if self._s3 is None:
            logger.debug("Creating S3 client (region=%s)", S3_REGION)
            self._s3 = self._s3_factory()
        return self._s3

    @property
    def table(self):
        if self._table is None:
            logger.debug("Opening DynamoDB table %s (region=%s)", CONTACT_TABLE, REGION)
            self._table = self._table_factory()
        return self._table


_clients: Optional[AwsClients] = None


def get_clients() -> AwsClients:
    """Process-wide clients; live for as long as the Lambda container does."""
    global _clients
    if _clients is None:
        _clients = AwsClients()
    return _clients


def reset_clients() -> None:
    global _clients
    _clients = None
