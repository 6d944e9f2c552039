"""Pytest configuration and shared fakes for S3 / DynamoDB."""

import io
import json
import sys
from pathlib import Path

import pytest
from botocore.exceptions import ClientError

# Add src/ and tools/ to the Python path for imports
ROOT_DIR = Path(__file__).parent.parent
for extra in (ROOT_DIR / "src", ROOT_DIR / "tools"):
    if str(extra) not in sys.path:
        sys.path.insert(0, str(extra))

from transcripts.clients import AwsClients  # noqa: E402


class FakeS3:
    """Minimal stand-in for boto3's S3 client: get_object only."""

    def __init__(self, objects=None):
        self.objects = dict(objects or {})
        self.calls = []

    def get_object(self, Bucket, Key):
        self.calls.append((Bucket, Key))
        if (Bucket, Key) not in self.objects:
            raise ClientError(
                {"Error": {"Code": "NoSuchKey", "Message": "The specified key does not exist."}},
                "GetObject",
            )
        data = self.objects[(Bucket, Key)]
        if isinstance(data, str):
            data = data.encode("utf-8")
        return {"Body": io.BytesIO(data)}


class FakeTable:
    """Minimal stand-in for a boto3 DynamoDB Table keyed on ContactId."""

    def __init__(self, items=None, status_code=200, key_name="ContactId"):
        self.key_name = key_name
        self.items = {i[key_name]: dict(i) for i in (items or [])}
        self.status_code = status_code
        self.puts = []

    def get_item(self, Key, ConsistentRead=False):
        item = self.items.get(Key[self.key_name])
        return {"Item": dict(item)} if item is not None else {}

    def put_item(self, Item):
        self.puts.append(dict(Item))
        if 200 <= self.status_code < 300:
            self.items[Item[self.key_name]] = dict(Item)
        return {"ResponseMetadata": {"HTTPStatusCode": self.status_code}}


def s3_body(bucket, key):
    return json.dumps({"Records": [{"s3": {"bucket": {"name": bucket}, "object": {"key": key}}}]})


def transcript_doc(contact_id, transcript):
    return json.dumps({"Transcript": transcript, "CustomerMetadata": {"ContactId": contact_id}})


@pytest.fixture
def fake_s3():
    return FakeS3()


@pytest.fixture
def fake_table():
    return FakeTable()


@pytest.fixture
def clients(fake_s3, fake_table):
    return AwsClients(s3=fake_s3, table=fake_table)
