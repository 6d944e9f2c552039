"""Failures that abort a single message; the batch keeps going."""


class PipelineError(RuntimeError):
    """Base class for message-scoped processing failures."""


class EnvelopeError(PipelineError):
    """The SQS body is not a usable S3 event notification."""


class ObjectFetchError(PipelineError):
    """Reading the transcript object from S3 failed."""

    def __init__(self, bucket: str, key: str, reason: str):
        super().__init__(f"S3 read failed (bucket='{bucket}', key='{key}'): {reason}")
        self.bucket = bucket
        self.key = key


class PayloadError(PipelineError):
    """The transcript document is missing fields or is not JSON."""
