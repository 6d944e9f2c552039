"""Sync call transcripts dropped in S3 onto their DynamoDB contact records."""
