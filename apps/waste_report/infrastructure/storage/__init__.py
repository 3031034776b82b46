"""Blob Storage Infrastructure."""

from waste_report.infrastructure.storage.s3_blob_store import S3BlobStore

__all__ = ["S3BlobStore"]
