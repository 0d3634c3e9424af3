"""
csupload - bulk document upload into Content Server.

Authenticates once against the REST API, then creates the same file as
many numbered documents with a bounded number of uploads in flight.

Usage:
    from csupload import UploadConfig, run_bulk_upload

    config = UploadConfig(url="http://cs/otcs/cs.exe", file="report.pdf", count=100)
    summary = await run_bulk_upload(config)
"""
__version__ = "0.1.0"

from .driver import BulkUploadDriver, build_tasks, document_name, run_bulk_upload
from .errors import (
    AuthenticationError,
    ConfigError,
    CSUploadError,
    DocumentCreateError,
    MissingTicketError,
)
from .models import BatchSummary, UploadConfig, UploadResult, UploadStatus, UploadTask
from .services import ContentServerConnection, MultipartBody, build_multipart

__all__ = [
    # Main
    "run_bulk_upload",
    "BulkUploadDriver",
    "build_tasks",
    "document_name",
    # Models
    "UploadConfig",
    "UploadTask",
    "UploadResult",
    "UploadStatus",
    "BatchSummary",
    # Services
    "ContentServerConnection",
    "MultipartBody",
    "build_multipart",
    # Errors
    "CSUploadError",
    "ConfigError",
    "AuthenticationError",
    "MissingTicketError",
    "DocumentCreateError",
]
