"""Services for csupload."""
from .connection import ContentServerConnection
from .multipart import MultipartBody, build_multipart

__all__ = [
    "ContentServerConnection",
    "MultipartBody",
    "build_multipart",
]
