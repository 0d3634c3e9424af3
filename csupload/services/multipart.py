"""Multipart/form-data body builder for node creation requests."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

import httpx

# Requests built here are never sent; the URL only satisfies httpx.Request.
_ENCODER_URL = "http://multipart.invalid/"


@dataclass(frozen=True)
class MultipartBody:
    """Encoded request body and the Content-Type header that describes it."""
    content: bytes
    content_type: str


def build_multipart(field_name: str, file_path: str, fields: Mapping[str, str]) -> MultipartBody:
    """
    Encode one file part plus plain form fields as multipart/form-data.

    Args:
        field_name: Form field holding the file part
        file_path: Local file whose raw bytes become the file part
        fields: Additional string form fields

    Returns:
        MultipartBody with the encoded bytes and a boundary-bearing content type

    Raises:
        OSError: the file is missing or unreadable
    """
    with open(file_path, "rb") as fh:
        payload = fh.read()

    request = httpx.Request(
        "POST",
        _ENCODER_URL,
        data=dict(fields),
        files={field_name: (os.path.basename(file_path), payload)},
    )
    return MultipartBody(
        content=request.read(),
        content_type=request.headers["Content-Type"],
    )
