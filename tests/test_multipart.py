"""Tests for the multipart body builder."""
import pytest

from csupload.services.multipart import build_multipart


def _boundary(content_type: str) -> bytes:
    assert content_type.startswith("multipart/form-data; boundary=")
    return content_type.split("boundary=", 1)[1].encode()


def test_build_multipart_encodes_file_and_fields(tmp_path):
    source = tmp_path / "sample.ini"
    source.write_bytes(b"[fonts]\r\n[extensions]\r\n")

    body = build_multipart(
        "file",
        str(source),
        {"type": "144", "name": "doc00003", "parent_id": "2000"},
    )

    boundary = _boundary(body.content_type)
    assert body.content.startswith(b"--" + boundary)
    assert body.content.rstrip().endswith(b"--" + boundary + b"--")
    assert b'name="file"; filename="sample.ini"' in body.content
    assert b"[fonts]\r\n[extensions]\r\n" in body.content
    assert b'name="type"\r\n\r\n144\r\n' in body.content
    assert b'name="name"\r\n\r\ndoc00003\r\n' in body.content
    assert b'name="parent_id"\r\n\r\n2000\r\n' in body.content


def test_build_multipart_boundary_is_unique_per_body(tmp_path):
    source = tmp_path / "a.txt"
    source.write_text("x")

    first = build_multipart("file", str(source), {})
    second = build_multipart("file", str(source), {})

    assert first.content_type != second.content_type


def test_build_multipart_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_multipart("file", str(tmp_path / "missing.txt"), {"name": "doc"})
