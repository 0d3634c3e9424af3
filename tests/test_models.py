"""Tests for csupload models."""
import pytest

from csupload.errors import ConfigError
from csupload.models import BatchSummary, UploadConfig, UploadResult, UploadStatus


class TestUploadConfig:
    def test_defaults(self):
        config = UploadConfig()
        assert config.parent_id == 2000
        assert config.prefix == "doc"
        assert config.count == 5
        assert config.url == ""
        assert config.username == "Admin"
        assert config.password == "livelink"
        assert config.concurrency == 5
        assert config.file

    def test_validate_requires_file_first(self):
        with pytest.raises(ConfigError, match="You must specify a file"):
            UploadConfig(file="", url="").validate()

    def test_validate_requires_url(self):
        with pytest.raises(ConfigError, match="You must specify a url"):
            UploadConfig(file="a.txt", url="").validate()

    def test_validate_rejects_zero_concurrency(self):
        with pytest.raises(ConfigError, match="concurrency"):
            UploadConfig(file="a.txt", url="http://cs", concurrency=0).validate()

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_validate_rejects_non_positive_timeout(self, timeout):
        with pytest.raises(ConfigError, match="timeout must be positive"):
            UploadConfig(file="a.txt", url="http://cs", timeout=timeout).validate()

    def test_validate_rejects_negative_count(self):
        with pytest.raises(ConfigError, match="count"):
            UploadConfig(file="a.txt", url="http://cs", count=-1).validate()

    def test_validate_ok(self):
        UploadConfig(file="a.txt", url="http://cs", count=0).validate()


class TestUploadResult:
    def test_ok(self):
        result = UploadResult.ok("doc00001")
        assert result.success is True
        assert result.status == UploadStatus.SUCCESS
        assert result.node_id is None
        assert result.error is None

    def test_fail(self):
        result = UploadResult.fail("doc00001", "500 Internal Server Error")
        assert result.success is False
        assert result.error == "500 Internal Server Error"


def test_batch_summary_counts():
    summary = BatchSummary(
        authenticated=True,
        results=[
            UploadResult.ok("doc00000"),
            UploadResult.fail("doc00001", "boom"),
            UploadResult.ok("doc00002"),
        ],
    )
    assert summary.total == 3
    assert summary.succeeded == 2
    assert summary.failed == 1
    assert summary.all_success is False
