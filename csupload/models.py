"""
Models for csupload.

Immutable dataclasses describing one bulk upload run.
"""
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .errors import ConfigError


def default_sample_file() -> str:
    """Return a file that exists on a stock install of the current platform."""
    if sys.platform.startswith("win"):
        return r"c:\windows\win.ini"
    return "/etc/hosts"


class UploadStatus(Enum):
    """Upload operation status."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class UploadConfig:
    """Immutable configuration for a bulk upload run."""
    parent_id: int = 2000
    file: str = field(default_factory=default_sample_file)
    prefix: str = "doc"
    count: int = 5
    url: str = ""
    username: str = "Admin"
    password: str = "livelink"
    concurrency: int = 5
    timeout: Optional[float] = None
    require_auth: bool = False

    def validate(self) -> None:
        """Raise ConfigError when the run cannot start."""
        if not self.file:
            raise ConfigError("You must specify a file")
        if not self.url:
            raise ConfigError("You must specify a url")
        if self.count < 0:
            raise ConfigError(f"count must not be negative, got {self.count}")
        if self.concurrency < 1:
            raise ConfigError(f"concurrency must be at least 1, got {self.concurrency}")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")


@dataclass(frozen=True)
class UploadTask:
    """One document to create."""
    index: int
    name: str
    file_path: str
    parent_id: int


@dataclass(frozen=True)
class UploadResult:
    """Immutable result of one document creation."""
    name: str
    status: UploadStatus = UploadStatus.SUCCESS
    node_id: Optional[int] = None  # never parsed from the server response
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status == UploadStatus.SUCCESS

    @classmethod
    def ok(cls, name: str, node_id: Optional[int] = None):
        return cls(name=name, status=UploadStatus.SUCCESS, node_id=node_id)

    @classmethod
    def fail(cls, name: str, error: str):
        return cls(name=name, status=UploadStatus.FAILED, error=error)


@dataclass
class BatchSummary:
    """Outcome of a whole run."""
    authenticated: bool
    results: List[UploadResult] = field(default_factory=list)
    auth_error: Optional[str] = None

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def all_success(self) -> bool:
        return self.failed == 0
