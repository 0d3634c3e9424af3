"""
Protocols (Interfaces) for Dependency Inversion.

The upload driver only needs something that can create documents.
"""
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class IDocumentClient(Protocol):
    """Interface for document creation."""

    async def create_document(self, name: str, file_path: str, parent_id: int) -> Optional[int]:
        """Create one document node; raise on failure."""
        ...
