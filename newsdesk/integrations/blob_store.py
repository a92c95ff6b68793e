"""Blob storage collaborator contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BlobStore(Protocol):
    """Stores uploaded files and hands back a retrievable URL."""

    async def upload(self, *, payload: bytes, content_type: str) -> str:
        """Upload ``payload`` and return its public URL."""
