"""Transport-neutral request payload.

Endpoints decode JSON bodies and multipart forms into an ``IncomingPayload``
so services never see framework request objects.
"""

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any


@dataclass
class UploadedAsset:
    """A binary received in a multipart form field."""

    content: bytes
    filename: str
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def stem(self) -> str:
        return PurePosixPath(self.filename).stem

    @property
    def suffix(self) -> str:
        return PurePosixPath(self.filename).suffix.lower()


@dataclass
class IncomingPayload:
    fields: dict[str, Any] = field(default_factory=dict)
    uploads: dict[str, UploadedAsset] = field(default_factory=dict)
