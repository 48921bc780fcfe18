"""The cross-reference table of a PDF file."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO

ROOT_GENERATION = 65535


class XRefError(Exception):
    """The cross-reference table cannot be written."""


class ObjectStatus(Enum):
    FREE = "f"
    IN_USE = "n"

    def __str__(self) -> str:
        return self.value


@dataclass
class XRefEntry:
    """One table line; for free entries the offset is the next free object number."""

    object_number: int
    offset_or_next_free: int
    status: ObjectStatus
    generation: int = 0

    def serialize(self) -> bytes:
        """Ten-digit offset, five-digit generation, status and a two-byte end of line."""
        return f"{self.offset_or_next_free:010} {self.generation:05} {self.status}\r\n".encode("ascii")


@dataclass
class XRefTable:
    """A single-section cross-reference table starting at object 0."""

    entries: list[XRefEntry] = field(
        default_factory=lambda: [XRefEntry(0, 0, ObjectStatus.FREE, ROOT_GENERATION)]
    )
    position: int = 0

    def add_entry(self, entry: XRefEntry) -> None:
        self.entries.append(entry)

    def serialize(self, stream: BinaryIO) -> None:
        """Write the table at the stream's current position, remembered in position."""
        if not self.entries:
            raise XRefError("cross-reference table is empty")
        self.entries.sort(key=lambda entry: entry.object_number)
        first = self.entries[0]
        if first.generation != ROOT_GENERATION or first.status is not ObjectStatus.FREE:
            raise XRefError("first cross-reference entry must be the free root entry")
        self.position = stream.tell()
        data = bytearray(f"xref\r\n0 {len(self.entries)}\r\n".encode("ascii"))
        for entry in self.entries:
            data += entry.serialize()
        stream.write(bytes(data))