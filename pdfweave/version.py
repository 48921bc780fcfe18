"""PDF specification versions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Version(Enum):
    """A PDF version, ordered by release."""

    V1_0 = "1.0"
    V1_1 = "1.1"
    V1_2 = "1.2"
    V1_3 = "1.3"
    V1_4 = "1.4"
    V1_5 = "1.5"
    V1_6 = "1.6"
    V1_7 = "1.7"
    V1_7_1 = "1.7.1"
    V1_7_3 = "1.7.3"
    V1_7_5 = "1.7.5"
    V1_7_6 = "1.7.6"
    V1_7_8 = "1.7.8"
    V2_2017 = "2.2017"
    V2_2020 = "2.2020"

    @staticmethod
    def default() -> "Version":
        return Version.V1_5

    def as_bytes(self) -> bytes:
        return self.value.encode("ascii")

    def __str__(self) -> str:
        return self.value

    @property
    def _rank(self) -> int:
        return list(Version).index(self)

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank < other._rank

    def __le__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank <= other._rank

    def __gt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank > other._rank

    def __ge__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank >= other._rank


@dataclass
class TargetVersion:
    """The version a document is written for."""

    target: Version = field(default_factory=Version.default)