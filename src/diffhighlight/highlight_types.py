"""Shared types for diff highlighting."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class SegmentKind(Enum):
    """Kind of a diff segment."""

    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


class Side(Enum):
    """One half of a pair block: the deleted (old) or inserted (new) lines."""

    DELETED = "-"
    INSERTED = "+"

    @property
    def prefix(self) -> str:
        """Line prefix that marks a line as belonging to this side."""
        return self.value

    @property
    def skipped_kind(self) -> SegmentKind:
        """Segment kind that does not contribute to this side's text."""
        if self is Side.DELETED:
            return SegmentKind.INSERT

        return SegmentKind.DELETE


@dataclass(frozen=True)
class Segment:
    """A typed run of text produced by comparing the two sides of a pair block."""

    kind: SegmentKind
    text: str


@dataclass
class DiffPair:
    """Deleted and inserted texts accumulated from a pair block."""

    deleted: List[str] = field(default_factory=list)  # Line bodies, each ending in '\n'
    inserted: List[str] = field(default_factory=list)

    @property
    def deleted_text(self) -> str:
        return "".join(self.deleted)

    @property
    def inserted_text(self) -> str:
        return "".join(self.inserted)

    def one_side_empty(self) -> bool:
        """Check whether the block holds only additions or only deletions."""
        return not self.deleted or not self.inserted
