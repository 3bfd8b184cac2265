"""Commit model and its value types"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from git_branch_browser.exceptions import InvalidEpochError

NO_AUTHOR = "<none>"


@dataclass(frozen=True)
class Timestamp:
    """Commit time as epoch seconds plus the decoded UTC calendar value.

    The UTC offset recorded with the commit is kept but not applied to
    ``dt``; ``format(apply_offset=True)`` renders in the commit's own zone.
    """
    epoch: int
    offset_minutes: int
    dt: datetime

    @classmethod
    def from_native(cls, epoch_seconds: int, offset_minutes: int = 0) -> "Timestamp":
        """Decode a raw commit time.

        Args:
            epoch_seconds: Seconds since the Unix epoch
            offset_minutes: Signed UTC offset of the committer, in minutes

        Raises:
            InvalidEpochError: If the epoch has no representable calendar instant
        """
        try:
            dt = datetime.fromtimestamp(int(epoch_seconds), tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidEpochError(epoch_seconds, str(e)) from e
        return cls(epoch=int(epoch_seconds), offset_minutes=int(offset_minutes), dt=dt)

    def format(self, apply_offset: bool = False) -> str:
        """Render as fixed-width ``MM/DD/YYYY HH:MM:SS``."""
        dt = self.dt
        if apply_offset and self.offset_minutes:
            try:
                dt = dt.astimezone(timezone(timedelta(minutes=self.offset_minutes)))
            except (OverflowError, ValueError):
                # Offsets outside +/-24h or instants at the calendar edge stay in UTC
                dt = self.dt
        return (
            f"{dt.month:02d}/{dt.day:02d}/{dt.year:04d} "
            f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        )

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class Author:
    """Commit author signature. Either part may be missing."""
    name: Optional[str] = None
    email: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name if self.name else NO_AUTHOR


@dataclass(frozen=True)
class Commit:
    """A single commit decoded from the repository."""
    summary: str
    message: str
    author: Author
    timestamp: Timestamp
    hexsha: str = ""

    @property
    def short_sha(self) -> str:
        return self.hexsha[:7]
