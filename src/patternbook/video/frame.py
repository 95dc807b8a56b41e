"""
Frame Data Model
=================

Time-interval unit of video content.

Design Rules:
    - Interval is inclusive on both ends: [start_timestamp, end_timestamp]
    - Payload is opaque; nothing here decodes it
    - Immutable once constructed
"""

from dataclasses import dataclass
from typing import List

from patternbook.errors import ValidationError


# Default length of one generated frame, in timestamp units
FRAME_TIME = 10


@dataclass(frozen=True, slots=True)
class Frame:
    """
    One frame of a video.

    Attributes:
        start_timestamp: First timestamp covered by this frame
        end_timestamp: Last timestamp covered by this frame (inclusive)
        payload: Opaque frame bytes
    """

    start_timestamp: int
    end_timestamp: int
    payload: bytes = b""

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.start_timestamp > self.end_timestamp:
            raise ValidationError(
                f"Frame start {self.start_timestamp} is after end {self.end_timestamp}"
            )

    def contains(self, timestamp: int) -> bool:
        """Check whether timestamp falls inside this frame's interval."""
        return self.start_timestamp <= timestamp <= self.end_timestamp

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the payload."""
        return (
            f"Frame(start={self.start_timestamp}, "
            f"end={self.end_timestamp}, "
            f"payload={len(self.payload)}B)"
        )


def split_into_frames(duration: int, frame_time: int = FRAME_TIME) -> List[Frame]:
    """
    Build contiguous frames covering timestamps [0, duration).

    With the default frame_time a duration of 30 yields
    (0, 9), (10, 19), (20, 29). A trailing partial frame is shortened
    to end at duration - 1.

    Args:
        duration: Number of timestamp units to cover. Must be >= 0.
        frame_time: Length of each frame. Must be > 0.

    Returns:
        Ordered, non-overlapping frames with empty payloads.
    """
    if duration < 0:
        raise ValidationError("duration must be non-negative")
    if frame_time <= 0:
        raise ValidationError("frame_time must be positive")

    return [
        Frame(start, min(start + frame_time, duration) - 1)
        for start in range(0, duration, frame_time)
    ]
