"""
Video Models
============

Video aggregate and the per-user watch-progress record.

Video owns its frames exclusively and exposes no way to mutate them.
WatchedVideo is a pydantic model so seek updates are validated on
assignment.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from patternbook.errors import EmptyVideoError, ValidationError
from patternbook.video.frame import Frame


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Video:
    """
    Ordered sequence of frames plus an identifier.

    Frames are expected to be sorted by start timestamp and not to
    overlap. This is assumed, not enforced: lookups use first-match
    semantics, so with overlapping frames the earlier one wins.

    Attributes:
        id: Video identifier
        frames: Frames in playback order
        metadata: Opaque metadata string (JSON in practice)
    """

    id: str
    frames: Tuple[Frame, ...] = field(default_factory=tuple)
    metadata: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Video id cannot be empty")
        # Accept any iterable of frames but store an immutable tuple
        object.__setattr__(self, "frames", tuple(self.frames))

    @classmethod
    def from_frames(cls, video_id: str, frames: Iterable[Frame], metadata: str = "") -> "Video":
        return cls(id=video_id, frames=tuple(frames), metadata=metadata)

    def get_frame(self, timestamp: int) -> Optional[Frame]:
        """
        Find the frame covering a timestamp.

        Args:
            timestamp: Point in time to look up

        Returns:
            The first frame whose inclusive interval contains timestamp,
            or None if no frame does.

        Raises:
            EmptyVideoError: If the video has no frames at all.
        """
        if not self.frames:
            raise EmptyVideoError(f"Video {self.id} has no frames")

        for frame in self.frames:
            if frame.contains(timestamp):
                return frame

        logger.debug(f"No frame in video {self.id} covers timestamp {timestamp}")
        return None


class WatchedVideo(BaseModel):
    """
    Watch progress of one user on one video.

    Attributes:
        video_id: Video being watched
        user_id: User watching it
        seek_time: Current playback position
    """

    model_config = ConfigDict(validate_assignment=True)

    video_id: str = Field(..., min_length=1, description="Video being watched")
    user_id: str = Field(..., min_length=1, description="User watching the video")
    seek_time: int = Field(default=0, ge=0, description="Current playback position")
