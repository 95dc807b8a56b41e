"""
Video Services
==============

Frame retrieval and watch-progress tracking.

VideoService answers "which frame is at time t of video v?" by
delegating to a VideoStore and the Video itself. VideoConsumingService
moves a user's seek position on their WatchedVideo record.
"""

import logging
from typing import Optional

from patternbook.errors import NotFoundError, ValidationError
from patternbook.video.frame import Frame
from patternbook.video.storage import (
    FileSystem,
    InMemoryWatchHistory,
    VideoStore,
    WatchHistory,
    check_watch_key,
)


logger = logging.getLogger(__name__)


class VideoService:
    """
    Retrieval facade over a video store.

    Attributes:
        store: Collaborator used to look videos up by id
    """

    def __init__(self, store: Optional[VideoStore] = None) -> None:
        self.store = store if store is not None else FileSystem()

    def get_frame(self, video_id: str, timestamp: int) -> Optional[Frame]:
        """
        Get the frame of a video at a timestamp.

        Returns:
            The frame, or None if the video is not stored or no frame
            covers the timestamp.

        Raises:
            EmptyVideoError: If the stored video has no frames.
        """
        video = self.store.get_video(video_id)
        if video is None:
            logger.debug(f"Video {video_id} not found")
            return None
        return video.get_frame(timestamp)


class VideoConsumingService:
    """
    Tracks where each user is in each video.

    Attributes:
        history: Watch-progress backend
    """

    def __init__(self, history: Optional[WatchHistory] = None) -> None:
        self.history = history if history is not None else InMemoryWatchHistory()

    def seek_time(self, video_id: str, user_id: str, new_seek: int) -> int:
        """
        Move the user's playback position.

        Args:
            video_id: Video being watched
            user_id: User whose position moves
            new_seek: New playback position, must be >= 0

        Returns:
            The stored seek time.

        Raises:
            ValidationError: If an id is empty or new_seek is negative.
            NotFoundError: If no watch record exists for the pair.
        """
        check_watch_key(video_id, user_id)
        if new_seek < 0:
            raise ValidationError(f"Seek time cannot be negative: {new_seek}")

        watched = self.history.update_seek(video_id, user_id, new_seek)
        if watched is None:
            raise NotFoundError(f"No watch record for video={video_id} user={user_id}")

        logger.debug(f"Seek {video_id}/{user_id} -> {new_seek}")
        return watched.seek_time

    def get_seek_time(self, video_id: str, user_id: str) -> int:
        """
        Read the user's playback position.

        Raises:
            ValidationError: If an id is empty.
            NotFoundError: If no watch record exists for the pair.
        """
        check_watch_key(video_id, user_id)
        watched = self.history.get_watched_video(video_id, user_id)
        if watched is None:
            raise NotFoundError(f"No watch record for video={video_id} user={user_id}")
        return watched.seek_time
