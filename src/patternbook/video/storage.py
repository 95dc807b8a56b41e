"""
Video Storage
=============

Collaborators that the video services query per request.

Components:
    - VideoStore: Protocol for looking up videos by id
    - FileSystem: Single-slot in-memory video store
    - WatchHistory: Protocol for per-(video, user) watch records
    - StubWatchHistory: Fabricates a fresh record on every lookup
    - InMemoryWatchHistory: Keyed, lock-guarded record store

Design Rules:
    - Services receive these collaborators, they never construct hidden globals
    - Missing records are reported as None; services decide how to fail
"""

import logging
import threading
from enum import Enum
from typing import Dict, Optional, Protocol, Tuple

from patternbook.errors import ValidationError, parse_choice
from patternbook.video.models import Video, WatchedVideo


logger = logging.getLogger(__name__)


# =============================================================================
# Video Store
# =============================================================================

class VideoStore(Protocol):
    """Protocol for video lookup backends."""

    def get_video(self, video_id: str) -> Optional[Video]:
        """Return the video with this id, or None."""
        ...


class FileSystem:
    """
    Single-slot video store.

    Holds at most one video. Storing a video replaces whatever was
    there before; lookups only succeed for the stored video's id.
    """

    def __init__(self) -> None:
        self._stored_video: Optional[Video] = None

    def set_video(self, video: Video) -> None:
        """Store a video, replacing the previous one unconditionally."""
        if self._stored_video is not None and self._stored_video.id != video.id:
            logger.debug(f"Replacing stored video {self._stored_video.id} with {video.id}")
        self._stored_video = video

    def get_video(self, video_id: str) -> Optional[Video]:
        """Return the stored video if its id matches, else None."""
        if self._stored_video is not None and self._stored_video.id == video_id:
            return self._stored_video
        return None


# =============================================================================
# Watch History
# =============================================================================

class WatchHistoryBackend(str, Enum):
    """Available watch history implementations."""

    MEMORY = "memory"
    STUB = "stub"


def check_watch_key(video_id: str, user_id: str) -> None:
    """
    Reject empty identifiers before they reach a WatchedVideo.

    Raises:
        ValidationError: If either id is empty or not a string.
    """
    if not isinstance(video_id, str) or not video_id:
        raise ValidationError(f"video_id must be a non-empty string, got {video_id!r}")
    if not isinstance(user_id, str) or not user_id:
        raise ValidationError(f"user_id must be a non-empty string, got {user_id!r}")


class WatchHistory(Protocol):
    """Protocol for watch-progress backends."""

    def start_watching(self, video_id: str, user_id: str) -> WatchedVideo:
        """Ensure a record exists for (video_id, user_id) and return it."""
        ...

    def get_watched_video(self, video_id: str, user_id: str) -> Optional[WatchedVideo]:
        """Return the record for (video_id, user_id), or None."""
        ...

    def update_seek(self, video_id: str, user_id: str, seek_time: int) -> Optional[WatchedVideo]:
        """Set the seek time on an existing record; None if there is no record."""
        ...


class StubWatchHistory:
    """
    Watch history that never stores anything.

    Every call manufactures a new record, so a seek always succeeds
    but is forgotten by the next call.
    """

    def start_watching(self, video_id: str, user_id: str) -> WatchedVideo:
        check_watch_key(video_id, user_id)
        return WatchedVideo(video_id=video_id, user_id=user_id)

    def get_watched_video(self, video_id: str, user_id: str) -> Optional[WatchedVideo]:
        check_watch_key(video_id, user_id)
        return WatchedVideo(video_id=video_id, user_id=user_id)

    def update_seek(self, video_id: str, user_id: str, seek_time: int) -> Optional[WatchedVideo]:
        check_watch_key(video_id, user_id)
        return WatchedVideo(video_id=video_id, user_id=user_id, seek_time=seek_time)


class InMemoryWatchHistory:
    """
    Watch history keyed by (video_id, user_id).

    A single re-entrant lock guards the mapping and every write to the
    records it holds. Records only exist after start_watching() has
    been called for the pair.

    Example:
        history = InMemoryWatchHistory()
        history.start_watching("video1", "user1")
        record = history.get_watched_video("video1", "user1")
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._records: Dict[Tuple[str, str], WatchedVideo] = {}

    def start_watching(self, video_id: str, user_id: str) -> WatchedVideo:
        """
        Create a zero-progress record for the pair if none exists.

        Returns:
            The existing or newly created record.
        """
        check_watch_key(video_id, user_id)
        key = (video_id, user_id)
        with self._lock:
            record = self._records.get(key)
            if record is None:
                record = WatchedVideo(video_id=video_id, user_id=user_id)
                self._records[key] = record
                logger.info(f"User {user_id} started watching {video_id}")
            return record

    def get_watched_video(self, video_id: str, user_id: str) -> Optional[WatchedVideo]:
        with self._lock:
            return self._records.get((video_id, user_id))

    def update_seek(self, video_id: str, user_id: str, seek_time: int) -> Optional[WatchedVideo]:
        with self._lock:
            record = self._records.get((video_id, user_id))
            if record is not None:
                record.seek_time = seek_time
            return record

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def create_watch_history(backend: str = "memory") -> WatchHistory:
    """
    Create a watch history backend by name.

    Raises:
        ValidationError: If backend is not 'memory' or 'stub'.
    """
    kind = parse_choice(WatchHistoryBackend, backend, "watch history backend")

    if kind is WatchHistoryBackend.STUB:
        logger.info("Using StubWatchHistory (progress is not persisted)")
        return StubWatchHistory()

    logger.info("Using InMemoryWatchHistory")
    return InMemoryWatchHistory()
