"""
Video Module
============

Toy video player: frame lookup by timestamp and per-user watch progress.

Components:
    - Frame: Inclusive time interval with an opaque payload
    - Video: Ordered frames with first-match point lookup
    - FileSystem: Single-slot video store
    - StubWatchHistory / InMemoryWatchHistory: Watch-progress backends
    - VideoService: Frame retrieval facade
    - VideoConsumingService: Seek tracking

Example:
    from patternbook.video import FileSystem, Video, VideoService, split_into_frames

    fs = FileSystem()
    fs.set_video(Video.from_frames("video1", split_into_frames(30)))
    frame = VideoService(fs).get_frame("video1", 12)
"""

from patternbook.video.frame import FRAME_TIME, Frame, split_into_frames
from patternbook.video.models import Video, WatchedVideo
from patternbook.video.storage import (
    FileSystem,
    InMemoryWatchHistory,
    StubWatchHistory,
    VideoStore,
    WatchHistory,
    WatchHistoryBackend,
    create_watch_history,
)
from patternbook.video.service import VideoConsumingService, VideoService


__all__ = [
    "FRAME_TIME",
    "Frame",
    "split_into_frames",
    "Video",
    "WatchedVideo",
    "FileSystem",
    "InMemoryWatchHistory",
    "StubWatchHistory",
    "VideoStore",
    "WatchHistory",
    "WatchHistoryBackend",
    "create_watch_history",
    "VideoConsumingService",
    "VideoService",
]
