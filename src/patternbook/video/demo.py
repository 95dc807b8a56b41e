"""
Video Player Demo
=================

Seek a user's position, then store a three-frame video and look up
the frame at timestamp 12.
"""

from typing import Optional

from patternbook.config import Settings
from patternbook.video.models import Video
from patternbook.video.frame import split_into_frames
from patternbook.video.service import VideoConsumingService, VideoService
from patternbook.video.storage import FileSystem, create_watch_history


def main(settings: Optional[Settings] = None) -> None:
    settings = settings or Settings()

    # --- Seek time ---
    history = create_watch_history(settings.video.watch_history_backend)
    history.start_watching("video1", "user1")
    consuming = VideoConsumingService(history)
    result = consuming.seek_time("video1", "user1", 50)
    print(f"Seek Time set to: {result}")

    # --- Frame lookup ---
    file_system = FileSystem()
    video_service = VideoService(file_system)
    frames = split_into_frames(3 * settings.video.frame_time, settings.video.frame_time)
    file_system.set_video(Video.from_frames("video1", frames))

    frame = video_service.get_frame("video1", 12)
    if frame is not None:
        print(f"Frame found: {frame.start_timestamp} to {frame.end_timestamp}")
    else:
        print("Frame not found!")


if __name__ == "__main__":
    main()
