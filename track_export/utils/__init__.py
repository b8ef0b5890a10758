"""Utility modules."""

from track_export.utils.ffmpeg import check_ffmpeg, has_encoder, run_ffmpeg

__all__ = [
    "check_ffmpeg",
    "has_encoder",
    "run_ffmpeg",
]
