"""Local host binding: JSON projects rendered with soundfile or FFmpeg."""

from track_export.hosts.formats import AudioFormat, AudioProfile, default_formats
from track_export.hosts.local import LocalHost
from track_export.hosts.project import LocalProject, LocalTrack, load_project

__all__ = [
    "AudioFormat",
    "AudioProfile",
    "default_formats",
    "LocalHost",
    "LocalProject",
    "LocalTrack",
    "load_project",
]
