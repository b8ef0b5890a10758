"""Render formats and profiles offered by the local host."""

from dataclasses import dataclass, field
from typing import Literal, Optional

import soundfile as sf

from track_export.config import RENDER_FORMATS, RENDER_PROFILES
from track_export.utils.ffmpeg import has_encoder

Backend = Literal["soundfile", "ffmpeg"]


@dataclass(frozen=True)
class AudioProfile:
    """A named encoder configuration."""

    name: str
    """Display name, e.g. '16-bit PCM'."""

    backend: Backend
    """Writer used to produce the file."""

    container: str
    """libsndfile major format or FFmpeg muxer."""

    codec: str
    """libsndfile subtype or FFmpeg encoder."""

    quality: Optional[str] = None
    """Encoder-specific quality (bitrate for MP3)."""

    def is_valid(self) -> bool:
        """Check that the installed libraries can write this profile."""
        if self.backend == "soundfile":
            return sf.check_format(self.container, self.codec)
        return has_encoder(self.codec)


@dataclass(frozen=True)
class AudioFormat:
    """A file type the local host renders to."""

    name: str
    extension: str
    profiles: tuple[AudioProfile, ...] = field(default=())


def default_formats() -> list[AudioFormat]:
    """Build the catalog from the table in ``track_export.config``."""
    formats = []
    for name, (extension, backend, container) in RENDER_FORMATS.items():
        profiles = tuple(
            AudioProfile(
                name=profile_name,
                backend=backend,
                container=container,
                codec=codec,
                quality=quality,
            )
            for profile_name, codec, quality in RENDER_PROFILES.get(name, [])
        )
        formats.append(AudioFormat(name=name, extension=extension, profiles=profiles))
    return formats
