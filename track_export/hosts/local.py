"""Local host: a JSON project rendered with soundfile or FFmpeg."""

import logging
from pathlib import Path
from typing import Optional, Sequence

from track_export.core.isolation import unmuted_audio_tracks
from track_export.core.models import RenderResult
from track_export.hosts.exporter import AudioExporter
from track_export.hosts.formats import AudioFormat, AudioProfile, default_formats
from track_export.hosts.media import AudioFile, sum_sources
from track_export.hosts.project import LocalProject, LocalTrack

log = logging.getLogger(__name__)


class LocalHost:
    """Project, catalog and renderer backed by files on disk.

    A render mixes the source media of every unmuted audio track, the way an
    editor renders its current mix.
    """

    def __init__(
        self,
        project: LocalProject,
        formats: Optional[Sequence[AudioFormat]] = None,
    ):
        self.project = project
        self.formats = list(formats) if formats is not None else default_formats()
        self.exporter = AudioExporter()

    # Project

    def list_tracks(self) -> list[LocalTrack]:
        return list(self.project.tracks)

    def get_project_file_path(self) -> Optional[Path]:
        return self.project.file_path

    def set_mute(self, track: LocalTrack, mute: bool) -> None:
        track.mute = mute

    # Catalog

    def list_render_formats(self) -> list[AudioFormat]:
        return list(self.formats)

    def list_profiles(self, fmt: AudioFormat) -> list[AudioProfile]:
        return list(fmt.profiles)

    # Renderer

    def render(self, output_path: Path, profile: AudioProfile) -> RenderResult:
        """Render the audible tracks to ``output_path``.

        Returns:
            Success, or a failure carrying the reason
        """
        audible = unmuted_audio_tracks(self.project.tracks)
        if not audible:
            return RenderResult.failure("no audible audio tracks")

        missing = [t.name or f"#{t.id + 1}" for t in audible if t.source is None]
        if missing:
            return RenderResult.failure(f"no source media for: {', '.join(missing)}")

        try:
            sources = [AudioFile.from_file(t.source) for t in audible]
            mix = sum_sources(sources)
            self.exporter.export(mix, sources[0].sample_rate, output_path, profile)
        except (OSError, RuntimeError, ValueError) as e:
            log.debug("Render of %s failed", output_path, exc_info=True)
            return RenderResult.failure(str(e))

        return RenderResult.success()
