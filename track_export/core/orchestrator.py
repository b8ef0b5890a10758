"""Per-track export: isolate, render, re-mute."""

import logging
from pathlib import Path
from typing import Callable, Optional

from track_export.config import MAX_FILENAME_LEN, NOTICE_TITLE, UNNAMED_TRACK_PREFIX
from track_export.core.host import (
    Presenter,
    ProjectHost,
    RenderCatalog,
    RenderFormat,
    RenderProfile,
    Renderer,
)
from track_export.core.isolation import apply_mute_states, isolate
from track_export.core.location import ensure_exists, resolve_output_folder
from track_export.core.models import Cancelled, ExportJob, ExportSummary, Track
from track_export.core.prompter import SelectionPrompter
from track_export.core.sanitizer import sanitize
from track_export.exceptions import RenderFailure, TrackExportError

log = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, Track], None]


class TrackExportOrchestrator:
    """Render every audio track of a project to its own file.

    Renders run one after another. While a render is in flight the target is
    the only unmuted audio track; afterwards every audio track is muted again.
    """

    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    def run(
        self,
        project: ProjectHost,
        fmt: RenderFormat,
        profile: RenderProfile,
        output_folder: Path,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ExportSummary:
        """Export each audio track of ``project``.

        Args:
            project: Host project whose tracks are exported
            fmt: Render format, provides the file extension
            profile: Render profile handed to the host
            output_folder: Destination folder, created if missing
            on_progress: Optional callback(done, total, track) after each render

        Returns:
            Summary listing the written files in track order

        Raises:
            FileSystemFailure: If the output folder cannot be created
            RenderFailure: On the first track the host fails to render
        """
        ensure_exists(output_folder)
        job = ExportJob(output_folder=output_folder, format=fmt, profile=profile)
        summary = ExportSummary(
            output_folder=output_folder,
            format_name=fmt.name,
            profile_name=profile.name,
        )

        tracks = list(project.list_tracks())
        audio_tracks = [t for t in tracks if t.is_audio]
        total = len(audio_tracks)
        log.info(
            "Exporting %d audio track(s) as %s / %s to %s",
            total, fmt.name, profile.name, output_folder,
        )

        track_counter = 1
        for track in tracks:
            if not track.is_audio:
                continue

            apply_mute_states(project, audio_tracks, isolate(audio_tracks, track))

            track_name = track.name or f"{UNNAMED_TRACK_PREFIX}{track_counter}"
            stem = sanitize(track_name, max_len=MAX_FILENAME_LEN - len(fmt.extension))
            output_path = job.output_path(stem)
            if output_path in summary.files:
                log.warning(
                    "Track '%s' renders to %s again; the earlier file is overwritten",
                    track_name, output_path,
                )

            log.debug("Rendering '%s' -> %s", track_name, output_path.name)
            try:
                self._render(track_name, output_path, profile)
            except RenderFailure:
                self._remute_best_effort(project, track)
                raise

            project.set_mute(track, True)
            track_counter += 1

            summary.files.append(output_path)
            if on_progress:
                on_progress(summary.count, total, track)

        log.info("Export finished: %d file(s) in %s", summary.count, output_folder)
        return summary

    def _render(self, track_name: str, output_path: Path, profile: RenderProfile) -> None:
        try:
            result = self.renderer.render(output_path, profile)
        except Exception as e:
            raise RenderFailure(track_name, output_path, str(e)) from e

        if not result.ok:
            raise RenderFailure(track_name, output_path, result.reason or "unknown error")

    @staticmethod
    def _remute_best_effort(project: ProjectHost, track: Track) -> None:
        try:
            project.set_mute(track, True)
        except Exception:
            log.exception("Could not re-mute track '%s' after a failed render", track.name)


def export_audio_tracks(
    project: ProjectHost,
    catalog: RenderCatalog,
    renderer: Renderer,
    presenter: Presenter,
    on_progress: Optional[ProgressCallback] = None,
) -> Optional[ExportSummary]:
    """Run a full export session against the open project.

    Asks for a format and a profile, then renders each audio track into the
    ``AudioExports`` folder. Nothing in the project is touched if either
    choice is cancelled.

    Returns:
        The export summary, or None if the user cancelled

    Raises:
        TrackExportError: After notifying the user, if the export failed
    """
    prompter = SelectionPrompter(presenter)

    fmt = prompter.choose_format(catalog.list_render_formats())
    if isinstance(fmt, Cancelled):
        presenter.notify(NOTICE_TITLE, "No renderer selected. Export cancelled.")
        return None

    profile = prompter.choose_profile(fmt.value, catalog.list_profiles(fmt.value))
    if isinstance(profile, Cancelled):
        presenter.notify(NOTICE_TITLE, "No template selected. Export cancelled.")
        return None

    output_folder = resolve_output_folder(project.get_project_file_path())

    orchestrator = TrackExportOrchestrator(renderer)
    try:
        summary = orchestrator.run(
            project, fmt.value, profile.value, output_folder, on_progress=on_progress
        )
    except TrackExportError as e:
        presenter.notify(NOTICE_TITLE, f"Export failed!\n{e}")
        raise

    presenter.notify(
        NOTICE_TITLE,
        f"Export completed! {summary.count} file(s) written.\n"
        f"Files saved in:\n{summary.output_folder}",
    )
    return summary
