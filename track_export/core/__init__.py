"""Core export modules."""

from track_export.core.models import (
    Cancelled,
    ExportJob,
    ExportSummary,
    RenderResult,
    Selected,
    Selection,
    Track,
    TrackKind,
)
from track_export.core.isolation import isolate
from track_export.core.location import ensure_exists, resolve_output_folder
from track_export.core.orchestrator import TrackExportOrchestrator, export_audio_tracks
from track_export.core.prompter import SelectionPrompter
from track_export.core.sanitizer import sanitize

__all__ = [
    "Cancelled",
    "ExportJob",
    "ExportSummary",
    "RenderResult",
    "Selected",
    "Selection",
    "Track",
    "TrackKind",
    "isolate",
    "ensure_exists",
    "resolve_output_folder",
    "TrackExportOrchestrator",
    "export_audio_tracks",
    "SelectionPrompter",
    "sanitize",
]
