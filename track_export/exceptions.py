"""
Defines custom exceptions for the application to allow for more specific error handling.
"""

from pathlib import Path


class TrackExportError(Exception):
    """Base exception for all application-specific errors."""


class RenderFailure(TrackExportError):
    """Raised when the host fails to render a track; halts the remaining exports."""

    def __init__(self, track_name: str, output_path: Path, reason: str) -> None:
        self.track_name = track_name
        self.output_path = output_path
        self.reason = reason
        super().__init__(
            f"Rendering track '{track_name}' to {output_path} failed: {reason}"
        )


class FileSystemFailure(TrackExportError):
    """Raised when the output folder cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not create output folder {path}: {reason}")


class ProjectFileError(TrackExportError):
    """Raised when a project file is missing or malformed."""
