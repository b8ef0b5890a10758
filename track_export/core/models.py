"""Data models for tracks, selections and export results."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class TrackKind(str, Enum):
    """Kind of content a track holds."""
    AUDIO = "audio"
    VIDEO = "video"


@dataclass(eq=False)
class Track:
    """A track of the host project."""

    id: int
    """Stable identifier within the project (its position)."""

    name: str = ""
    """Display name, may be empty."""

    kind: TrackKind = TrackKind.AUDIO
    """Audio or non-audio content."""

    mute: bool = False
    """Whether the track is excluded from playback and render."""

    @property
    def is_audio(self) -> bool:
        return self.kind == TrackKind.AUDIO


@dataclass(frozen=True)
class Selected(Generic[T]):
    """A choice the user confirmed."""

    value: T


@dataclass(frozen=True)
class Cancelled:
    """The user dismissed a choice, or there was nothing to choose from."""

    reason: str = "cancelled"


Selection = Union[Selected[T], Cancelled]


@dataclass(frozen=True)
class RenderResult:
    """Outcome of a single host render call."""

    ok: bool
    reason: str = ""

    @classmethod
    def success(cls) -> "RenderResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> "RenderResult":
        return cls(ok=False, reason=reason)


@dataclass(frozen=True)
class ExportJob:
    """Parameters shared by every render of one run."""

    output_folder: Path
    """Folder receiving the rendered files."""

    format: Any
    """Chosen render format (has ``name`` and ``extension``)."""

    profile: Any
    """Chosen render profile of that format."""

    def output_path(self, file_stem: str) -> Path:
        """Build the output path for an already sanitized file stem."""
        return self.output_folder / f"{file_stem}{self.format.extension}"


@dataclass
class ExportSummary:
    """Result of a completed export run."""

    output_folder: Path
    """Folder the files were written to."""

    format_name: str
    """Name of the render format used."""

    profile_name: str
    """Name of the render profile used."""

    files: list[Path] = field(default_factory=list)
    """Rendered files, in project track order."""

    @property
    def count(self) -> int:
        """Number of files written."""
        return len(self.files)
