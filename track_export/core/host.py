"""Capability interfaces consumed from the host editing environment.

The orchestrator only talks to the host through these protocols, so it can be
driven by the local JSON host, a real editor binding, or a test double.
"""

from pathlib import Path
from typing import Optional, Protocol, Sequence

from track_export.core.models import RenderResult, Selection, Track


class RenderProfile(Protocol):
    """A validated configuration of a render format."""

    name: str

    def is_valid(self) -> bool:
        ...


class RenderFormat(Protocol):
    """An output format exposed by the host."""

    name: str
    extension: str


class ProjectHost(Protocol):
    """Track listing and mute control of the open project."""

    def list_tracks(self) -> Sequence[Track]:
        ...

    def get_project_file_path(self) -> Optional[Path]:
        ...

    def set_mute(self, track: Track, mute: bool) -> None:
        ...


class RenderCatalog(Protocol):
    """Formats and profiles the host can render to."""

    def list_render_formats(self) -> Sequence[RenderFormat]:
        ...

    def list_profiles(self, fmt: RenderFormat) -> Sequence[RenderProfile]:
        ...


class Renderer(Protocol):
    """Synchronous render of the current project mix."""

    def render(self, output_path: Path, profile: RenderProfile) -> RenderResult:
        ...


class Presenter(Protocol):
    """Blocking user interaction."""

    def prompt_choice(
        self, title: str, items: Sequence[str], prompt: str = ""
    ) -> Selection[str]:
        ...

    def notify(self, title: str, message: str) -> None:
        ...
