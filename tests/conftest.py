from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

import pytest

from track_export.core.isolation import unmuted_audio_tracks
from track_export.core.models import Cancelled, RenderResult, Selected, Track, TrackKind


@dataclass(frozen=True)
class FakeProfile:
    name: str
    valid: bool = True

    def is_valid(self) -> bool:
        return self.valid


@dataclass(frozen=True)
class FakeFormat:
    name: str
    extension: str = ".wav"
    profiles: tuple = ()


class FakeProject:
    """Project double recording every mute write."""

    def __init__(self, tracks: list[Track], file_path: Optional[Path] = None) -> None:
        self.tracks = tracks
        self.file_path = file_path
        self.mute_calls: list[tuple[int, bool]] = []

    def list_tracks(self) -> list[Track]:
        return list(self.tracks)

    def get_project_file_path(self) -> Optional[Path]:
        return self.file_path

    def set_mute(self, track: Track, mute: bool) -> None:
        self.mute_calls.append((track.id, mute))
        track.mute = mute


class FakeCatalog:
    def __init__(self, formats: Sequence[FakeFormat]) -> None:
        self.formats = list(formats)

    def list_render_formats(self) -> list[FakeFormat]:
        return list(self.formats)

    def list_profiles(self, fmt: FakeFormat) -> list[FakeProfile]:
        return list(fmt.profiles)


@dataclass
class RenderCall:
    output_path: Path
    profile: FakeProfile
    unmuted: list[int]


@dataclass
class RecordingRenderer:
    """Renderer double that snapshots which audio tracks are audible."""

    project: FakeProject
    fail_on: Optional[str] = None
    raise_on: Optional[str] = None
    calls: list[RenderCall] = field(default_factory=list)

    def render(self, output_path: Path, profile: FakeProfile) -> RenderResult:
        unmuted = [t.id for t in unmuted_audio_tracks(self.project.tracks)]
        self.calls.append(RenderCall(output_path, profile, unmuted))
        if self.raise_on and output_path.name == self.raise_on:
            raise RuntimeError("host crashed")
        if self.fail_on and output_path.name == self.fail_on:
            return RenderResult.failure("disk full")
        return RenderResult.success()


class ScriptedPresenter:
    """Answers prompts from a script; None means the user cancels."""

    def __init__(self, answers: Sequence[Optional[str]] = ()) -> None:
        self.answers = list(answers)
        self.prompts: list[tuple[str, list[str], str]] = []
        self.notices: list[tuple[str, str]] = []

    def prompt_choice(self, title: str, items: Sequence[str], prompt: str = ""):
        self.prompts.append((title, list(items), prompt))
        answer = self.answers.pop(0)
        if answer is None:
            return Cancelled()
        return Selected(answer)

    def notify(self, title: str, message: str) -> None:
        self.notices.append((title, message))


@pytest.fixture
def make_project():
    def _make(
        names: Sequence[str],
        kinds: Optional[Sequence[TrackKind]] = None,
        file_path: Optional[Path] = None,
        muted: bool = False,
    ) -> FakeProject:
        kinds = kinds or [TrackKind.AUDIO] * len(names)
        tracks = [
            Track(id=i, name=name, kind=kind, mute=muted)
            for i, (name, kind) in enumerate(zip(names, kinds))
        ]
        return FakeProject(tracks, file_path=file_path)

    return _make


@pytest.fixture
def wav_format() -> FakeFormat:
    return FakeFormat(
        name="Wave (WAV)",
        extension=".wav",
        profiles=(FakeProfile("16-bit PCM"), FakeProfile("24-bit PCM")),
    )


@pytest.fixture
def fakes():
    """Fake classes, for tests that build their own doubles."""

    class _Fakes:
        Profile = FakeProfile
        Format = FakeFormat
        Catalog = FakeCatalog
        Renderer = RecordingRenderer
        Presenter = ScriptedPresenter

    return _Fakes
