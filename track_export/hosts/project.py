"""JSON project files for the local host."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from track_export.core.models import Track, TrackKind
from track_export.exceptions import ProjectFileError


@dataclass(eq=False)
class LocalTrack(Track):
    """A track whose content is a media file on disk."""

    source: Optional[Path] = None
    """Media file played by the track."""


@dataclass
class LocalProject:
    """An ordered set of tracks, optionally saved to a file."""

    name: str = "Untitled"
    tracks: list[LocalTrack] = field(default_factory=list)
    file_path: Optional[Path] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "tracks": [
                {
                    "name": t.name,
                    "kind": t.kind.value,
                    "mute": t.mute,
                    "source": str(t.source) if t.source else None,
                }
                for t in self.tracks
            ],
        }

    @staticmethod
    def from_dict(data: dict[str, Any], base_dir: Optional[Path] = None) -> "LocalProject":
        """Build a project from its JSON document.

        Relative ``source`` paths are resolved against ``base_dir``.

        Raises:
            ProjectFileError: If the document is malformed
        """
        if not isinstance(data, dict) or not isinstance(data.get("tracks", []), list):
            raise ProjectFileError("Project must be an object with a 'tracks' list")

        tracks = []
        for idx, item in enumerate(data.get("tracks", [])):
            if not isinstance(item, dict):
                raise ProjectFileError(f"Track #{idx + 1} must be an object")
            try:
                kind = TrackKind(str(item.get("kind", "audio")).lower())
            except ValueError:
                raise ProjectFileError(
                    f"Track #{idx + 1} has unknown kind: {item.get('kind')!r}"
                )

            source = item.get("source")
            source_path = None
            if source:
                source_path = Path(str(source)).expanduser()
                if base_dir is not None and not source_path.is_absolute():
                    source_path = base_dir / source_path

            tracks.append(
                LocalTrack(
                    id=idx,
                    name=str(item.get("name") or ""),
                    kind=kind,
                    mute=bool(item.get("mute", False)),
                    source=source_path,
                )
            )

        return LocalProject(name=str(data.get("name") or "Untitled"), tracks=tracks)


def load_project(path: Union[str, Path]) -> LocalProject:
    """Read a project file.

    Raises:
        ProjectFileError: If the file cannot be read or parsed
    """
    p = Path(path).expanduser()
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ProjectFileError(f"Cannot read project file {p}: {e}") from e
    except json.JSONDecodeError as e:
        raise ProjectFileError(f"Invalid JSON in project file {p}: {e}") from e

    project = LocalProject.from_dict(data, base_dir=p.parent)
    project.file_path = p
    return project
