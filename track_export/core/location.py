"""Output folder resolution."""

import logging
from pathlib import Path
from typing import Optional, Union

from track_export.config import OUTPUT_SUBFOLDER
from track_export.exceptions import FileSystemFailure

log = logging.getLogger(__name__)


def default_base_dir() -> Path:
    """The user's desktop, or the home directory when there is no desktop."""
    desktop = Path.home() / "Desktop"
    if desktop.is_dir():
        return desktop
    return Path.home()


def resolve_output_folder(
    project_path: Optional[Union[str, Path]],
    fallback_dir: Optional[Path] = None,
) -> Path:
    """Derive the export folder for a project.

    Args:
        project_path: Location of the project file, None or empty if unsaved
        fallback_dir: Base folder for unsaved projects (default: desktop)

    Returns:
        ``AudioExports`` next to the project file, or under the fallback folder
    """
    if project_path:
        base = Path(project_path).parent
    else:
        base = fallback_dir if fallback_dir is not None else default_base_dir()
    return base / OUTPUT_SUBFOLDER


def ensure_exists(path: Path) -> Path:
    """Create the folder and its parents if needed; a no-op when it exists.

    Raises:
        FileSystemFailure: If the folder cannot be created
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileSystemFailure(path, str(e)) from e
    log.debug("Output folder ready: %s", path)
    return path
