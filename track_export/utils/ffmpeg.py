"""FFmpeg subprocess utilities."""

import subprocess
import shutil
from functools import lru_cache
from typing import Optional


def check_ffmpeg() -> bool:
    """Check if FFmpeg is available in PATH.

    Returns:
        True if FFmpeg is available, False otherwise
    """
    return shutil.which("ffmpeg") is not None


def get_ffmpeg_path() -> str:
    """Get the path to FFmpeg executable.

    Returns:
        Path to FFmpeg executable

    Raises:
        RuntimeError: If FFmpeg is not found
    """
    path = shutil.which("ffmpeg")
    if path is None:
        raise RuntimeError(
            "FFmpeg not found. Please install FFmpeg and ensure it's in your PATH.\n"
            "Download from: https://ffmpeg.org/download.html"
        )
    return path


def run_ffmpeg(
    args: list[str],
    input_data: Optional[bytes] = None,
    timeout: Optional[float] = None,
) -> subprocess.CompletedProcess:
    """Run FFmpeg with the given arguments.

    Args:
        args: List of arguments to pass to FFmpeg (excluding 'ffmpeg' itself)
        input_data: Optional bytes to pipe to FFmpeg's stdin
        timeout: Optional timeout in seconds

    Returns:
        CompletedProcess with stdout, stderr, and return code

    Raises:
        RuntimeError: If FFmpeg is not found
        subprocess.TimeoutExpired: If the command times out
    """
    cmd = [get_ffmpeg_path()] + args

    return subprocess.run(
        cmd,
        input=input_data,
        capture_output=True,
        timeout=timeout,
    )


@lru_cache(maxsize=1)
def list_audio_encoders() -> frozenset[str]:
    """Names of the audio encoders the installed FFmpeg provides.

    Returns:
        Encoder names, empty if FFmpeg is missing or the query fails
    """
    if not check_ffmpeg():
        return frozenset()

    result = run_ffmpeg(["-hide_banner", "-encoders"], timeout=30)
    if result.returncode != 0:
        return frozenset()

    # Lines look like " A....D libmp3lame           libmp3lame MP3 ..."
    encoders = set()
    for line in result.stdout.decode("utf-8", errors="replace").splitlines():
        parts = line.split()
        if len(parts) >= 2 and parts[0].startswith("A") and len(parts[0]) == 6:
            encoders.add(parts[1])
    return frozenset(encoders)


def has_encoder(name: str) -> bool:
    """Check whether FFmpeg can encode with ``name``."""
    return name in list_audio_encoders()
