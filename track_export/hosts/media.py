"""Source media loading for local project tracks."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import numpy as np
import soundfile as sf


@dataclass
class AudioFile:
    """Audio data of a track's source media."""

    path: Path
    """Path to the audio file."""

    sample_rate: int
    """Sample rate in Hz."""

    channels: int
    """Number of audio channels."""

    data: Optional[np.ndarray] = field(default=None, repr=False)
    """Audio data as numpy array (float32, shape: samples x channels)."""

    @property
    def frames(self) -> int:
        """Number of sample frames."""
        return 0 if self.data is None else len(self.data)

    @classmethod
    def from_file(cls, path: Path) -> "AudioFile":
        """Create an AudioFile by loading from disk.

        Args:
            path: Path to the audio file

        Returns:
            AudioFile with data loaded
        """
        data, sample_rate = sf.read(str(path), dtype="float32")

        # Ensure 2D array (samples x channels)
        if data.ndim == 1:
            data = data.reshape(-1, 1)

        return cls(
            path=path,
            sample_rate=sample_rate,
            channels=data.shape[1],
            data=data,
        )


def sum_sources(sources: list[AudioFile]) -> np.ndarray:
    """Sum several sources into one buffer.

    Shorter sources are padded with silence and mono sources are spread over
    every channel of the widest source. All sources must share a sample rate.

    Args:
        sources: Loaded audio files, at least one

    Returns:
        float32 array, shape: samples x channels

    Raises:
        ValueError: If the list is empty or sample rates differ
    """
    if not sources:
        raise ValueError("No sources to sum")

    rates = {s.sample_rate for s in sources}
    if len(rates) > 1:
        raise ValueError(f"Sources have different sample rates: {sorted(rates)}")

    frames = max(s.frames for s in sources)
    channels = max(s.channels for s in sources)
    out = np.zeros((frames, channels), dtype=np.float32)

    for source in sources:
        data = source.data
        if data.shape[1] != channels:
            if data.shape[1] != 1:
                raise ValueError(
                    f"Cannot combine {data.shape[1]}-channel {source.path.name} "
                    f"with {channels}-channel sources"
                )
            data = np.repeat(data, channels, axis=1)
        out[: len(data)] += data

    return out
