"""Audio file writing for the local host."""

from pathlib import Path

import numpy as np
import soundfile as sf

from track_export.hosts.formats import AudioProfile
from track_export.utils.ffmpeg import run_ffmpeg


class AudioExporter:
    """Write a rendered buffer with the encoder a profile names."""

    def export(
        self,
        audio: np.ndarray,
        sample_rate: int,
        output_path: Path,
        profile: AudioProfile,
    ) -> Path:
        """Export audio array to ``output_path``.

        Args:
            audio: Audio data as numpy array (float32)
            sample_rate: Sample rate in Hz
            output_path: Output file path, used as given
            profile: Encoder configuration

        Returns:
            Path to the exported file
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        if profile.backend == "soundfile":
            return self._export_soundfile(audio, sample_rate, output_path, profile)

        return self._export_via_ffmpeg(audio, sample_rate, output_path, profile)

    def _export_soundfile(
        self,
        audio: np.ndarray,
        sample_rate: int,
        output_path: Path,
        profile: AudioProfile,
    ) -> Path:
        sf.write(
            str(output_path),
            audio,
            sample_rate,
            subtype=profile.codec,
            format=profile.container,
        )
        return output_path

    def _export_via_ffmpeg(
        self,
        audio: np.ndarray,
        sample_rate: int,
        output_path: Path,
        profile: AudioProfile,
    ) -> Path:
        """Pipe float PCM to FFmpeg.

        Raises:
            RuntimeError: If FFmpeg is missing or exits with an error
        """
        # Ensure 2D array
        if audio.ndim == 1:
            audio = audio.reshape(-1, 1)

        args = [
            "-y",  # Overwrite output
            "-f", "f32le",  # Input format: 32-bit float, little-endian
            "-ar", str(sample_rate),
            "-ac", str(audio.shape[1]),
            "-i", "pipe:0",  # Read from stdin
            "-c:a", profile.codec,
        ]
        if profile.quality:
            args.extend(["-b:a", profile.quality])
        args.extend(["-f", profile.container, str(output_path)])

        result = run_ffmpeg(args, input_data=audio.astype("<f4").tobytes())

        if result.returncode != 0:
            error_msg = result.stderr.decode("utf-8", errors="replace")
            raise RuntimeError(f"FFmpeg export failed: {error_msg}")

        return output_path
