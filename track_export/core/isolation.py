"""Mute maps that leave exactly one audio track audible."""

from typing import Iterable

from track_export.core.host import ProjectHost
from track_export.core.models import Track


def isolate(tracks: Iterable[Track], target: Track) -> dict[int, bool]:
    """Compute the mute state of every audio track so only ``target`` plays.

    Non-audio tracks are left out of the map.

    Returns:
        Mapping of track id to mute flag
    """
    return {t.id: t is not target for t in tracks if t.is_audio}


def apply_mute_states(
    project: ProjectHost,
    tracks: Iterable[Track],
    states: dict[int, bool],
) -> None:
    """Write a mute map through the host, muting before unmuting."""
    by_id = {t.id: t for t in tracks}
    ordered = sorted(states.items(), key=lambda item: not item[1])
    for track_id, mute in ordered:
        project.set_mute(by_id[track_id], mute)


def unmuted_audio_tracks(tracks: Iterable[Track]) -> list[Track]:
    """Audio tracks currently audible."""
    return [t for t in tracks if t.is_audio and not t.mute]
