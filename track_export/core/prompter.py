"""Format and profile selection."""

import logging
from typing import Sequence, TypeVar

from track_export.config import (
    AUDIO_FORMAT_KEYWORDS,
    FORMAT_PROMPT_TITLE,
    NOTICE_TITLE,
    PROFILE_PROMPT_TITLE,
)
from track_export.core.host import Presenter, RenderFormat, RenderProfile
from track_export.core.models import Cancelled, Selected, Selection

log = logging.getLogger(__name__)

T = TypeVar("T")


def is_audio_format(name: str) -> bool:
    """Check whether a render format name looks like an audio format."""
    lowered = name.lower()
    return any(keyword in lowered for keyword in AUDIO_FORMAT_KEYWORDS)


class SelectionPrompter:
    """Ask the user for a render format, then for a profile of it."""

    def __init__(self, presenter: Presenter):
        self.presenter = presenter

    def choose_format(self, available: Sequence[RenderFormat]) -> Selection[RenderFormat]:
        """Offer the audio formats among ``available``.

        Args:
            available: Every format the host exposes, in host order

        Returns:
            Selected format, or Cancelled if there is none or the user declines
        """
        candidates = [f for f in available if is_audio_format(f.name)]
        if not candidates:
            self.presenter.notify(NOTICE_TITLE, "No audio renderers found!")
            return Cancelled("no audio formats available")

        return self._choose(
            FORMAT_PROMPT_TITLE,
            "Available audio renderers:",
            candidates,
        )

    def choose_profile(
        self,
        fmt: RenderFormat,
        profiles: Sequence[RenderProfile],
    ) -> Selection[RenderProfile]:
        """Offer the valid profiles of ``fmt``.

        Args:
            fmt: The chosen format
            profiles: Profiles the host lists for it, in host order

        Returns:
            Selected profile, or Cancelled if none is valid or the user declines
        """
        candidates = [p for p in profiles if p.is_valid()]
        if not candidates:
            self.presenter.notify(
                NOTICE_TITLE, "No valid templates found for this renderer!"
            )
            return Cancelled("no valid profiles")

        return self._choose(
            PROFILE_PROMPT_TITLE,
            f"Available templates for {fmt.name}:",
            candidates,
        )

    def _choose(self, title: str, prompt: str, candidates: Sequence[T]) -> Selection[T]:
        names = [c.name for c in candidates]
        answer = self.presenter.prompt_choice(title, names, prompt)
        if isinstance(answer, Cancelled):
            log.debug("%s dismissed", title)
            return answer

        # Duplicate names resolve to the first entry
        for candidate in candidates:
            if candidate.name == answer.value:
                return Selected(candidate)
        return Cancelled(f"unknown selection: {answer.value}")
