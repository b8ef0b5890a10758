from __future__ import annotations

from track_export.config import FORMAT_PROMPT_TITLE, PROFILE_PROMPT_TITLE
from track_export.core.models import Cancelled, Selected
from track_export.core.prompter import SelectionPrompter, is_audio_format


def test_is_audio_format_matches_keywords_case_insensitively() -> None:
    assert is_audio_format("Wave (Microsoft)")
    assert is_audio_format("WAV64")
    assert is_audio_format("MP3 Audio")
    assert not is_audio_format("MainConcept AVC/AAC")
    assert not is_audio_format("QuickTime 7")


def test_choose_format_offers_only_audio_formats_in_host_order(fakes) -> None:
    formats = [
        fakes.Format("MainConcept AVC/AAC", ".mp4"),
        fakes.Format("Wave (Microsoft)", ".wav"),
        fakes.Format("QuickTime 7", ".mov"),
        fakes.Format("MP3 Audio", ".mp3"),
    ]
    presenter = fakes.Presenter(["MP3 Audio"])

    result = SelectionPrompter(presenter).choose_format(formats)

    assert result == Selected(formats[3])
    title, items, _ = presenter.prompts[0]
    assert title == FORMAT_PROMPT_TITLE
    assert items == ["Wave (Microsoft)", "MP3 Audio"]


def test_choose_format_without_audio_formats_never_prompts(fakes) -> None:
    presenter = fakes.Presenter()

    result = SelectionPrompter(presenter).choose_format(
        [fakes.Format("MainConcept AVC/AAC", ".mp4"), fakes.Format("QuickTime 7", ".mov")]
    )

    assert isinstance(result, Cancelled)
    assert presenter.prompts == []
    assert len(presenter.notices) == 1
    assert "No audio renderers" in presenter.notices[0][1]


def test_choose_format_dismissed_returns_cancelled(fakes) -> None:
    presenter = fakes.Presenter([None])
    result = SelectionPrompter(presenter).choose_format([fakes.Format("Wave (WAV)")])
    assert isinstance(result, Cancelled)


def test_choose_profile_filters_invalid_profiles(fakes) -> None:
    fmt = fakes.Format(
        "Wave (WAV)",
        profiles=(
            fakes.Profile("8-bit", valid=False),
            fakes.Profile("16-bit PCM"),
            fakes.Profile("24-bit PCM"),
        ),
    )
    presenter = fakes.Presenter(["16-bit PCM"])

    result = SelectionPrompter(presenter).choose_profile(fmt, fmt.profiles)

    assert result == Selected(fmt.profiles[1])
    title, items, prompt = presenter.prompts[0]
    assert title == PROFILE_PROMPT_TITLE
    assert items == ["16-bit PCM", "24-bit PCM"]
    assert "Wave (WAV)" in prompt


def test_choose_profile_without_valid_profiles_never_prompts(fakes) -> None:
    fmt = fakes.Format("Wave (WAV)", profiles=(fakes.Profile("8-bit", valid=False),))
    presenter = fakes.Presenter()

    result = SelectionPrompter(presenter).choose_profile(fmt, fmt.profiles)

    assert isinstance(result, Cancelled)
    assert presenter.prompts == []
    assert "No valid templates" in presenter.notices[0][1]


def test_duplicate_display_names_resolve_to_first_entry(fakes) -> None:
    first = fakes.Profile("Default")
    second = fakes.Profile("Default", valid=True)
    fmt = fakes.Format("Wave (WAV)", profiles=(first, second))

    result = SelectionPrompter(fakes.Presenter(["Default"])).choose_profile(fmt, [first, second])

    assert isinstance(result, Selected)
    assert result.value is first
