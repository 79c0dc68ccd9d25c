"""Language configuration and script-based language heuristics."""

import re

from .models import LanguageConfig, LanguageMode

SOURCE_LANGUAGE = "si-LK"
SECONDARY_LANGUAGE = "en-US"
MIXED_LANGUAGE = "mixed"
AUTO_DETECTED_LANGUAGE = "auto-detected"

_SOURCE_SCRIPT = re.compile(r"[\u0D80-\u0DFF]")
_LATIN_SCRIPT = re.compile(r"[A-Za-z]")

_LANGUAGE_CONFIGS = {
    LanguageMode.SINHALA: LanguageConfig(
        language_code=SOURCE_LANGUAGE,
        response_language=SOURCE_LANGUAGE,
    ),
    LanguageMode.ENGLISH: LanguageConfig(
        language_code=SECONDARY_LANGUAGE,
        response_language=SECONDARY_LANGUAGE,
    ),
    LanguageMode.MIXED: LanguageConfig(
        language_code=SOURCE_LANGUAGE,
        alternative_language_codes=(SECONDARY_LANGUAGE,),
        response_language=MIXED_LANGUAGE,
    ),
}


def resolve_language_config(mode: LanguageMode) -> LanguageConfig:
    """Returns the provider language parameters for a language mode."""
    return _LANGUAGE_CONFIGS[mode]


def count_scripts(text: str) -> tuple[int, int]:
    """Returns (source-script characters, Latin letters) found in ``text``."""
    return len(_SOURCE_SCRIPT.findall(text)), len(_LATIN_SCRIPT.findall(text))


def contains_source_script(text: str) -> bool:
    return _SOURCE_SCRIPT.search(text) is not None


def classify_primary_language(text: str) -> str:
    """
    Guesses the dominant language of a transcript by character counts.

    Best effort only: the script with more characters wins and an exact tie
    (including an empty transcript) is reported as mixed.
    """
    source, latin = count_scripts(text)
    if source > latin:
        return SOURCE_LANGUAGE
    if latin > source:
        return SECONDARY_LANGUAGE
    return MIXED_LANGUAGE


def canonical_language_tag(tag: str) -> str:
    """Normalizes tag casing, e.g. ``si-lk`` to ``si-LK``."""
    language, _, region = tag.strip().partition("-")
    if not region:
        return language.lower()
    return f"{language.lower()}-{region.upper()}"


def detect_languages(text: str, reported_tags: list[str]) -> list[str]:
    """
    Lists the languages present in a transcript.

    Provider-reported tags win, in first-seen order. Without any, the scripts
    present in the text are used instead.
    """
    detected: list[str] = []
    for tag in reported_tags:
        canonical = canonical_language_tag(tag)
        if canonical and canonical not in detected:
            detected.append(canonical)
    if detected:
        return detected

    source, latin = count_scripts(text)
    if source:
        detected.append(SOURCE_LANGUAGE)
    if latin:
        detected.append(SECONDARY_LANGUAGE)
    return detected


_LANGUAGE_NAME_TAGS = {
    "sinhala": SOURCE_LANGUAGE,
    "english": SECONDARY_LANGUAGE,
}


def language_tag_for_name(name: str | None) -> str | None:
    """
    Maps a provider language name (``"sinhala"``, ``"english"``) or a bare
    ISO code (``"si"``, ``"en"``) to a language tag.

    Returns None for languages this service does not transcribe.
    """
    if not name:
        return None
    key = name.strip().lower()
    if key in _LANGUAGE_NAME_TAGS:
        return _LANGUAGE_NAME_TAGS[key]
    for tag in (SOURCE_LANGUAGE, SECONDARY_LANGUAGE):
        if key == tag.split("-")[0] or key == tag.lower():
            return tag
    return None
