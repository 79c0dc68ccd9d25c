"""Maps declared audio formats to provider encodings."""

from scribe_common import setup_logging

from .models import AudioEncoding, AudioFormat

logger = setup_logging()

DEFAULT_ENCODING = AudioEncoding.MP3

ENCODINGS = {
    AudioFormat.WAV: AudioEncoding.LINEAR16,
    AudioFormat.WAVE: AudioEncoding.LINEAR16,
    AudioFormat.MP3: AudioEncoding.MP3,
    AudioFormat.MP4: AudioEncoding.MP3,
    AudioFormat.M4A: AudioEncoding.MP3,
    AudioFormat.FLAC: AudioEncoding.FLAC,
    AudioFormat.OGG: AudioEncoding.OGG_OPUS,
    AudioFormat.WEBM: AudioEncoding.WEBM_OPUS,
}


def resolve_encoding(audio_format: AudioFormat | str) -> AudioEncoding:
    """
    Resolves the provider encoding for a declared format.

    Unknown formats fall back to MP3; the provider can often still decode them.
    """
    if not isinstance(audio_format, AudioFormat):
        audio_format = AudioFormat.parse(audio_format)
    encoding = ENCODINGS.get(audio_format)
    if encoding is None:
        logger.warning(
            "Unknown audio format, defaulting encoding",
            extra={"audio_format": audio_format.value, "encoding": DEFAULT_ENCODING.value},
        )
        return DEFAULT_ENCODING
    return encoding
