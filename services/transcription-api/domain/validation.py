"""Validation rules for incoming audio uploads."""

from scribe_common import ValidationError

from .models import UploadRequest

SUPPORTED_MEDIA_TYPES = frozenset(
    {
        "audio/mpeg",
        "audio/mp3",
        "audio/mp4",
        "audio/wav",
        "audio/wave",
        "audio/m4a",
        "audio/flac",
        "audio/ogg",
        "audio/webm",
        "video/mp4",
    }
)


def format_size_limit(max_bytes: int) -> str:
    return f"{max_bytes // (1024 * 1024)}MB"


def validate_audio_metadata(content_type: str, size: int | None, max_bytes: int) -> None:
    """
    Checks the declared media type and size of an upload.

    Runs on multipart headers alone, before the body is read. The type check
    comes first so that an unsupported type is rejected even for an empty
    file. A size equal to the ceiling is accepted; an unknown size is left
    to the post-read check.

    Raises:
        ValidationError: If the type is unsupported or the file is too large.
    """
    if content_type not in SUPPORTED_MEDIA_TYPES:
        raise ValidationError(f"Invalid file type: {content_type}")
    if size is not None and size > max_bytes:
        raise ValidationError(
            f"File size too large. Maximum {format_size_limit(max_bytes)} allowed."
        )


def validate_audio_upload(request: UploadRequest, max_bytes: int) -> None:
    """Applies validate_audio_metadata to a fully read upload."""
    validate_audio_metadata(request.content_type, request.size, max_bytes)
