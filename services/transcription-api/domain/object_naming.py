"""Collision-resistant object names for uploaded audio."""

import os
import re
import time
import uuid

OBJECT_PREFIX = "audio"
MAX_BASE_NAME_LENGTH = 50
DEFAULT_EXTENSION = "mp3"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9.-]")


def sanitize_name(name: str) -> str:
    """Replaces characters outside ``[A-Za-z0-9.-]`` and bounds the length."""
    return _UNSAFE_CHARS.sub("_", name)[:MAX_BASE_NAME_LENGTH]


def build_object_name(
    file_name: str,
    timestamp_ms: int | None = None,
    random_id: str | None = None,
) -> str:
    """
    Derives a unique storage key for an uploaded file.

    Format: ``audio/<epoch-millis>-<random-id>-<base-name>.<extension>``.
    The timestamp and random suffix make every call unique even for
    identical file names.
    """
    base, extension = os.path.splitext(os.path.basename(file_name or ""))
    extension = sanitize_name(extension.lstrip(".")).lower() or DEFAULT_EXTENSION
    base = sanitize_name(base) or "audio"
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    if random_id is None:
        random_id = uuid.uuid4().hex[:12]
    return f"{OBJECT_PREFIX}/{timestamp_ms}-{random_id}-{base}.{extension}"
