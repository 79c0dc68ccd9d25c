"""Request models for the transcription API."""

from pydantic import BaseModel, ConfigDict, Field


class TranscribeRequest(BaseModel):
    """Body of a queued-provider transcription request."""

    model_config = ConfigDict(populate_by_name=True)

    gcs_uri: str | None = Field(default=None, alias="gcsUri")
    audio_format: str | None = Field(default=None, alias="audioFormat")
    language_mode: str | None = Field(default=None, alias="languageMode")
