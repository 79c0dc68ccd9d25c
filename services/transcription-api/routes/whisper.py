"""Direct-provider transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from scribe_common import ScribeError

from dependencies import get_whisper_handler
from errors import to_http_exception
from handlers import WhisperHandler
from response_models import WhisperTranscriptionResponse

from .upload import read_upload

router = APIRouter(prefix="/api", tags=["transcription"])

WhisperHandlerDep = Annotated[WhisperHandler, Depends(get_whisper_handler)]


@router.post(
    "/whisper",
    response_model=WhisperTranscriptionResponse,
    response_model_exclude_unset=True,
)
def transcribe_with_whisper(
    handler: WhisperHandlerDep,
    audio: UploadFile | None = File(default=None),
    language_mode: str | None = Form(default=None, alias="languageMode"),
) -> WhisperTranscriptionResponse:
    """Transcribes an uploaded file directly with OpenAI Whisper."""
    if audio is None:
        raise HTTPException(status_code=400, detail="No audio file provided")

    try:
        handler.check_upload(audio.content_type or "", audio.size)
        result = handler.transcribe(read_upload(audio), language_mode)
    except ScribeError as e:
        raise to_http_exception(e)
    return WhisperTranscriptionResponse.from_result(result)
