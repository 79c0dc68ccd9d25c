"""Queued-provider transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from scribe_common import ScribeError

from dependencies import get_transcription_handler
from errors import to_http_exception
from handlers import TranscriptionHandler
from request_models import TranscribeRequest
from response_models import TranscriptionResponse

router = APIRouter(prefix="/api", tags=["transcription"])

TranscriptionHandlerDep = Annotated[
    TranscriptionHandler, Depends(get_transcription_handler)
]


@router.post(
    "/transcribe",
    response_model=TranscriptionResponse,
    response_model_exclude_unset=True,
)
def transcribe_audio(
    payload: TranscribeRequest, handler: TranscriptionHandlerDep
) -> TranscriptionResponse:
    """
    Transcribes an uploaded file with Google Speech-to-Text.

    Long recordings can take minutes; the request blocks until the
    recognition operation completes.
    """
    try:
        result = handler.transcribe(
            payload.gcs_uri, payload.audio_format, payload.language_mode
        )
    except ScribeError as e:
        raise to_http_exception(e)
    return TranscriptionResponse.from_result(result)
