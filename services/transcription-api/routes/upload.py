"""Audio upload endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from scribe_common import (
    AuthenticationError,
    ConfigurationError,
    ScribeError,
    ValidationError,
    setup_logging,
)

from dependencies import get_upload_handler
from domain import UploadRequest
from handlers import UploadHandler
from response_models import UploadResponse

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["upload"])

UploadHandlerDep = Annotated[UploadHandler, Depends(get_upload_handler)]


def read_upload(audio: UploadFile) -> UploadRequest:
    """Reads a multipart file into an UploadRequest."""
    data = audio.file.read()
    return UploadRequest(
        data=data,
        file_name=audio.filename or "audio",
        content_type=audio.content_type or "",
        size=audio.size if audio.size is not None else len(data),
    )


@router.post("/upload", response_model=UploadResponse)
def upload_audio(
    handler: UploadHandlerDep,
    audio: UploadFile | None = File(default=None),
) -> UploadResponse:
    """
    Stores an audio file in Cloud Storage.

    Returns the gs:// URI to pass to the transcribe endpoint.
    """
    if audio is None:
        logger.error("No file provided in request")
        raise HTTPException(status_code=400, detail="No file provided")

    try:
        handler.check_upload(audio.content_type or "", audio.size)
        request = read_upload(audio)
        ref = handler.upload(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ConfigurationError as e:
        raise HTTPException(status_code=500, detail=e.message)
    except AuthenticationError:
        raise HTTPException(
            status_code=500,
            detail="Authentication error. Please check server configuration.",
        )
    except ScribeError as e:
        raise HTTPException(status_code=500, detail=f"Upload failed: {e.message}")

    return UploadResponse(
        success=True,
        gcs_uri=ref.uri,
        file_name=request.file_name,
        size=request.size,
        type=request.content_type,
    )
