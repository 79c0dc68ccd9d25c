"""API routers."""

from .pages import router as pages_router
from .transcribe import router as transcribe_router
from .upload import router as upload_router
from .whisper import router as whisper_router

__all__ = ["pages_router", "upload_router", "transcribe_router", "whisper_router"]
