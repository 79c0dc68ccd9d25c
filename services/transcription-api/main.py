"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI

from errors import register_error_handlers
from routes import pages_router, transcribe_router, upload_router, whisper_router

patch_all()

app = FastAPI(title="Speech Scribe")
register_error_handlers(app)
app.include_router(pages_router)
app.include_router(upload_router)
app.include_router(transcribe_router)
app.include_router(whisper_router)


@app.get("/health")
def health():
    return {"status": "ok"}
