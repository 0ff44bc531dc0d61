"""FastAPI relay in front of the Gemini generateContent API.

Endpoints:
- GET /            static frontend page
- GET /health
- POST /api/generate  { "prompt": "..." } -> { "content": "..." }
"""
from __future__ import annotations
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from gemini_relay.common.config import get_settings
from gemini_relay.common.errors import UpstreamError, ValidationError
from gemini_relay.common.logging_setup import setup_logging
from gemini_relay.common.schema import ErrorOut, GenerateIn, GenerateOut
from gemini_relay.common.validation import validate_prompt
from gemini_relay.serve.forwarder import Forwarder

load_dotenv()
LOGGER = logging.getLogger("gemini_relay.serve.app")
setup_logging(os.getenv("LOG_LEVEL", "INFO"))

UPSTREAM_FAILURE_MESSAGE = "Failed to fetch content from Gemini"
STATIC_DIR = Path(__file__).parent / "static"
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

@asynccontextmanager
async def lifespan(application: FastAPI):
    settings = get_settings()
    LOGGER.info("Relaying prompts to %s", settings.generate_url)
    yield

app = FastAPI(
    title="Gemini Relay",
    version="0.1.0",
    description="Forwards a prompt to the Gemini generateContent API and returns the text.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS or ["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

def get_forwarder() -> Forwarder:
    return Forwarder.from_settings(get_settings())

@app.exception_handler(ValidationError)
async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    LOGGER.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": str(exc)})

@app.exception_handler(RequestValidationError)
async def _malformed_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    LOGGER.info("Malformed body on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object."})

@app.exception_handler(UpstreamError)
async def _upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
    cause = exc.__cause__
    LOGGER.error(
        "Upstream failure on %s: %s (status=%s, cause=%r)",
        request.url.path,
        exc,
        exc.status_code,
        cause,
    )
    return JSONResponse(status_code=500, content={"error": UPSTREAM_FAILURE_MESSAGE})

@app.exception_handler(Exception)
async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": UPSTREAM_FAILURE_MESSAGE})

@app.get("/", include_in_schema=False)
def index() -> FileResponse:
    return FileResponse(STATIC_DIR / "index.html")

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "model": get_settings().model}

@app.post(
    "/api/generate",
    response_model=GenerateOut,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def generate(body: GenerateIn, forwarder: Forwarder = Depends(get_forwarder)):
    try:
        request = validate_prompt(body.prompt)
    except ValidationError as e:
        LOGGER.info("Invalid prompt: %s", e)
        return JSONResponse(status_code=400, content={"error": str(e)})

    # Upstream failures propagate to the registered exception handlers
    result = forwarder.generate(request.prompt)
    return GenerateOut(content=result.content)

def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == "__main__":
    main()
