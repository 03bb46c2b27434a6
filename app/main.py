from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from .codec import base32_decode, base32_decode_with_checksum, base32_encode, base32_encode_with_checksum
from .core.logging import setup_logging
from .core.settings import get_settings
from .errors import Base32Error
from .models import (
    DecodeRequest,
    DecodeResponse,
    EncodeRequest,
    EncodeResponse,
    ErrorDetail,
    HealthResponse,
    NormalizeRequest,
    NormalizeResponse,
)
from .normalize import normalize


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    yield


settings = get_settings()
app = FastAPI(
    title=settings.app_name,
    description="Crockford Base32 encoding with optional mod-37 checksum",
    version=settings.app_version,
    lifespan=lifespan,
)


def _unprocessable(exc: Base32Error) -> HTTPException:
    detail = ErrorDetail(error=type(exc).__name__, message=str(exc))
    return HTTPException(status_code=422, detail=detail.model_dump())


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/encode", response_model=EncodeResponse)
def encode(req: EncodeRequest):
    encoder = base32_encode_with_checksum if req.checksum else base32_encode
    return EncodeResponse(encoded=encoder(req.number), checksum=req.checksum)


@app.post("/decode", response_model=DecodeResponse)
def decode(req: DecodeRequest):
    mode = req.mode or get_settings().default_mode

    try:
        if req.checksum:
            value = base32_decode_with_checksum(req.encoded, mode=mode)
        else:
            value = base32_decode(req.encoded, mode=mode)
    except Base32Error as exc:
        raise _unprocessable(exc) from exc

    # decode already ran the mode actions; this pass only reports the canonical form
    normalized = normalize(req.encoded)
    return DecodeResponse(value=value, normalized=normalized, corrected=normalized != req.encoded)


@app.post("/normalize", response_model=NormalizeResponse)
def normalize_string(req: NormalizeRequest):
    mode = req.mode or get_settings().default_mode

    try:
        normalized = normalize(req.encoded, mode)
    except Base32Error as exc:
        raise _unprocessable(exc) from exc

    return NormalizeResponse(normalized=normalized, corrected=normalized != req.encoded)
