"""HTTP server exposing the conversion engine as a JSON API."""

from __future__ import annotations

import argparse
import importlib
import logging
import os
from types import ModuleType
from typing import TYPE_CHECKING, cast

from pydantic import BaseModel, ConfigDict

from bytes_converter.application.use_cases import convert
from bytes_converter.schemas import ConversionResponse, ConvertRequest
from bytes_converter.views import to_response

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from fastapi import FastAPI

_fastapi_module: ModuleType | None = None
try:
    _fastapi_module = importlib.import_module("fastapi")
except ModuleNotFoundError:  # pragma: no cover
    pass

try:
    import uvicorn as _uvicorn_imported

    _uvicorn_module: ModuleType | None = _uvicorn_imported
except ModuleNotFoundError:  # pragma: no cover
    _uvicorn_module = None

uvicorn: ModuleType | None = _uvicorn_module


def _require_http_runtime() -> ModuleType:
    """Ensure HTTP server runtime dependencies are available."""
    if _fastapi_module is None:
        raise RuntimeError(
            "fastapi is required to run bytes-converter-http. Install with extra: .[server]"
        )
    return _fastapi_module


class HealthResponse(BaseModel):
    """Health response payload."""

    model_config = ConfigDict(extra="forbid")

    status: str


class ReadyResponse(BaseModel):
    """Readiness response payload."""

    model_config = ConfigDict(extra="forbid")

    status: str


def create_app() -> FastAPI:
    """Create the conversion HTTP application."""
    fastapi = _require_http_runtime()
    app = cast(
        "FastAPI",
        fastapi.FastAPI(
            title="Bytes Converter",
            version="0.1.0",
            description="Convert text, URI, hex and Base64 input into bytes and views.",
        ),
    )

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/readyz", response_model=ReadyResponse)
    async def readyz() -> ReadyResponse:
        return ReadyResponse(status="ready")

    @app.post("/v1/convert", response_model=ConversionResponse)
    async def convert_input(request: ConvertRequest) -> ConversionResponse:
        """Decode the submitted input and return every derived view."""
        try:
            result = convert(request.format, request.input)
            response = to_response(result)
        except Exception as exc:  # pragma: no cover
            logger.exception("unexpected error during HTTP conversion")
            raise fastapi.HTTPException(
                status_code=fastapi.status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="internal server error",
            ) from exc

        if not response.bytes_valid:
            raise fastapi.HTTPException(
                status_code=fastapi.status.HTTP_400_BAD_REQUEST,
                detail=response.error_message,
            )
        return response

    return app


if TYPE_CHECKING:
    app: FastAPI | None

if _fastapi_module is not None:
    app = create_app()
else:  # pragma: no cover
    app = None


def main() -> None:
    """Run the HTTP entrypoint."""
    _require_http_runtime()
    if uvicorn is None:
        raise RuntimeError("uvicorn is required to run bytes-converter-http")
    parser = argparse.ArgumentParser(description="Bytes converter HTTP server.")
    parser.add_argument(
        "--host",
        default=os.getenv("BYTES_CONVERTER_HTTP_HOST", "0.0.0.0"),
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("BYTES_CONVERTER_HTTP_PORT", "8090")),
    )
    args = parser.parse_args()
    uvicorn.run(
        "bytes_converter.converter.http_server:app",
        host=args.host,
        port=args.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
