"""
FastAPI application exposing the relay over HTTP.

    POST /api/analyze  {"messages": [...]}  ->  {"text": ...} | 500 {"error": ...}
"""

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from guessr import __version__
from guessr.llm import BaseProvider, get_provider

from .schemas import AnalyzeRequest

logger = logging.getLogger(__name__)


def get_relay_provider() -> BaseProvider:
    """Build the provider from the current environment, once per request."""
    return get_provider()


async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse({"error": message}, status_code=500)


async def _provider_unavailable(request: Request, exc: Exception) -> JSONResponse:
    logger.error("No usable provider for %s: %s", request.url.path, exc)
    return JSONResponse({"error": str(exc)}, status_code=500)


def create_app() -> FastAPI:
    app = FastAPI(title="Guessr", version=__version__)
    app.add_exception_handler(RequestValidationError, _invalid_request)
    app.add_exception_handler(ValueError, _provider_unavailable)
    app.add_exception_handler(ImportError, _provider_unavailable)

    @app.post("/api/analyze")
    async def analyze(
        body: AnalyzeRequest,
        provider: BaseProvider = Depends(get_relay_provider),
    ) -> JSONResponse:
        result = await provider.relay(body.to_conversation())
        if result.is_ok:
            return JSONResponse(result.to_response())
        return JSONResponse(result.to_response(), status_code=500)

    return app


app = create_app()
