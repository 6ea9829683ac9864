from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarHTTP
import logging

from aia_assess.engine.errors import AssessmentError, ConfigurationError
from aia_assess.logging_config import log_failure

logger = logging.getLogger("aia")


def status_for(exc: AssessmentError) -> int:
    return 500 if isinstance(exc, ConfigurationError) else 400


def install_error_handlers(app):
    @app.exception_handler(AssessmentError)
    async def assessment_exc(request: Request, exc: AssessmentError):
        log_failure(exc.code, {"path": request.url.path, "detail": exc.message})
        return JSONResponse({"error": exc.code, "detail": exc.message}, status_code=status_for(exc))

    @app.exception_handler(RequestValidationError)
    async def request_invalid(request: Request, exc: RequestValidationError):
        fields = sorted({".".join(str(p) for p in err.get("loc", ())[1:]) for err in exc.errors()})
        detail = f"Invalid or missing fields: {', '.join(f for f in fields if f) or 'request body'}"
        log_failure("VALIDATION_ERROR", {"path": request.url.path, "fields": fields})
        return JSONResponse({"error": "VALIDATION_ERROR", "detail": detail}, status_code=400)

    @app.exception_handler(StarHTTP)
    async def http_exc(_: Request, exc: StarHTTP):
        return JSONResponse({"error": f"HTTP_{exc.status_code}", "detail": exc.detail}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled(_: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse({"error": "INTERNAL_ERROR", "detail": "Unexpected error"}, status_code=500)
