import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resume_roast.api.routes.critique import router as critique_router
from resume_roast.api.routes.health import router as health_router
from resume_roast.config import get_settings
from resume_roast.core.critique_service import CritiqueError
from resume_roast.core.pdf_extractor import ExtractionError
from resume_roast.utils.prometheus_metrics import record_error, record_validation_failure

logger = logging.getLogger(__name__)


async def critique_error_handler(request: Request, exc: CritiqueError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def extraction_error_handler(request: Request, exc: ExtractionError) -> JSONResponse:
    record_validation_failure("upload")
    record_error(type(exc).__name__, "pdf_extractor")
    logger.info(f"Rejected upload on {request.url.path}: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Wire contract: malformed bodies are a 400 with an "error" field
    record_validation_failure("request")
    errors = exc.errors()
    detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": f"Invalid request body: {detail}"})


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = FastAPI(title="Resume Roast API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CritiqueError, critique_error_handler)
    app.add_exception_handler(ExtractionError, extraction_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(health_router)
    app.include_router(critique_router)
    return app

app = create_app()
