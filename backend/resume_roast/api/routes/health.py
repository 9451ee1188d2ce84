from fastapi import APIRouter
from fastapi.responses import Response

from resume_roast.config import get_settings
from resume_roast.models.schemas import HealthResponse
from resume_roast.utils.prometheus_metrics import get_metrics

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health():
    mode = "live" if get_settings().has_llm_credential() else "demo"
    return HealthResponse(mode=mode)


@router.get("/metrics")
def metrics():
    data, content_type = get_metrics()
    return Response(content=data, media_type=content_type)
