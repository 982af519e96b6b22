from fastapi import APIRouter

from models.summary import HealthResponse

router = APIRouter()

@router.get("/health", response_model=HealthResponse, summary="Liveness probe")
def health_check():
    return HealthResponse(status="OK", message="Summarization API is running")
