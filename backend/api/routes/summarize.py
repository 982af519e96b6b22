import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from core.generate.errors import DependencyError, SummarizationError
from core.generate.summarizer import Summarizer
from core.generate.validation import is_long_enough
from models.summary import ErrorResponse, SummarizeRequest, SummarizeResponse

router = APIRouter()
logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Text must be at least 10 characters long"

# Dependency to get Summarizer from app state
def get_summarizer(request: Request) -> Summarizer:
    return request.app.state.summarizer

@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Summarize a block of text"
)
def summarize_text(
    request_data: SummarizeRequest,
    summarizer: Summarizer = Depends(get_summarizer)
):
    """
    1. Rejects missing or too-short text with 400.
    2. Delegates to the configured Summarizer (sync def: runs on the worker pool).
    3. Maps dependency failures to their fixed 500 messages.
    """
    text = request_data.text
    if not is_long_enough(text):
        return JSONResponse(status_code=400, content={"error": VALIDATION_MESSAGE})

    try:
        return summarizer.summarize(text, request_data.length)

    except SummarizationError as e:
        logger.error(f"Summarization dependency failed: {type(e).__name__}: {e.detail}")
        return JSONResponse(status_code=500, content={"error": e.message})
    except Exception:
        logger.exception("Summarization service failed.")
        return JSONResponse(status_code=500, content={"error": DependencyError.message})
