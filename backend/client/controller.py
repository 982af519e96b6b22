import logging
import httpx
from typing import Callable, List, Optional
from pydantic import ValidationError

from client.state import ErrorState, IdleState, LoadingState, ResultState, ViewState
from core.generate.validation import is_long_enough
from models.summary import SummarizeResponse

logger = logging.getLogger(__name__)

SHORT_TEXT_MESSAGE = "Please enter at least 10 characters of text"
FALLBACK_ERROR_MESSAGE = "Failed to summarize text"

class SummarizeFormController:
    """
    Form state for the summarizer UI.
    Holds the input text, the selected length and the request lifecycle
    state, and talks to POST /api/summarize. Every submit ends in exactly
    one ErrorState or ResultState.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        timeout: float = 60.0,
        http_client: Optional[httpx.Client] = None
    ):
        self.url = f"{base_url.rstrip('/')}/api/summarize"
        self.timeout = timeout
        self.http_client = http_client
        self.text = ""
        self.length = "medium"
        self.state: ViewState = IdleState()
        self._listeners: List[Callable[[ViewState], None]] = []

    def subscribe(self, listener: Callable[[ViewState], None]) -> None:
        """Registers a callback invoked with the new state on every transition."""
        self._listeners.append(listener)

    def _transition(self, state: ViewState) -> None:
        self.state = state
        for listener in self._listeners:
            listener(state)

    def submit(self, text: Optional[str] = None, length: Optional[str] = None) -> ViewState:
        if text is not None:
            self.text = text
        if length is not None:
            self.length = length

        if not is_long_enough(self.text):
            self._transition(ErrorState(message=SHORT_TEXT_MESSAGE))
            return self.state

        try:
            self._transition(LoadingState())
            final_state = self._request()
        except Exception as e:
            # Whatever happens, the form must not stay in Loading
            logger.exception("Summarization submit failed.")
            final_state = ErrorState(message=str(e) or type(e).__name__)
        self._transition(final_state)
        return self.state

    def _request(self) -> ViewState:
        body = {"text": self.text, "length": self.length}
        try:
            response = self._post(body)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(f"Summarization request failed: {e!r}")
            return ErrorState(message=str(e) or type(e).__name__)

        if not response.is_success:
            return ErrorState(message=self._error_message(response))

        try:
            result = SummarizeResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Unreadable summarization response: {e}")
            return ErrorState(message=FALLBACK_ERROR_MESSAGE)
        return ResultState(result=result)

    def _post(self, body: dict) -> httpx.Response:
        if self.http_client is not None:
            return self.http_client.post(self.url, json=body, timeout=self.timeout)
        with httpx.Client(timeout=self.timeout) as client:
            return client.post(self.url, json=body)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return FALLBACK_ERROR_MESSAGE
        if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"]:
            return data["error"]
        return FALLBACK_ERROR_MESSAGE
