import logging
import httpx
from typing import List, Dict, Any
from config.settings import AppSettings
from core.generate.errors import DependencyError, error_for_status

logger = logging.getLogger(__name__)

class LLMClient:
    """
    OpenAI chat-completions client for summarization.
    One synchronous call per request: no streaming, no retries, no fallback.
    Every failure is raised as a SummarizationError subclass.
    """

    def __init__(self, settings: AppSettings):
        self.api_key = settings.openai_api_key
        self.config = settings.llm
        self.url = settings.openai_api_url
        self.timeout = settings.openai_timeout
        self.headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

    def generate(self, messages: List[Dict[str, str]], max_tokens: int) -> str:
        """
        Calls the completion endpoint and returns the first choice's text.
        """
        payload = {
            "model": self.config.model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": self.config.temperature
        }

        if not self.api_key:
            logger.warning("OPENAI_API_KEY is not set. LLM calls will fail.")

        return self._sync_response(payload)

    def _sync_response(self, payload: Dict[str, Any]) -> str:
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(self.url, headers=self.headers, json=payload)
                response.raise_for_status()
                data = response.json()
                content = data["choices"][0]["message"]["content"]
                if not isinstance(content, str):
                    raise TypeError(f"completion content is {type(content).__name__}")
                return content
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            # Upstream body is for the server log only
            logger.error(f"OpenAI API error ({status}): {e.response.text}")
            raise error_for_status(status, f"upstream status {status}") from e
        except httpx.RequestError as e:
            logger.error(f"OpenAI API request failed: {e!r}")
            raise DependencyError(str(e)) from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Unexpected OpenAI API response shape: {e!r}")
            raise DependencyError("malformed completion response") from e
