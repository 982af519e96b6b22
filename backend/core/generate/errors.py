class SummarizationError(Exception):
    """
    Base class for failures of the summarization dependency.
    `message` is the fixed, user-facing text returned to the caller; the raw
    upstream error never leaves the server.
    """
    message = "Failed to process the text"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail

class DependencyError(SummarizationError):
    pass

class DependencyAuthError(SummarizationError):
    message = "Invalid OpenAI API key"

class DependencyRateLimitError(SummarizationError):
    message = "OpenAI API rate limit exceeded"

class DependencyUnavailableError(SummarizationError):
    message = "OpenAI API is temporarily unavailable"

# Upstream HTTP status -> error class. Anything unlisted maps to DependencyError.
STATUS_ERRORS = {
    401: DependencyAuthError,
    429: DependencyRateLimitError,
    503: DependencyUnavailableError,
}

def error_for_status(status_code: int, detail: str = "") -> SummarizationError:
    return STATUS_ERRORS.get(status_code, DependencyError)(detail)
