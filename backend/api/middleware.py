import logging
from fastapi import HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

BODY_TOO_LARGE_MESSAGE = "Request body too large"

class BodyTooLarge(HTTPException):
    def __init__(self):
        super().__init__(status_code=413, detail=BODY_TOO_LARGE_MESSAGE)

class BodySizeLimitMiddleware:
    """
    Rejects request bodies above `max_body_bytes` with 413.
    A declared Content-Length is checked up front; bodies without one
    (chunked) are counted as they are received.
    """

    def __init__(self, app, max_body_bytes: int):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = None
        for name, value in scope.get("headers", []):
            if name.lower() == b"content-length":
                content_length = value.decode("latin-1")
                break

        if content_length is not None:
            if not (content_length.isascii() and content_length.isdigit()):
                response = JSONResponse(status_code=400, content={"error": "Invalid Content-Length header"})
                await response(scope, receive, send)
                return
            if int(content_length) > self.max_body_bytes:
                logger.warning(f"Rejected {content_length}-byte body on {scope.get('path')}")
                response = JSONResponse(status_code=413, content={"error": BODY_TOO_LARGE_MESSAGE})
                await response(scope, receive, send)
                return

        received = 0

        async def limited_receive():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    logger.warning(f"Rejected streamed body over {self.max_body_bytes} bytes on {scope.get('path')}")
                    # Raised inside body parsing; handled by the app's BodyTooLarge handler
                    raise BodyTooLarge()
            return message

        await self.app(scope, limited_receive, send)
