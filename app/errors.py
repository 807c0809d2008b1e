"""
Error types raised by the store and handlers, and the handlers that render them as JSON
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

log = structlog.get_logger()


class TodoApiError(Exception):
    status_code = 500
    message = "Internal server error"

    def payload(self) -> dict:
        return {"error": self.message}


class TodoNotFound(TodoApiError):
    status_code = 404
    message = "Todo not found"

    def __init__(self, todo_id=None):
        super().__init__(f"todo {todo_id!r} not found")
        self.todo_id = todo_id


class ValidationFailed(TodoApiError):
    status_code = 400
    message = "Validation failed"

    def __init__(self, messages: list[str]):
        super().__init__("; ".join(messages))
        self.messages = messages

    def payload(self) -> dict:
        return {"error": self.message, "messages": self.messages}


class MalformedBody(TodoApiError):
    status_code = 400
    message = "Invalid JSON body"


async def todo_api_error_handler(request: Request, exc: TodoApiError) -> JSONResponse:
    log.info(
        "request rejected",
        error=type(exc).__name__,
        status_code=exc.status_code,
        detail=str(exc),
    )
    return JSONResponse(exc.payload(), status_code=exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.error("unhandled error", method=request.method, path=request.url.path, exc_info=exc)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodoApiError, todo_api_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
