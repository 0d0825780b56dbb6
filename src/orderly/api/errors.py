"""Exception handlers that turn every failure into the standard error body.

Body shape: ``{"message": str, "error_code": int, "errors": ... | null}``.
Unexpected exceptions become a generic 500; their details go to the log
only.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

from orderly.errors import BadRequestError, ErrorCode, InternalError, OrderlyError
from orderly.utils.logging import get_logger

logger = get_logger(__name__)


def _respond(error: OrderlyError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def handle_orderly_error(request: Request, exc: OrderlyError) -> JSONResponse:
    return _respond(exc)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [{"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]} for err in exc.errors()]
    return _respond(BadRequestError("Unprocessable entity", ErrorCode.VALIDATION_FAILED, errors))


async def handle_domain_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _respond(BadRequestError("Unprocessable entity", ErrorCode.VALIDATION_FAILED, exc.messages))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path, method=request.method)
    return _respond(InternalError(cause=exc))


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OrderlyError, handle_orderly_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ValidationError, handle_domain_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
