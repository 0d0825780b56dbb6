"""Per-request domain context and log context."""

from uuid import uuid4

from fastapi import FastAPI, Request
from protean.domain import Domain

from orderly.utils.logging import add_context, clear_context


def install_domain_context(app: FastAPI, domain: Domain) -> None:
    """Push ``domain``'s context around every request.

    The domain object itself is built once by the entry point; each request
    only gets a fresh context scope (and with it, fresh units of work).
    """

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid4().hex
        clear_context()
        add_context(request_id=request_id, method=request.method, path=request.url.path)

        with domain.domain_context():
            response = await call_next(request)

        response.headers["x-request-id"] = request_id
        return response
