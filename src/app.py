"""Orderly FastAPI application.

Identity, catalogue and ordering share one Protean domain; every request
runs inside that domain's context and commands are processed synchronously.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000 --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from orderly import config
from orderly.api.errors import install_error_handlers
from orderly.api.middleware import install_domain_context
from orderly.domain import orderly

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Initialized at module level so uvicorn workers share it. PROTEAN_ENV picks
# the config overlay (in-memory providers unless a domain.toml says otherwise).
orderly.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Orderly API",
    description="E-commerce backend: accounts, catalogue, cart and orders",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_domain_context(app, orderly)
install_error_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from orderly.api.catalogue import product_router  # noqa: E402
from orderly.api.identity import auth_router, user_router  # noqa: E402
from orderly.api.ordering import cart_router, order_router  # noqa: E402

app.include_router(auth_router)
app.include_router(user_router)
app.include_router(product_router)
app.include_router(cart_router)
app.include_router(order_router)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": orderly.name})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
