"""Pizzeria storefront FastAPI application.

``/menu`` is served by the catalogue domain and ``/sessions`` (cart and
checkout) by the ordering domain. Each request runs inside the Protean domain
context that owns its URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload

Set SEED_DEMO_MENU=1 to load the demo menu at startup.
"""

import os

from catalogue.domain import catalogue
from catalogue.utils.logging import add_context, clear_context
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from ordering.domain import ordering
from protean.integrations.fastapi import register_exception_handlers

# Initialized at import time so every uvicorn worker shares the same registry.
catalogue.init()
ordering.init()


def _seed_requested() -> bool:
    return os.environ.get("SEED_DEMO_MENU", "").lower() in ("1", "true", "yes")


if _seed_requested():
    from catalogue.menu.seed import seed_demo_menu

    with catalogue.domain_context():
        seed_demo_menu()


DOMAIN_BY_PREFIX = {
    "/menu": catalogue,
    "/sessions": ordering,
}


def domain_for(path: str):
    """The domain owning ``path``; None for health checks and docs."""
    return next(
        (domain for prefix, domain in DOMAIN_BY_PREFIX.items() if path.startswith(prefix)),
        None,
    )


app = FastAPI(
    title="Pizzeria Storefront API",
    description="Pizza menu, shopping cart and checkout with WhatsApp handoff",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    clear_context()
    domain = domain_for(request.url.path)
    if domain is None:
        return await call_next(request)

    add_context(domain=domain.name, path=request.url.path)
    with domain.domain_context():
        return await call_next(request)


from catalogue.api import menu_router  # noqa: E402
from ordering.api import session_router  # noqa: E402

app.include_router(menu_router)
app.include_router(session_router)


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "domains": {domain.name: {"name": domain.name} for domain in (catalogue, ordering)},
    }
