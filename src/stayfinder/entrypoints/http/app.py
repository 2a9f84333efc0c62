from fastapi import FastAPI

from stayfinder.entrypoints.http.exception_handlers import register_exception_handlers
from stayfinder.entrypoints.http.routes.health import router as health_router
from stayfinder.entrypoints.http.routes.listings import router as listings_router
from stayfinder.entrypoints.http.routes.wishlist import router as wishlist_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="StayFinder API",
        description="""
        Read-only access to the StayFinder listing engine.

        ## Features
        - Search listings with the same query strings the web client puts in its URLs
        - Get listing details
        - Price quotes for a date range
        - Encode and decode wishlist share links

        Personal state (wishlist, bookings, history) lives in the client's own
        storage and is never sent here.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(listings_router, prefix="/v1")
    app.include_router(wishlist_router, prefix="/v1")

    return app


app = build_app()
