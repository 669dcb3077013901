from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.entrypoints.http.exception_handlers import register_exception_handlers
from storefront.entrypoints.http.routes.health import router as health_router
from storefront.entrypoints.http.routes.products import router as products_router
from storefront.infra.config import Settings, load_settings


def build_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(
        title="Storefront API",
        description="""
        Demo storefront API serving a read-only product catalog.

        ## Features
        - Search products with filters and pagination
        - Get product details
        - List product categories

        ## Authentication
        No authentication required.

        ## Response Format
        Every /api response is wrapped in an envelope:
        `{"data": ..., "success": true}` or
        `{"data": null, "success": false, "error": "..."}`.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "MIT",
        },
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(products_router, prefix="/api")

    return app


app = build_app()
