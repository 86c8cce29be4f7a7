"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from pricing_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from pricing_gateway.api.v1 import affordability, quote, rates
from pricing_gateway.infrastructure.observability.logging import setup_logging
from pricing_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Loan Pricing Gateway",
        description="Loan pricing, repayment schedule and affordability service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Last added runs first, so request IDs exist before metrics are taken
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(quote.router, prefix="/v1", tags=["quotes"])
    app.include_router(affordability.router, prefix="/v1", tags=["affordability"])
    app.include_router(rates.router, prefix="/v1", tags=["rates"])

    return app


app = create_app()
