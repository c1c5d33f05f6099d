from __future__ import annotations

from fastapi import FastAPI

from demo_admin.api.metrics import router as metrics_router
from demo_admin.api.products import router as products_router
from demo_admin.api.users import router as users_router
from demo_admin.config import Settings, get_settings
from demo_admin.models.schemas import HealthResponse, Product, User
from demo_admin.observability.instrumentation import MetricsObserver
from demo_admin.observability.logging import configure_logging
from demo_admin.observability.metrics import InMemoryMetrics
from demo_admin.observability.middleware import RequestContextMiddleware
from demo_admin.repositories.memory import InMemoryRepository
from demo_admin.services import aggregates
from demo_admin.services.entity_service import EntityService
from demo_admin.services.seed import seed_demo_data

OPENAPI_TAGS = [
    {"name": "Products", "description": "Manage the product catalog"},
    {"name": "Users", "description": "Manage users"},
    {"name": "metrics", "description": "In-memory metrics snapshot"},
]


def _register_gauges(metrics: InMemoryMetrics, products: InMemoryRepository[Product], users: InMemoryRepository[User]) -> None:
    metrics.register_gauge("products_total", products.count)
    metrics.register_gauge("products_total_quantity", lambda: aggregates.total_quantity(products.list_all()))
    metrics.register_gauge("products_total_value", lambda: aggregates.total_value(products.list_all()))
    metrics.register_gauge("users_total", users.count)
    metrics.register_gauge("users_average_age", lambda: aggregates.average_age(users.list_all()))


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    metrics = InMemoryMetrics()
    observer = MetricsObserver(metrics)
    product_repository: InMemoryRepository[Product] = InMemoryRepository()
    user_repository: InMemoryRepository[User] = InMemoryRepository()
    product_service = EntityService("products", product_repository, observer)
    user_service = EntityService("users", user_repository, observer)

    _register_gauges(metrics, product_repository, user_repository)
    if settings.seed_demo_data:
        seed_demo_data(product_service, user_service)

    app = FastAPI(title=settings.app_title, version="0.1.0", openapi_tags=OPENAPI_TAGS)
    app.state.settings = settings
    app.state.metrics = metrics
    app.state.product_service = product_service
    app.state.user_service = user_service

    app.include_router(products_router, prefix=settings.api_prefix)
    app.include_router(users_router, prefix=settings.api_prefix)
    app.include_router(metrics_router, prefix=settings.api_prefix)
    app.add_middleware(
        RequestContextMiddleware,
        metrics=metrics,
        excluded_metric_paths=(f"{settings.api_prefix}/metrics",),
    )

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    return app


app = create_app()
