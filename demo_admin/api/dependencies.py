from __future__ import annotations

from fastapi import Request

from demo_admin.config import Settings
from demo_admin.models.schemas import Product, User
from demo_admin.observability.metrics import InMemoryMetrics
from demo_admin.services.entity_service import EntityService


def get_product_service(request: Request) -> EntityService[Product]:
    return request.app.state.product_service


def get_user_service(request: Request) -> EntityService[User]:
    return request.app.state.user_service


def get_app_metrics(request: Request) -> InMemoryMetrics:
    return request.app.state.metrics


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
