from decimal import Decimal

from demo_admin.config import get_settings
from demo_admin.main import create_app
from demo_admin.observability.metrics import InMemoryMetrics


async def test_metrics_endpoint_returns_snapshot_and_counts_requests(api_client) -> None:
    m1 = await api_client.get("/api/metrics")
    assert m1.status_code == 200
    payload1 = m1.json()
    assert "counters" in payload1
    assert "gauges" in payload1
    assert "latency_ms" in payload1

    # /api/metrics itself should NOT affect http_requests_total.
    m1b = await api_client.get("/api/metrics")
    assert m1b.json()["counters"]["http_requests_total"] == payload1["counters"]["http_requests_total"]

    health = await api_client.get("/health")
    assert health.status_code == 200

    m2 = await api_client.get("/api/metrics")
    payload2 = m2.json()
    assert payload2["counters"]["http_requests_total"] == payload1["counters"]["http_requests_total"] + 1


async def test_crud_operations_are_counted(api_client) -> None:
    await api_client.post("/api/products", json={"name": "Laptop", "price": 10.00, "quantity": 3})
    await api_client.post("/api/products", json={"name": "Cable", "price": 2.50, "quantity": 4})
    await api_client.put("/api/products/2", json={"name": "Cable", "price": 2.50, "quantity": 4})
    await api_client.get("/api/products")
    await api_client.get("/api/products/1")
    await api_client.get("/api/products/99")
    await api_client.delete("/api/products/1")

    payload = (await api_client.get("/api/metrics")).json()
    counters = payload["counters"]
    assert counters["products_created_total"] == 2
    assert counters["products_updated_total"] == 1
    assert counters["products_views_total"] == 3
    assert counters["products_deleted_total"] == 1
    assert payload["latency_ms"]["products_operation_duration"]["count"] == 7


async def test_gauges_follow_current_state(api_client) -> None:
    await api_client.post("/api/products", json={"price": 10.00, "quantity": 3})
    await api_client.post("/api/products", json={"price": 2.50, "quantity": 4})
    await api_client.post("/api/users", json={"name": "John", "age": 30})
    await api_client.post("/api/users", json={"name": "Jane", "age": 25})

    gauges = (await api_client.get("/api/metrics")).json()["gauges"]
    assert gauges["products_total"] == 2
    assert gauges["products_total_quantity"] == 7
    assert gauges["products_total_value"] == 40.0
    assert gauges["users_total"] == 2
    assert gauges["users_average_age"] == 27.5

    await api_client.delete("/api/users/1")
    await api_client.delete("/api/users/2")

    gauges = (await api_client.get("/api/metrics")).json()["gauges"]
    assert gauges["users_total"] == 0
    assert gauges["users_average_age"] == 0


async def test_seeded_app_counts_seed_records(seeded_client) -> None:
    payload = (await seeded_client.get("/api/metrics")).json()
    assert payload["counters"]["products_created_total"] == 2
    assert payload["counters"]["users_created_total"] == 2
    assert payload["gauges"]["products_total_quantity"] == 150


async def test_metrics_endpoint_can_be_disabled(monkeypatch) -> None:
    from httpx import ASGITransport, AsyncClient

    monkeypatch.setenv("ENABLE_METRICS_ENDPOINT", "false")
    get_settings.cache_clear()
    app = create_app()

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        resp = await client.get("/api/metrics")
        assert resp.status_code == 404
        assert (await client.get("/api/products")).status_code == 200


def test_in_memory_metrics_gauges_are_pulled_on_snapshot() -> None:
    metrics = InMemoryMetrics()
    state = {"value": Decimal("1.5")}
    metrics.register_gauge("custom", lambda: state["value"])

    assert metrics.snapshot()["gauges"]["custom"] == 1.5
    state["value"] = Decimal("4")
    assert metrics.snapshot()["gauges"]["custom"] == 4.0


def test_in_memory_metrics_reset_keeps_gauges() -> None:
    metrics = InMemoryMetrics()
    metrics.increment("a_total", 3)
    metrics.observe("op", 2.0)
    metrics.register_gauge("g", lambda: 1)

    metrics.reset()

    snapshot = metrics.snapshot()
    assert snapshot["counters"] == {"http_requests_total": 0}
    assert snapshot["latency_ms"] == {}
    assert snapshot["gauges"] == {"g": 1.0}
