"""Observability helpers.

Request IDs + structlog contextvars, plus an in-memory metrics registry whose
snapshot is served at ``/api/metrics``.
"""
