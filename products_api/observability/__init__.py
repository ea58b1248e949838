"""Lightweight observability helpers.

Request IDs + structlog contextvars, rendered as JSON on stdout.
"""
