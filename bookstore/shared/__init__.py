# bookstore/shared/__init__.py
"""
Shared utilities package.

Cross-cutting concerns used by both the core use cases and the adapters:
configuration, structured logging, tracing and dependency injection wiring.
"""
