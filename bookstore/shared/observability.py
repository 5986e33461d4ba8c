# bookstore/shared/observability.py
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider

from bookstore.shared.config import settings


def setup_observability(app: FastAPI) -> None:
    """
    Configures OpenTelemetry for the application.

    1. Sets the Global Tracer Provider.
    2. Auto-instruments the FastAPI application to trace all HTTP requests.

    Exporters are left to the deployment (OTEL_* environment variables);
    without one, spans still produce trace ids for the structured logs.
    """
    if not settings.OTEL_ENABLED:
        return

    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "service.environment": settings.APP_ENV.value,
    })
    provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(app, tracer_provider=provider)


def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in Use Cases.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("my_custom_logic"):
            ...
    """
    return trace.get_tracer(name)
