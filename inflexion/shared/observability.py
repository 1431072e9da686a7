# inflexion/shared/observability.py
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

from inflexion.shared.config import settings


def setup_observability(export_to_console: bool = False) -> TracerProvider:
    """
    Configures OpenTelemetry for the process.

    1. Sets the global tracer provider, tagged with the service name.
    2. Optionally prints finished spans to the console (used by `--trace`).

    Without this call the API's no-op provider is used and spans cost nothing.
    """
    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME or settings.APP_NAME,
        "service.environment": settings.APP_ENV.value,
    })

    provider = TracerProvider(resource=resource)

    if export_to_console or settings.DEBUG:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    return provider


def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("compile_template"):
            ...
    """
    return trace.get_tracer(name)
