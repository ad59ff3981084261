"""
OpenTelemetry tracing configuration.

Provides:
- Tracer provider setup with optional OTLP / console export
- Auto-instrumentation for FastAPI and SQLAlchemy
"""

from typing import Any

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from src.platform.config.core_setting import settings


class TracingConfig:
    """
    Usage:
        # Initialize once at app startup
        tracing = TracingConfig(service_name='auditorium-booking')
        tracing.setup()
    """

    def __init__(
        self,
        *,
        service_name: str,
        otlp_endpoint: str | None = None,
        enable_console: bool | None = None,
    ) -> None:
        self.service_name = service_name
        self.otlp_endpoint = otlp_endpoint or settings.OTEL_EXPORTER_OTLP_ENDPOINT
        self.enable_console = (
            settings.OTEL_CONSOLE_EXPORT if enable_console is None else enable_console
        )
        self._provider: TracerProvider | None = None

    def setup(self) -> None:
        """Install the SDK tracer provider. Without an exporter spans are recorded and dropped."""
        resource = Resource(attributes={SERVICE_NAME: self.service_name})
        self._provider = TracerProvider(resource=resource)

        if self.otlp_endpoint:
            self._provider.add_span_processor(
                BatchSpanProcessor(OTLPSpanExporter(endpoint=self.otlp_endpoint))
            )
        if self.enable_console:
            self._provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

        trace.set_tracer_provider(self._provider)

    def instrument_fastapi(self, *, app: Any, excluded_urls: str = 'health,metrics') -> None:
        FastAPIInstrumentor.instrument_app(app, excluded_urls=excluded_urls)

    def instrument_sqlalchemy(self, *, engine: Any) -> None:
        # AsyncEngine is instrumented through its sync_engine
        SQLAlchemyInstrumentor().instrument(engine=getattr(engine, 'sync_engine', engine))

    def shutdown(self) -> None:
        if self._provider:
            self._provider.shutdown()
