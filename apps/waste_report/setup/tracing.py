"""OpenTelemetry Distributed Tracing Configuration.

분산 트레이싱 설정:
- FastAPI 자동 계측 (HTTP 요청/응답)
- Redis 자동 계측 (알림 Streams 발행)

Architecture:
  Waste Report API (OTel SDK) -> OTLP/HTTP (4318) -> Jaeger Collector
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from waste_report.setup.config import Settings

logger = logging.getLogger(__name__)

_tracer_provider: TracerProvider | None = None


def configure_tracing(settings: Settings) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Returns:
        bool: 설정 여부
    """
    global _tracer_provider

    if not settings.otel_enabled:
        logger.info("tracing_disabled")
        return False
    if _tracer_provider is not None:
        return True

    resource = Resource.create(
        {
            "service.name": settings.service_name,
            "service.version": settings.service_version,
            "deployment.environment": settings.environment,
        }
    )
    _tracer_provider = TracerProvider(
        resource=resource,
        sampler=TraceIdRatioBased(settings.otel_sampling_rate),
    )
    exporter = OTLPSpanExporter(
        endpoint=f"{settings.otel_exporter_otlp_endpoint.rstrip('/')}/v1/traces",
    )
    _tracer_provider.add_span_processor(
        BatchSpanProcessor(
            exporter,
            max_queue_size=2048,
            max_export_batch_size=512,
            schedule_delay_millis=1000,
        )
    )
    trace.set_tracer_provider(_tracer_provider)
    RedisInstrumentor().instrument()

    logger.info(
        "tracing_configured",
        extra={
            "endpoint": settings.otel_exporter_otlp_endpoint,
            "sampling_rate": settings.otel_sampling_rate,
        },
    )
    return True


def instrument_fastapi(app: FastAPI, settings: Settings) -> None:
    """FastAPI 자동 계측."""
    if not settings.otel_enabled:
        return
    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ready")


def shutdown_tracing() -> None:
    """트레이싱 종료 (남은 span flush)."""
    global _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
        logger.info("tracing_shutdown")
