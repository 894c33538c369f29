"""Ports: contracts implemented by outer layers."""

from cleanarch.domain.ports.reporter import ReporterProtocol
from cleanarch.domain.ports.source_discovery import SourceDiscoveryPort
from cleanarch.domain.ports.tracer import NullTracer, TracerProtocol

__all__ = [
    "ReporterProtocol",
    "SourceDiscoveryPort",
    "TracerProtocol",
    "NullTracer",
]
