"""
Utility modules for table inspection

Provides:
- logging: structured/console logging setup
- metrics: Prometheus metric registration helpers
- tracing: OpenTelemetry span helpers
"""

__version__ = "1.0.0"
__all__ = ["logging", "metrics", "tracing"]
