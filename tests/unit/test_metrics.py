"""
Unit tests for src/utils/metrics and the inspection metrics it registers.
"""

import pytest
from prometheus_client import REGISTRY, CollectorRegistry, Counter

from inspection.compare import diff_tables
from inspection.quality import analyze_data_quality
from utils.metrics import get_or_create_metric


def sample(name, labels=None):
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestGetOrCreateMetric:
    """Test get_or_create_metric"""

    def test_creates_metric(self):
        registry = CollectorRegistry()

        counter = get_or_create_metric(
            lambda: Counter("widgets_total", "Widgets", registry=registry),
            "widgets",
            registry=registry,
        )

        counter.inc()
        assert registry.get_sample_value("widgets_total") == 1.0

    def test_returns_existing_metric(self):
        registry = CollectorRegistry()
        factory = lambda: Counter("widgets_total", "Widgets", registry=registry)  # noqa: E731

        first = get_or_create_metric(factory, "widgets", registry=registry)
        second = get_or_create_metric(factory, "widgets", registry=registry)

        assert first is second

    def test_reraises_when_nothing_registered(self):
        registry = CollectorRegistry()

        def factory():
            raise ValueError("bad metric")

        with pytest.raises(ValueError, match="bad metric"):
            get_or_create_metric(factory, "missing", registry=registry)


class TestInspectionMetrics:
    """Test counters updated by analysis and diffing"""

    def test_analysis_counters(self):
        before_runs = sample("inspection_analyses_total")
        before_rows = sample("inspection_duplicate_groups_total", {"kind": "row"})
        before_identity = sample("inspection_duplicate_groups_total", {"kind": "identity"})

        analyze_data_quality([{"Oid": "A"}, {"Oid": "a"}], ["Oid"])

        assert sample("inspection_analyses_total") == before_runs + 1
        assert sample("inspection_duplicate_groups_total", {"kind": "row"}) == before_rows + 1
        assert sample("inspection_duplicate_groups_total", {"kind": "identity"}) == before_identity + 1

    def test_row_comparison_counters(self):
        before_same = sample("inspection_row_comparisons_total", {"status": "same"})
        before_right = sample("inspection_row_comparisons_total", {"status": "right-only"})

        diff_tables([{"a": 1}], [{"a": 1}, {"a": 2}], ["a"])

        assert sample("inspection_row_comparisons_total", {"status": "same"}) == before_same + 1
        assert sample("inspection_row_comparisons_total", {"status": "right-only"}) == before_right + 1
