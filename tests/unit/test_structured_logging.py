"""Tests for structured pass logging."""

import logging

import pytest

from tripcal.budget.rollup import roll_up_budget
from tripcal.projection.projector import project
from tripcal.utils.logging import StructuredPassLogger


def test_log_pass_info(caplog: pytest.LogCaptureFixture) -> None:
    """Test a clean pass logs at INFO with structured data."""
    with caplog.at_level(logging.INFO, logger="tripcal.utils.logging"):
        StructuredPassLogger().log_pass("project", inputs=4, outputs=3, latency_ms=1.23456, trips=2)

    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert record.getMessage() == "Pass complete: project - 4 in, 3 out"
    assert record.structured == {
        "stage": "project",
        "inputs": 4,
        "outputs": 3,
        "skipped": 0,
        "latency_ms": 1.23,
        "trips": 2,
    }


def test_log_pass_warns_on_skips(caplog: pytest.LogCaptureFixture) -> None:
    """Test that skipped inputs raise the level to WARNING."""
    with caplog.at_level(logging.INFO, logger="tripcal.utils.logging"):
        StructuredPassLogger().log_pass("project", inputs=4, outputs=3, latency_ms=0.5, skipped=1)

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.getMessage().endswith("1 skipped")


def test_projection_logs_pass(caplog: pytest.LogCaptureFixture) -> None:
    """Test the projector reports segment and day counts."""
    document = {
        "trips": [
            {
                "name": "A",
                "segments": [
                    {"id": "m", "type": "meal", "date": "2026-02-01"},
                    {"id": "bad", "type": "meal", "date": "2026-02-03", "dateEnd": "2026-02-01"},
                ],
            }
        ]
    }

    with caplog.at_level(logging.DEBUG, logger="tripcal"):
        project(document)

    passes = [r for r in caplog.records if hasattr(r, "structured")]
    assert passes[-1].structured["stage"] == "project"
    assert passes[-1].structured["inputs"] == 2
    assert passes[-1].structured["outputs"] == 1
    assert passes[-1].structured["skipped"] == 1
    assert any("bad has an empty span" in r.getMessage() for r in caplog.records)


def test_over_cap_span_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Test an over-long span is reported, not silently dropped."""
    document = {"trips": [{"name": "A", "segments": [{"id": "s", "type": "stay", "date": "2026-01-01", "dateEnd": "2027-06-01"}]}]}

    with caplog.at_level(logging.WARNING, logger="tripcal"):
        assert project(document) == []

    assert any("over the 365-day cap" in r.getMessage() for r in caplog.records)


def test_budget_logs_pass(caplog: pytest.LogCaptureFixture) -> None:
    """Test the roll-up reports its currency."""
    with caplog.at_level(logging.INFO, logger="tripcal"):
        roll_up_budget([])

    passes = [r for r in caplog.records if hasattr(r, "structured")]
    assert passes[-1].structured["stage"] == "budget"
    assert passes[-1].structured["currency"] == "USD"
