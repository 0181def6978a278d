"""Tests for trace record models."""

from datetime import datetime, timezone

from client_utils.models import TraceMethodCall, TraceMethodError, TraceMethodFinished


class TestTraceMethodCall:
    """Tests for TraceMethodCall model."""

    def test_create_call(self):
        """Test creating a call record."""
        ts = datetime.now(timezone.utc)
        call = TraceMethodCall(start_date_time=ts, arguments=[1, 2, 3])
        assert call.start_date_time == ts
        assert call.arguments == [1, 2, 3]
        assert call.keyword_arguments == {}


class TestTraceMethodFinished:
    """Tests for TraceMethodFinished model."""

    def test_create_finished(self):
        """Test creating a finished record."""
        ts = datetime.now(timezone.utc)
        finished = TraceMethodFinished(
            start_date_time=ts,
            arguments=[1],
            returned=1,
            finished_date_time=ts,
        )
        assert isinstance(finished, TraceMethodCall)
        assert finished.returned == 1
        assert finished.finished_date_time == ts


class TestTraceMethodError:
    """Tests for TraceMethodError model."""

    def test_create_error(self):
        """Test creating an error record."""
        ts = datetime.now(timezone.utc)
        error = ValueError("boom")
        record = TraceMethodError(
            start_date_time=ts,
            arguments=[],
            keyword_arguments={"key": "value"},
            error=error,
            error_date_time=ts,
        )
        assert record.error is error
        assert record.keyword_arguments == {"key": "value"}
