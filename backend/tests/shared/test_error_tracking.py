"""Tests for shared/error_tracking.py."""

from unittest.mock import patch, MagicMock

from opentelemetry.trace import StatusCode

from shared.error_tracking import capture_exception, get_tracer


class TestCaptureException:
    @patch("shared.error_tracking.trace.get_current_span")
    def test_records_on_current_span(self, mock_get_span):
        span = MagicMock()
        mock_get_span.return_value = span
        error = ValueError("boom")

        capture_exception(error, {"http.route": "/upload"})

        span.record_exception.assert_called_once_with(error, attributes={"http.route": "/upload"})
        status = span.set_status.call_args[0][0]
        assert status.status_code == StatusCode.ERROR
        assert status.description == "ValueError"

    def test_safe_without_sdk(self):
        """With only the API installed the span is a no-op."""
        capture_exception(RuntimeError("no tracer configured"))


class TestGetTracer:
    def test_returns_tracer(self):
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("test-span") as span:
            assert span is not None
