"""Unit tests for CloudWatch log pagination."""

from unittest.mock import Mock, patch

from botocore.exceptions import ClientError

from elsa_data_cli.logs.fetcher import iter_log_events
from elsa_data_cli.models import LogLocation
from helpers import log_page

LOCATION = LogLocation(logGroupName="/aws/ecs/elsa-data", logStreamName="command/1")


def make_client(*pages):
    client = Mock()
    client.get_log_events.side_effect = list(pages)
    return client


class TestIterLogEvents:
    """Test iter_log_events."""

    def test_events_in_order_across_pages(self):
        """Test events from all pages are yielded oldest first."""
        client = make_client(
            log_page(["a", "b"], "f/1"),
            log_page(["c"], "f/2"),
            log_page([], "f/2"),
        )

        events = list(iter_log_events(client, LOCATION))

        assert [e.message for e in events] == ["a", "b", "c"]
        assert client.get_log_events.call_count == 3

    def test_request_parameters(self):
        """Test the stream is read from the head in pages of five."""
        client = make_client(log_page(["a"], "f/1"), log_page([], "f/1"))

        list(iter_log_events(client, LOCATION))

        first, second = client.get_log_events.call_args_list
        assert first.kwargs == {
            "logGroupName": "/aws/ecs/elsa-data",
            "logStreamName": "command/1",
            "startFromHead": True,
            "limit": 5,
        }
        assert second.kwargs["nextToken"] == "f/1"

    def test_custom_page_size(self):
        """Test the page size is passed through."""
        client = make_client(log_page([], "f/0"), log_page([], "f/0"))

        list(iter_log_events(client, LOCATION, page_size=50))

        assert client.get_log_events.call_args.kwargs["limit"] == 50

    def test_stops_on_duplicate_token(self):
        """Test a repeated forward token ends the iteration."""
        client = Mock()
        client.get_log_events.return_value = log_page(["same"], "f/1")

        events = list(iter_log_events(client, LOCATION))

        # first page introduces f/1, second page repeats it
        assert client.get_log_events.call_count == 2
        assert [e.message for e in events] == ["same", "same"]

    def test_stops_without_token(self):
        """Test a page without a forward token ends the iteration."""
        client = make_client({"events": [{"message": "only", "timestamp": 1}]})

        events = list(iter_log_events(client, LOCATION))

        assert [e.message for e in events] == ["only"]
        assert client.get_log_events.call_count == 1

    def test_event_fields(self):
        """Test message and timestamp are carried over."""
        client = make_client(log_page(["x"], "f/1", start=42), log_page([], "f/1"))

        (event,) = list(iter_log_events(client, LOCATION))

        assert event.message == "x"
        assert event.timestamp == 42

    def test_lazy(self):
        """Test nothing is fetched until events are consumed."""
        client = make_client(log_page(["a"], "f/1"), log_page([], "f/1"))

        events = iter_log_events(client, LOCATION)
        assert client.get_log_events.call_count == 0

        assert next(events).message == "a"
        assert client.get_log_events.call_count == 1

    def test_page_error_keeps_earlier_events(self):
        """Test a failing page is logged and ends iteration without raising."""
        error = ClientError(
            {"Error": {"Code": "ThrottlingException", "Message": "Rate exceeded"}},
            "GetLogEvents",
        )
        client = make_client(log_page(["a", "b"], "f/1"), error)

        with patch("elsa_data_cli.logs.fetcher.logger") as mock_logger:
            events = list(iter_log_events(client, LOCATION))

        assert [e.message for e in events] == ["a", "b"]
        assert client.get_log_events.call_count == 2
        mock_logger.error.assert_called_once()
        assert "Rate exceeded" in mock_logger.error.call_args.args[0]

    def test_first_page_error(self):
        """Test a failure on the first page yields nothing."""
        error = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "missing"}},
            "GetLogEvents",
        )
        client = make_client(error)

        with patch("elsa_data_cli.logs.fetcher.logger"):
            assert list(iter_log_events(client, LOCATION)) == []
