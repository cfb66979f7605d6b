"""
Unit tests for the failure taxonomy.
"""

import httpx
import pytest

from ironclad_client.errors import (
    CancellationFailure,
    IroncladError,
    RequestFailure,
    SerializationFailure,
)


def _response(status_code: int, text: str = "") -> httpx.Response:
    request = httpx.Request("PUT", "http://ironclad.test/api/clients/app1")
    return httpx.Response(status_code, text=text, request=request)


@pytest.mark.unit
class TestRequestFailure:
    """Tests for RequestFailure."""

    def test_message_names_url_and_reason(self):
        failure = RequestFailure.from_response(_response(503))

        assert str(failure) == "Error connecting to http://ironclad.test/api/clients/app1: Service Unavailable"
        assert failure.status_code == 503
        assert failure.detail is None

    def test_body_is_carried_when_requested(self):
        failure = RequestFailure.from_response(_response(400, "id required"), include_body=True)

        assert failure.detail == "id required"
        assert "Bad Request" in str(failure)
        assert str(failure).endswith(" / id required")

    def test_raw_content_is_always_kept(self):
        failure = RequestFailure.from_response(_response(400, "id required"))

        assert failure.content == b"id required"
        assert "id required" not in str(failure)

    @pytest.mark.parametrize("status_code,expected", [(404, True), (400, False), (500, False)])
    def test_is_not_found(self, status_code, expected):
        assert RequestFailure.from_response(_response(status_code)).is_not_found is expected


@pytest.mark.unit
class TestTaxonomy:
    """The three failure kinds share a base but are distinct."""

    def test_all_failures_share_base_class(self):
        for failure_type in (RequestFailure, CancellationFailure, SerializationFailure):
            assert issubclass(failure_type, IroncladError)

    def test_cancellation_is_not_a_request_failure(self):
        failure = CancellationFailure("http://ironclad.test/api/clients")

        assert not isinstance(failure, RequestFailure)
        assert failure.url == "http://ironclad.test/api/clients"

    def test_serialization_failure_message(self):
        failure = SerializationFailure("http://ironclad.test/api/clients", b"<html>", "invalid JSON")

        assert str(failure) == "Could not decode response from http://ironclad.test/api/clients: invalid JSON"
