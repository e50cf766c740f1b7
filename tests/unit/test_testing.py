"""Tests for the recording mock transport."""

import pytest

from garoon_rest.errors import ConflictError, ServerError
from garoon_rest.request import FormData
from garoon_rest.testing import MockClient


@pytest.mark.unit
async def test_logs_every_call_in_order():
    mock_client = MockClient()

    await mock_client.get("/api/v1/a", {"limit": 1})
    await mock_client.post("/api/v1/b", {"subject": "x"})
    await mock_client.delete("/api/v1/c", {})

    assert mock_client.get_logs() == [
        {"path": "/api/v1/a", "method": "get", "params": {"limit": 1}},
        {"path": "/api/v1/b", "method": "post", "params": {"subject": "x"}},
        {"path": "/api/v1/c", "method": "delete", "params": {}},
    ]


@pytest.mark.unit
async def test_get_logs_returns_a_copy():
    mock_client = MockClient()
    await mock_client.put("/api/v1/a", {})

    mock_client.get_logs().clear()

    assert len(mock_client.get_logs()) == 1


@pytest.mark.unit
async def test_queued_responses_are_returned_in_order():
    mock_client = MockClient()
    mock_client.mock_response({"id": "1"})
    mock_client.mock_response({"id": "2"})

    assert await mock_client.get("/api/v1/a", {}) == {"id": "1"}
    assert await mock_client.patch("/api/v1/a", {}) == {"id": "2"}
    assert await mock_client.get("/api/v1/a", {}) == {}
    assert await mock_client.get_data("/api/v1/file", {}) == b""


@pytest.mark.unit
async def test_mock_error_calls_handler_once_then_raises():
    seen = []
    mock_client = MockClient(error_response_handler=seen.append)
    mock_client.mock_error(409, {"error": {"errorCode": "GRN_SCHD_13230", "message": "Conflict."}})

    with pytest.raises(ConflictError) as exc_info:
        await mock_client.post("/api/v1/schedule/events", {})

    assert seen == [exc_info.value]
    assert exc_info.value.envelope.status == 409


@pytest.mark.unit
async def test_mock_error_without_handler():
    mock_client = MockClient()
    mock_client.mock_error(500, "boom", status_text="Internal Server Error")

    with pytest.raises(ServerError):
        await mock_client.get("/api/v1/a", {})


@pytest.mark.unit
async def test_descriptors_are_built_with_builder(request_config_builder):
    mock_client = MockClient(request_config_builder=request_config_builder)
    form = FormData()
    form.append("name", "a")

    await mock_client.post_data("/api/v1/upload", form)

    [descriptor] = mock_client.descriptors
    assert descriptor.method == "POST"
    assert descriptor.headers["Content-Type"].startswith("multipart/form-data")
    assert mock_client.get_logs()[0]["params"] is form


@pytest.mark.unit
async def test_failing_handler_does_not_mask_error(caplog):
    def broken_handler(error):
        raise RuntimeError("handler failed")

    mock_client = MockClient(error_response_handler=broken_handler)
    mock_client.mock_error(500, "boom", status_text="Internal Server Error")

    with pytest.raises(ServerError):
        await mock_client.get("/api/v1/a", {})

    assert "Error response handler raised" in caplog.text
