from unittest.mock import MagicMock

import requests

from apps.bugtracker.client import BugReportClient
from apps.bugtracker.results import Created, Fault, ValidationFailed


def _response(status, body=None, content=b"x", reason=""):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status
    resp.reason = reason
    resp.content = content
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


def _client(resp=None, exc=None, **kwargs):
    session = MagicMock()
    if exc is not None:
        session.post.side_effect = exc
    else:
        session.post.return_value = resp
    return BugReportClient("http://bugs.local/", session=session, **kwargs), session


def test_posts_json_with_contract_headers():
    client, session = _client(_response(201, {"message": "Bug reported successfully!", "bug_report": {"id": 1}}))

    client.submit({"title": "Test bug title", "description": "Test description", "severity": "high"})

    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args == ("http://bugs.local/api/bug-reports",)
    assert kwargs["json"] == {"title": "Test bug title", "description": "Test description", "severity": "high"}
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["headers"]["X-Requested-With"] == "XMLHttpRequest"
    assert "Authorization" not in kwargs["headers"]


def test_bearer_token_is_sent_when_given():
    client, session = _client(_response(201, {}), token="abc")
    client.submit({"title": "x"})
    assert session.post.call_args.kwargs["headers"]["Authorization"] == "Bearer abc"


def test_201_maps_to_created():
    record = {"id": 3, "title": "t", "description": "", "severity": "medium"}
    client, _ = _client(_response(201, {"message": "Bug reported successfully!", "bug_report": record}))

    result = client.submit({"title": "t"})

    assert result == Created(record=record, message="Bug reported successfully!")


def test_2xx_with_empty_body_is_still_created():
    client, _ = _client(_response(200, None, content=b""))
    assert isinstance(client.submit({"title": "t"}), Created)


def test_422_with_errors_maps_to_validation_failed():
    body = {
        "message": "The given data was invalid.",
        "errors": {"title": ["The title must not be greater than 100 characters."]},
    }
    client, _ = _client(_response(422, body))

    result = client.submit({"title": "A" * 101})

    assert isinstance(result, ValidationFailed)
    assert result.errors == {"title": ["The title must not be greater than 100 characters."]}


def test_422_string_errors_are_wrapped_in_lists():
    client, _ = _client(_response(422, {"errors": {"title": "Too long"}}))
    assert client.submit({"title": "x"}).errors == {"title": ["Too long"]}


def test_422_without_errors_is_a_fault():
    client, _ = _client(_response(422, {"message": "nope"}))
    result = client.submit({"title": "x"})
    assert result == Fault(reason="nope", status=422)


def test_500_is_a_fault_even_with_errors_key():
    client, _ = _client(_response(500, {"message": "Server Error", "errors": {"title": ["x"]}}))
    result = client.submit({"title": "x"})
    assert isinstance(result, Fault)
    assert result.status == 500


def test_unparsable_body_is_a_fault():
    client, _ = _client(_response(502, ValueError("not json"), reason="Bad Gateway"))
    assert client.submit({"title": "x"}) == Fault(reason="Bad Gateway", status=502)


def test_transport_error_is_a_fault():
    client, _ = _client(exc=requests.ConnectionError("refused"))
    result = client.submit({"title": "x"})
    assert isinstance(result, Fault)
    assert result.status is None
    assert "refused" in result.reason


def test_from_settings_uses_configured_base_url(settings):
    settings.BUG_REPORT_API_URL = "https://bugs.example.com"
    assert BugReportClient.from_settings().url == "https://bugs.example.com/api/bug-reports"
