# tests/infrastructure/test_requests_executor.py
import io

import pytest
import requests

from domain.exceptions import AuthError, RemoteAPIError, TransportError
from domain.request import RequestDescriptor
from infrastructure.http.requests_executor import RequestsApiExecutor, split_param


class FakeResponse:
    def __init__(self, status_code=200, text='{"id": "ch_1"}'):
        self.status_code = status_code
        self.text = text
        self.content = text.encode("utf-8")


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.requests = []

    def request(self, **kwargs):
        self.requests.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def _descriptor(method="POST", params=(), version="2019-03-14"):
    return RequestDescriptor(method=method, version=version, params=tuple(params))


class TestRequestsApiExecutor:
    def test_post_sends_form_body_in_order(self, credentials):
        session = FakeSession()
        executor = RequestsApiExecutor(session=session)

        body = executor.execute(
            credentials,
            "/v1/checkout/sessions",
            _descriptor(params=["line_items[][name]=T-shirt", "line_items[][name]=Socks", "success_url=https://x/?a=b"]),
            suppress_output=True,
        )

        assert body == b'{"id": "ch_1"}'
        sent = session.requests[0]
        assert sent["method"] == "POST"
        assert sent["url"] == "https://api.example.test/v1/checkout/sessions"
        assert sent["data"] == [
            ("line_items[][name]", "T-shirt"),
            ("line_items[][name]", "Socks"),
            ("success_url", "https://x/?a=b"),
        ]
        assert "params" not in sent
        assert sent["timeout"] == 30

    def test_headers_carry_key_and_version(self, credentials):
        session = FakeSession()

        RequestsApiExecutor(session=session).execute(credentials, "/v1/charges", _descriptor(), suppress_output=True)

        headers = session.requests[0]["headers"]
        assert headers["Authorization"] == "Bearer sk_test_123456"
        assert headers["Stripe-Version"] == "2019-03-14"

    def test_no_version_header_when_unset(self, credentials):
        session = FakeSession()

        RequestsApiExecutor(session=session).execute(credentials, "/v1/charges", _descriptor(version=""), suppress_output=True)

        assert "Stripe-Version" not in session.requests[0]["headers"]

    @pytest.mark.parametrize("method", ["GET", "DELETE"])
    def test_query_methods_send_params(self, credentials, method):
        session = FakeSession()

        RequestsApiExecutor(session=session).execute(
            credentials, "/v1/webhook_endpoints", _descriptor(method=method, params=["limit=30"]), suppress_output=True
        )

        sent = session.requests[0]
        assert sent["method"] == method
        assert sent["params"] == [("limit", "30")]
        assert "data" not in sent

    def test_no_params_sends_none(self, credentials):
        session = FakeSession()

        RequestsApiExecutor(session=session).execute(credentials, "/v1/customers", _descriptor(), suppress_output=True)

        assert session.requests[0]["data"] is None

    def test_prints_body_unless_suppressed(self, credentials):
        out = io.StringIO()
        executor = RequestsApiExecutor(session=FakeSession(), out=out)

        executor.execute(credentials, "/v1/charges", _descriptor(), suppress_output=True)
        assert out.getvalue() == ""

        executor.execute(credentials, "/v1/charges", _descriptor())
        assert out.getvalue() == '{"id": "ch_1"}\n'

    def test_transport_failure(self, credentials):
        session = FakeSession(error=requests.ConnectionError("connection refused"))

        with pytest.raises(TransportError, match="connection refused"):
            RequestsApiExecutor(session=session).execute(credentials, "/v1/charges", _descriptor())

    def test_timeout_is_transport_failure(self, credentials):
        session = FakeSession(error=requests.Timeout("read timed out"))

        with pytest.raises(TransportError):
            RequestsApiExecutor(timeout_sec=1, session=session).execute(credentials, "/v1/charges", _descriptor())

    def test_unauthorized(self, credentials):
        session = FakeSession(response=FakeResponse(401, '{"error": {"message": "Invalid API Key provided"}}'))

        with pytest.raises(AuthError, match="status=401"):
            RequestsApiExecutor(session=session).execute(credentials, "/v1/charges", _descriptor())

    @pytest.mark.parametrize("status", [400, 402, 404, 500])
    def test_non_success_status(self, credentials, status):
        body = '{"error": {"type": "card_error"}}'
        session = FakeSession(response=FakeResponse(status, body))

        with pytest.raises(RemoteAPIError) as exc_info:
            RequestsApiExecutor(session=session).execute(credentials, "/v1/charges", _descriptor(), suppress_output=True)

        assert exc_info.value.status == status
        assert exc_info.value.body == body


@pytest.mark.parametrize(
    "param,expected",
    [
        ("amount=2000", ("amount", "2000")),
        ("success_url=https://x/?a=b", ("success_url", "https://x/?a=b")),
        ("metadata[foo]=", ("metadata[foo]", "")),
    ],
)
def test_split_param(param, expected):
    assert split_param(param) == expected
