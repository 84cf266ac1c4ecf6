"""Tests for the Lambda remote invocation adapter."""

from __future__ import annotations

import io
import json
from typing import Any

import pytest
from botocore.exceptions import ClientError

from statuspage_monitor.adapters import LambdaRemoteInvoker, RemoteInvocationError


class _LambdaClientStub:
    """boto3 Lambda client double returning a canned invoke response."""

    def __init__(self, response: dict[str, Any] | None = None, error: Exception | None = None):
        self.calls: list[dict[str, Any]] = []
        self._response = response or {"StatusCode": 200, "Payload": io.BytesIO(b'{"statusCode": 200}')}
        self._error = error

    def invoke(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        return self._response


def test_adapters_lambda_invoker_sends_json_payload() -> None:
    """Invoke the named function with a JSON-encoded payload.

    Returns:
        None: Assertions validate invoke arguments and decoded result.

    Raises:
        AssertionError: Raised when invoke arguments are malformed.
    """

    client = _LambdaClientStub()
    invoker = LambdaRemoteInvoker(function_name="status-page-update-dev-http", client=client)

    result = invoker.invoker_invoke({"body": {"status": 1, "componentIds": "a,b"}})

    call = client.calls[0]
    assert call["FunctionName"] == "status-page-update-dev-http"
    assert call["InvocationType"] == "RequestResponse"
    assert json.loads(call["Payload"]) == {"body": {"status": 1, "componentIds": "a,b"}}
    assert result.status_code == 200
    assert result.payload == {"statusCode": 200}
    assert result.function_error is None


def test_adapters_lambda_invoker_reports_function_error() -> None:
    """Surface the platform function error marker without raising."""

    client = _LambdaClientStub(
        response={"StatusCode": 200, "FunctionError": "Unhandled", "Payload": io.BytesIO(b"not json")}
    )
    invoker = LambdaRemoteInvoker(function_name="fn", client=client)

    result = invoker.invoker_invoke({"body": {}})

    assert result.function_error == "Unhandled"
    assert result.payload == "not json"


def test_adapters_lambda_invoker_wraps_client_errors() -> None:
    """Raise RemoteInvocationError when the AWS call fails."""

    client = _LambdaClientStub(
        error=ClientError({"Error": {"Code": "ResourceNotFoundException", "Message": "missing"}}, "Invoke")
    )
    invoker = LambdaRemoteInvoker(function_name="fn", client=client)

    with pytest.raises(RemoteInvocationError, match="function=fn"):
        invoker.invoker_invoke({"body": {}})


def test_adapters_lambda_invoker_validates_configuration() -> None:
    """Reject blank function names and unknown invocation types."""

    with pytest.raises(ValueError, match="function_name"):
        LambdaRemoteInvoker(function_name=" ", client=_LambdaClientStub())
    with pytest.raises(ValueError, match="invocation_type"):
        LambdaRemoteInvoker(function_name="fn", invocation_type="Async", client=_LambdaClientStub())
