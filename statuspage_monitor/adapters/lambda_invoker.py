"""AWS Lambda adapter for the remote status-update function."""

from __future__ import annotations

import json
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .errors import RemoteInvocationError
from .interfaces import RemoteInvocationResult, RemoteInvokerPort


class LambdaRemoteInvoker(RemoteInvokerPort):
    """Invoke a named Lambda function with a JSON payload."""

    _INVOCATION_TYPES = frozenset({"RequestResponse", "Event", "DryRun"})

    def __init__(
        self,
        function_name: str,
        region_name: str = "us-west-2",
        invocation_type: str = "RequestResponse",
        client: Any = None,
    ):
        """Initialize the Lambda adapter.

        Args:
            function_name: Target Lambda function name.
            region_name: AWS region hosting the function.
            invocation_type: Lambda invocation type.
            client: Optional preconfigured boto3 Lambda client.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        normalized_function_name = function_name.strip()
        if not normalized_function_name:
            raise ValueError("function_name must not be blank")
        if invocation_type not in self._INVOCATION_TYPES:
            raise ValueError(f"unsupported invocation_type={invocation_type}")

        self._function_name = normalized_function_name
        self._invocation_type = invocation_type
        self._client = client or boto3.client("lambda", region_name=region_name)

    @property
    def function_name(self) -> str:
        return self._function_name

    def invoker_invoke(self, payload: dict[str, Any]) -> RemoteInvocationResult:
        """Invoke the configured function.

        Args:
            payload: JSON-serializable payload.

        Returns:
            RemoteInvocationResult: Status code, decoded payload and function error marker.

        Raises:
            RemoteInvocationError: Raised when the AWS call fails.
        """

        try:
            response = self._client.invoke(
                FunctionName=self._function_name,
                InvocationType=self._invocation_type,
                Payload=json.dumps(payload),
            )
        except (BotoCoreError, ClientError) as error:
            raise RemoteInvocationError(f"Lambda invocation failed for function={self._function_name}: {error}") from error

        return RemoteInvocationResult(
            status_code=int(response.get("StatusCode", 0)),
            payload=self._invoker_decode_payload(response.get("Payload")),
            function_error=response.get("FunctionError"),
        )

    def _invoker_decode_payload(self, raw_payload: Any) -> Any:
        if raw_payload is None:
            return None
        if hasattr(raw_payload, "read"):
            raw_payload = raw_payload.read()
        if isinstance(raw_payload, (bytes, bytearray)):
            raw_payload = bytes(raw_payload).decode("utf-8", errors="replace")
        if not isinstance(raw_payload, str):
            return raw_payload
        if not raw_payload.strip():
            return None
        try:
            return json.loads(raw_payload)
        except json.JSONDecodeError:
            return raw_payload
