"""Test configuration and fixtures."""

import json
from collections.abc import Iterator

import httpx
import pytest

from ado_backlog.config import DevOpsConfig

PROJECT_URL = "https://dev.azure.com/testorg/testproject"


class EchoServer:
    """Mock work item endpoint that assigns incrementing ids.

    Every POST is recorded. Set ``fail_on`` to a title to make the request
    creating it return HTTP 400.
    """

    def __init__(self, start_id: int = 1) -> None:
        self.next_id = start_id
        self.requests: list[httpx.Request] = []
        self.fail_on: str | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        operations = json.loads(request.content)
        fields = {
            op["path"].removeprefix("/fields/"): op["value"]
            for op in operations
            if op["path"].startswith("/fields/")
        }
        if fields.get("System.Title") == self.fail_on:
            return httpx.Response(400, json={"message": "TF401320: Rule error"})

        work_item_id = self.next_id
        self.next_id += 1
        return httpx.Response(
            200,
            json={
                "id": work_item_id,
                "rev": 1,
                "fields": fields,
                "url": f"{PROJECT_URL}/_apis/wit/workItems/{work_item_id}",
            },
        )

    def bodies(self) -> list[list[dict]]:
        return [json.loads(request.content) for request in self.requests]

    def titles(self) -> list[str]:
        return [
            next(op["value"] for op in body if op["path"] == "/fields/System.Title")
            for body in self.bodies()
        ]


@pytest.fixture
def config() -> DevOpsConfig:
    """Configuration with test credentials and no delay."""
    return DevOpsConfig(
        organization="testorg",
        project="testproject",
        token="test_pat",
        delay=0,
    )


@pytest.fixture
def echo_server() -> EchoServer:
    """Provide a fresh echo server."""
    return EchoServer()


@pytest.fixture
def http_client(echo_server: EchoServer) -> Iterator[httpx.Client]:
    """httpx client routed to the echo server."""
    client = httpx.Client(transport=httpx.MockTransport(echo_server.handler))
    yield client
    client.close()
