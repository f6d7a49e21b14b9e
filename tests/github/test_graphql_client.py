from __future__ import annotations

import json

import httpx
import pytest

from mergedprs.exceptions import RequestError, ResponseShapeError
from mergedprs.github.client import GitHubGraphQLClient
from tests.fakes.http import json_transport


@pytest.mark.asyncio
async def test_execute_posts_query_with_bearer_token() -> None:
    requests: list[httpx.Request] = []
    transport = json_transport({"data": {"ok": True}}, requests=requests)

    async with GitHubGraphQLClient(token="tok_123", transport=transport) as client:
        payload = await client.execute("query { viewer { login } }", {"first": 5})

    assert payload == {"data": {"ok": True}}
    (request,) = requests
    assert request.method == "POST"
    assert str(request.url) == "https://api.github.com/graphql"
    assert request.headers["Authorization"] == "Bearer tok_123"
    assert json.loads(request.content) == {"query": "query { viewer { login } }", "variables": {"first": 5}}


@pytest.mark.asyncio
async def test_execute_uses_custom_url() -> None:
    requests: list[httpx.Request] = []
    transport = json_transport({}, requests=requests)

    async with GitHubGraphQLClient(
        token="tok", url="https://github.example.com/api/graphql", transport=transport
    ) as client:
        await client.execute("query { x }")

    assert str(requests[0].url) == "https://github.example.com/api/graphql"


@pytest.mark.asyncio
async def test_non_success_status_raises_request_error() -> None:
    transport = json_transport({"message": "Bad credentials"}, status_code=401)

    async with GitHubGraphQLClient(token="bad", transport=transport) as client:
        with pytest.raises(RequestError) as exc_info:
            await client.execute("query { x }")

    assert exc_info.value.status_code == 401
    assert exc_info.value.reason == "Unauthorized"
    assert str(exc_info.value) == "GitHub API request failed: 401 Unauthorized"


@pytest.mark.asyncio
async def test_non_json_body_raises_response_shape_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"<html>oops</html>"))

    async with GitHubGraphQLClient(token="tok", transport=transport) as client:
        with pytest.raises(ResponseShapeError, match="non-JSON"):
            await client.execute("query { x }")


@pytest.mark.asyncio
async def test_json_array_body_raises_response_shape_error() -> None:
    async with GitHubGraphQLClient(token="tok", transport=json_transport([1, 2])) as client:
        with pytest.raises(ResponseShapeError, match="Invalid response structure"):
            await client.execute("query { x }")


@pytest.mark.asyncio
async def test_execute_requires_open_client() -> None:
    client = GitHubGraphQLClient(token="tok")

    with pytest.raises(RuntimeError, match="not open"):
        await client.execute("query { x }")
