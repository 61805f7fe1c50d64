import json

import httpx
import pytest

from apisuite import ApiHelper

BASE_URL = "https://api.test"


@pytest.fixture
async def helper():
    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        yield ApiHelper(client)


async def test_get_sends_params_and_headers(helper, respx_mock):
    route = respx_mock.get(f"{BASE_URL}/posts", params={"userId": "1"}).mock(
        return_value=httpx.Response(200, json=[])
    )

    response = await helper.get("/posts", params={"userId": 1}, headers={"X-Trace": "abc"})

    assert response.status_code == 200
    sent = route.calls.last.request
    assert sent.headers["X-Trace"] == "abc"
    assert sent.url.params["userId"] == "1"


async def test_post_sends_json_with_default_content_type(helper, respx_mock):
    route = respx_mock.post(f"{BASE_URL}/posts").mock(
        return_value=httpx.Response(201, json={"id": 101})
    )
    payload = {"title": "t", "body": "b", "userId": 1}

    response = await helper.post("/posts", payload)

    assert response.status_code == 201
    sent = route.calls.last.request
    assert sent.headers["Content-Type"] == "application/json"
    assert json.loads(sent.content) == payload


@pytest.mark.parametrize("header_name", ["Content-Type", "content-type"])
async def test_post_caller_content_type_wins(helper, respx_mock, header_name):
    route = respx_mock.post(f"{BASE_URL}/posts").mock(return_value=httpx.Response(201))

    await helper.post(
        "/posts", {"a": 1}, headers={header_name: "application/vnd.api+json", "X-Extra": "1"}
    )

    sent = route.calls.last.request
    assert sent.headers.get_list("Content-Type") == ["application/vnd.api+json"]
    assert sent.headers["X-Extra"] == "1"


async def test_put_merges_headers_and_sends_json(helper, respx_mock):
    route = respx_mock.put(f"{BASE_URL}/posts/1").mock(return_value=httpx.Response(200))

    await helper.put("/posts/1", {"id": 1}, headers={"Authorization": "Bearer t"})

    sent = route.calls.last.request
    assert sent.headers["Content-Type"] == "application/json"
    assert sent.headers["Authorization"] == "Bearer t"
    assert json.loads(sent.content) == {"id": 1}


async def test_delete_returns_transport_response(helper, respx_mock):
    respx_mock.delete(f"{BASE_URL}/posts/1").mock(return_value=httpx.Response(200, json={}))

    response = await helper.delete("/posts/1")

    assert response.status_code == 200


async def test_get_does_not_add_json_content_type(helper, respx_mock):
    route = respx_mock.get(f"{BASE_URL}/users").mock(return_value=httpx.Response(200))

    await helper.get("/users")

    assert "Content-Type" not in route.calls.last.request.headers


async def test_transport_errors_propagate_without_retry(helper, respx_mock):
    route = respx_mock.get(f"{BASE_URL}/posts").mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(httpx.ConnectError, match="refused"):
        await helper.get("/posts")

    assert route.call_count == 1


async def test_error_status_is_returned_not_raised(helper, respx_mock):
    respx_mock.get(f"{BASE_URL}/posts/99999").mock(return_value=httpx.Response(404, json={}))

    response = await helper.get("/posts/99999")

    assert response.status_code == 404
