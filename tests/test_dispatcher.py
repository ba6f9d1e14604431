import base64
import logging
from typing import Any, Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from conftest import SITE_URL, TransportSpy
from wordpress_mcp import Dispatcher, WordPressSettings
from wordpress_mcp.exceptions import (
    InternalToolError,
    InvalidArgumentsError,
    MissingCredentialsError,
    RemoteAPIError,
    TransportError,
    UnknownToolError,
)
from wordpress_mcp.tools import ToolCallRequest

MakeDispatcher = Callable[[TransportSpy, WordPressSettings], Dispatcher]


def _basic_user(request: httpx.Request) -> str:
    token = request.headers["Authorization"].split(" ", 1)[1]
    return base64.b64decode(token).decode().split(":", 1)[0]


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["delete_post", "", "CREATE_POST", "get_post"])
async def test_unknown_tool(make_dispatcher: MakeDispatcher, spy: TransportSpy, env_settings: Any, name: str) -> None:
    dispatcher = make_dispatcher(spy, env_settings)
    with pytest.raises(UnknownToolError):
        await dispatcher.dispatch(ToolCallRequest(name=name, arguments={}))
    assert spy.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("arguments", [{"content": "World"}, {"title": "Hello"}, {}])
async def test_create_post_requires_title_and_content(
    make_dispatcher: MakeDispatcher, spy: TransportSpy, env_settings: Any, arguments: dict
) -> None:
    dispatcher = make_dispatcher(spy, env_settings)
    with pytest.raises(InvalidArgumentsError):
        await dispatcher.dispatch(ToolCallRequest(name="create_post", arguments=arguments))
    assert spy.requests == []


@pytest.mark.asyncio
async def test_update_post_requires_post_id(make_dispatcher: MakeDispatcher, spy: TransportSpy, env_settings: Any) -> None:
    dispatcher = make_dispatcher(spy, env_settings)
    with pytest.raises(InvalidArgumentsError) as exc_info:
        await dispatcher.dispatch(ToolCallRequest(name="update_post", arguments={"title": "New"}))
    assert exc_info.value.fields == ["postId"]
    assert spy.requests == []


@pytest.mark.asyncio
async def test_arguments_are_checked_before_credentials(
    make_dispatcher: MakeDispatcher, spy: TransportSpy, empty_settings: Any
) -> None:
    dispatcher = make_dispatcher(spy, empty_settings)
    with pytest.raises(InvalidArgumentsError):
        await dispatcher.dispatch(ToolCallRequest(name="create_post", arguments={}))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name, arguments",
    [
        ("create_post", {"title": "Hello", "content": "World"}),
        ("get_posts", {}),
        ("update_post", {"postId": 5, "title": "New"}),
    ],
)
async def test_missing_credentials_before_any_network_call(
    make_dispatcher: MakeDispatcher, spy: TransportSpy, empty_settings: Any, name: str, arguments: dict
) -> None:
    dispatcher = make_dispatcher(spy, empty_settings)
    with pytest.raises(MissingCredentialsError):
        await dispatcher.dispatch(ToolCallRequest(name=name, arguments=arguments))
    assert len(spy.requests) == 0


@pytest.mark.asyncio
async def test_call_username_overrides_environment(
    make_dispatcher: MakeDispatcher, spy: TransportSpy, env_settings: Any
) -> None:
    dispatcher = make_dispatcher(spy, env_settings)
    await dispatcher.dispatch(ToolCallRequest(name="get_posts", arguments={"username": "call-user"}))
    assert _basic_user(spy.last) == "call-user"


@pytest.mark.asyncio
async def test_environment_username_used_when_not_supplied(
    make_dispatcher: MakeDispatcher, spy: TransportSpy, env_settings: Any
) -> None:
    dispatcher = make_dispatcher(spy, env_settings)
    await dispatcher.dispatch(ToolCallRequest(name="get_posts", arguments={}))
    assert _basic_user(spy.last) == "env-user"


@pytest.mark.asyncio
async def test_call_site_url_overrides_environment(
    make_dispatcher: MakeDispatcher, spy: TransportSpy, env_settings: Any
) -> None:
    dispatcher = make_dispatcher(spy, env_settings)
    await dispatcher.dispatch(ToolCallRequest(name="get_posts", arguments={"siteUrl": "https://other.example.org"}))
    assert spy.last.url.host == "other.example.org"


@pytest.mark.asyncio
async def test_update_post_sparse_body(make_dispatcher: MakeDispatcher, spy: TransportSpy, env_settings: Any) -> None:
    dispatcher = make_dispatcher(spy, env_settings)
    await dispatcher.dispatch(ToolCallRequest(name="update_post", arguments={"postId": 5, "title": "New"}))

    assert spy.last.method == "POST"
    assert str(spy.last.url) == f"{SITE_URL}/wp-json/wp/v2/posts/5"
    assert spy.last_json() == {"title": "New"}


@pytest.mark.asyncio
async def test_get_posts_default_query(make_dispatcher: MakeDispatcher, spy: TransportSpy, env_settings: Any) -> None:
    dispatcher = make_dispatcher(spy, env_settings)
    await dispatcher.dispatch(ToolCallRequest(name="get_posts", arguments={}))
    assert spy.last.method == "GET"
    assert dict(spy.last.url.params) == {"per_page": "10", "page": "1"}


@pytest.mark.asyncio
async def test_create_post_end_to_end(make_dispatcher: MakeDispatcher, env_settings: Any) -> None:
    payload = {"id": 42, "title": {"rendered": "Hello"}}
    spy = TransportSpy(status_code=201, json_body=payload)
    dispatcher = make_dispatcher(spy, env_settings)

    result = await dispatcher.dispatch(
        ToolCallRequest(name="create_post", arguments={"title": "Hello", "content": "World"})
    )

    assert result == payload
    assert len(spy.requests) == 1
    assert spy.last.method == "POST"
    assert str(spy.last.url) == f"{SITE_URL}/wp-json/wp/v2/posts"
    assert spy.last_json() == {"title": "Hello", "content": "World", "status": "draft"}


@pytest.mark.asyncio
async def test_remote_401_maps_to_remote_api_error(make_dispatcher: MakeDispatcher, env_settings: Any) -> None:
    spy = TransportSpy(status_code=401, json_body={"message": "Invalid credentials"})
    dispatcher = make_dispatcher(spy, env_settings)

    with pytest.raises(RemoteAPIError) as exc_info:
        await dispatcher.dispatch(ToolCallRequest(name="get_posts", arguments={}))

    assert exc_info.value.message == "WordPress API error: Invalid credentials"
    assert exc_info.value.category == "RemoteAPIError"
    assert len(spy.requests) == 1


@pytest.mark.asyncio
async def test_timeout_reaches_failed_state(make_dispatcher: MakeDispatcher, env_settings: Any) -> None:
    spy = TransportSpy(exc=lambda request: httpx.ConnectTimeout("timed out", request=request))
    dispatcher = make_dispatcher(spy, env_settings)

    with pytest.raises(TransportError):
        await dispatcher.dispatch(ToolCallRequest(name="create_post", arguments={"title": "a", "content": "b"}))
    assert len(spy.requests) == 1


@pytest.mark.asyncio
async def test_unexpected_failure_is_wrapped(spy: TransportSpy) -> None:
    from wordpress_mcp import WordPressClient

    def broken_settings() -> WordPressSettings:
        raise RuntimeError("boom")

    dispatcher = Dispatcher(WordPressClient(transport=httpx.MockTransport(spy)), settings_provider=broken_settings)
    with pytest.raises(InternalToolError, match="failed unexpectedly: RuntimeError"):
        await dispatcher.dispatch(ToolCallRequest(name="get_posts", arguments={}))


@pytest.mark.asyncio
async def test_password_never_logged(
    make_dispatcher: MakeDispatcher, env_settings: Any, caplog: pytest.LogCaptureFixture
) -> None:
    spy = TransportSpy(status_code=401, json_body={"message": "bad call-secret"})
    dispatcher = make_dispatcher(spy, env_settings)

    with caplog.at_level(logging.DEBUG, logger="wordpress_mcp"):
        with pytest.raises(RemoteAPIError):
            await dispatcher.dispatch(ToolCallRequest(name="get_posts", arguments={"password": "call-secret"}))

    assert "call-secret" not in caplog.text
    assert "get_posts" in caplog.text


@pytest.mark.asyncio
async def test_malformed_site_url_is_transport_error(
    make_dispatcher: MakeDispatcher, spy: TransportSpy, env_settings: Any
) -> None:
    dispatcher = make_dispatcher(spy, env_settings)
    with pytest.raises(TransportError, match="WordPress API error"):
        await dispatcher.dispatch(
            ToolCallRequest(name="get_posts", arguments={"siteUrl": "https://blog.example.com\n"})
        )
    assert spy.requests == []


@pytest.mark.asyncio
async def test_invalid_configuration_message_is_kept(spy: TransportSpy) -> None:
    from wordpress_mcp import WordPressClient

    def bad_timeout() -> WordPressSettings:
        return WordPressSettings.from_env({"WORDPRESS_TIMEOUT": "soon"})

    dispatcher = Dispatcher(WordPressClient(transport=httpx.MockTransport(spy)), settings_provider=bad_timeout)
    with pytest.raises(InternalToolError, match="WORDPRESS_TIMEOUT must be a number of seconds") as exc_info:
        await dispatcher.dispatch(ToolCallRequest(name="get_posts", arguments={}))
    assert "failed unexpectedly" not in exc_info.value.message
    assert spy.requests == []


@pytest.mark.asyncio
async def test_dispatch_sends_one_request_with_configured_timeout(env_settings: Any) -> None:
    from wordpress_mcp import WordPressClient

    client = AsyncMock(spec=WordPressClient)
    client.send.return_value = [{"id": 1}]
    settings = env_settings.model_copy(update={"timeout": 4.0})
    dispatcher = Dispatcher(client, settings_provider=lambda: settings)

    result = await dispatcher.dispatch(ToolCallRequest(name="get_posts", arguments={"perPage": 5}))

    assert result == [{"id": 1}]
    assert client.send.await_count == 1
    credentials, request = client.send.await_args.args
    assert credentials.identity == "env-user"
    assert request.query == {"per_page": 5, "page": 1}
    assert client.send.await_args.kwargs == {"timeout": 4.0}
