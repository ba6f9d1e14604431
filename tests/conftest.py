import json
from typing import Any, Callable, List, Optional

import httpx
import pytest
from pydantic import SecretStr

from wordpress_mcp import Dispatcher, WordPressClient, WordPressSettings

SITE_URL = "https://blog.example.com"


class TransportSpy:
    """httpx handler that records every request and answers with a canned response."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
        exc: Optional[Callable[[httpx.Request], Exception]] = None,
    ) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.exc = exc
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def env_settings() -> WordPressSettings:
    return WordPressSettings(site_url=SITE_URL, username="env-user", password=SecretStr("env-pass"))


@pytest.fixture
def empty_settings() -> WordPressSettings:
    return WordPressSettings()


@pytest.fixture
def spy() -> TransportSpy:
    return TransportSpy(json_body={"id": 1})


@pytest.fixture
def make_dispatcher() -> Callable[[TransportSpy, WordPressSettings], Dispatcher]:
    def factory(spy: TransportSpy, settings: WordPressSettings) -> Dispatcher:
        client = WordPressClient(transport=httpx.MockTransport(spy))
        return Dispatcher(client, settings_provider=lambda: settings)

    return factory
