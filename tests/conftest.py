"""Shared fixtures and stub providers for the translation tests."""

import asyncio
from typing import List
from unittest.mock import AsyncMock, MagicMock

import pytest

from config import TranslatorSettings
from translator.base import BaseProvider, TranslationRequest, TranslationResult


class StubProvider(BaseProvider):
    """Provider double that records calls and can fail or sleep on demand."""

    def __init__(self, name: str, *, fail: bool = False, delay: float = 0.0, healthy: bool = True) -> None:
        super().__init__()
        self.name = name
        self.fail = fail
        self.delay = delay
        self.healthy = healthy
        self.calls: List[TranslationRequest] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        self.calls.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if self.fail:
                raise RuntimeError(f"{self.name} is down")
            return self._result(request, f"{self.name}:{request.text}", 0.8)
        finally:
            self.in_flight -= 1

    async def is_healthy(self) -> bool:
        return self.healthy


@pytest.fixture
def settings():
    return TranslatorSettings(cache_capacity=10, request_timeout=1.0, batch_concurrency=5)


@pytest.fixture
def make_response():
    """Build an aiohttp-style response usable as ``async with``."""

    def _make(status=200, payload=None, text="", json_error=None):
        response = AsyncMock()
        response.status = status
        if json_error is not None:
            response.json = AsyncMock(side_effect=json_error)
        else:
            response.json = AsyncMock(return_value=payload)
        response.text = AsyncMock(return_value=text)
        response.__aenter__ = AsyncMock(return_value=response)
        response.__aexit__ = AsyncMock(return_value=False)
        return response

    return _make


@pytest.fixture
def attach_session():
    """Install a mock aiohttp session on a remote provider."""

    def _attach(provider, *, request=None, get=None):
        session = MagicMock()
        session.closed = False
        session.close = AsyncMock()
        if request is not None:
            session.request = MagicMock(return_value=request) if not isinstance(request, Exception) else MagicMock(side_effect=request)
        if get is not None:
            session.get = MagicMock(return_value=get) if not isinstance(get, Exception) else MagicMock(side_effect=get)
        provider._session = session
        return session

    return _attach


@pytest.fixture
def make_provider():
    return StubProvider
