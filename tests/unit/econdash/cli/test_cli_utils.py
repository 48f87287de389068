"""Unit tests for CLI helpers."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from dependency_injector import providers

from econdash.cli.utils import async_command
from econdash.infrastructure.containers import Container, reset_container, set_container


class _ClosableProvider:
    def __init__(self) -> None:
        self.closed = False

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def provider() -> Iterator[_ClosableProvider]:
    stub = _ClosableProvider()
    container = Container()
    container.series_provider.override(providers.Object(stub))
    set_container(container)
    yield stub
    reset_container()


@pytest.mark.unit
class TestAsyncCommand:
    def test_returns_result_and_closes_provider(self, provider: _ClosableProvider) -> None:
        @async_command
        async def command() -> int:
            return 42

        assert command() == 42
        assert provider.closed

    def test_closes_provider_when_command_fails(self, provider: _ClosableProvider) -> None:
        @async_command
        async def command() -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            command()
        assert provider.closed
