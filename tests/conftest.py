"""Pytest configuration and shared fixtures."""

import pytest

from switchboard.config.schema import SwitchboardConfig


class Animal:
    """Async handler that records what it says."""

    def __init__(self, key: str, sound: str, out: list[str]) -> None:
        self.key = key
        self.sound = sound
        self.out = out

    async def invoke(self) -> str:
        self.out.append(self.sound)
        return self.sound


class User:
    """Listener that records every delivery as (name, event, content)."""

    def __init__(self, name: str, out: list[tuple[str, str, str]]) -> None:
        self.name = name
        self.out = out

    def update(self, event, payload) -> None:
        self.out.append((self.name, event, payload["content"]))


@pytest.fixture
def default_config() -> SwitchboardConfig:
    """Provide a default configuration for tests."""
    return SwitchboardConfig()


@pytest.fixture
def sounds() -> list[str]:
    return []


@pytest.fixture
def deliveries() -> list[tuple[str, str, str]]:
    return []


@pytest.fixture
def dog(sounds) -> Animal:
    return Animal("dog", "gau gau", sounds)


@pytest.fixture
def cat(sounds) -> Animal:
    return Animal("cat", "meo meo", sounds)


@pytest.fixture
def make_user(deliveries):
    def _make(name: str) -> User:
        return User(name, deliveries)

    return _make
