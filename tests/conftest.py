"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from apply_also import Also, Apply


class Boom(Exception):
    """Raised by test functions to check propagation."""


@dataclass
class Counter:
    calls: list[object] = field(default_factory=list)

    def __call__(self, value: object) -> None:
        self.calls.append(value)


@dataclass(slots=True)
class Settings(Apply, Also):
    host: str = "localhost"
    port: int = 8080
    tags: list[str] = field(default_factory=list)


@pytest.fixture
def counter() -> Counter:
    """Records every value it is called with."""
    return Counter()


@pytest.fixture
def settings() -> Settings:
    return Settings()
