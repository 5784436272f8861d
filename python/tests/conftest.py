from __future__ import annotations

import pytest


class Inner:
    def __init__(self) -> None:
        self.count = 0

    def increment(self) -> None:
        self.count += 1


class Counter:
    def __init__(self) -> None:
        self.count = 0
        self.label = None
        self.disabled = False
        self.inner = Inner()

    def increment(self) -> None:
        """Add one to the count."""
        self.count += 1

    def add(self, amount: int = 1) -> None:
        self.count += amount

    def value(self) -> int:
        return self.count

    def reset(self) -> None:
        self.count = 0

    def fluent(self) -> "Counter":
        self.count += 1
        return self

    def get_inner(self) -> Inner:
        return self.inner

    def echo(self, value):
        return value

    def disable(self) -> None:
        self.disabled = True

    def __repr__(self) -> str:
        return f"Counter(count={self.count})"


@pytest.fixture
def counter() -> Counter:
    return Counter()
