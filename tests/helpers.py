from __future__ import annotations


class FakeInventory:
    """A test double for an open inventory that only counts calls."""

    def __init__(self, name: str = "fake") -> None:
        self.name = name
        self.open_call_count = 0
        self.close_call_count = 0
        self.re_open_call_count = 0

    def open(self) -> None:
        self.open_call_count += 1

    def close(self) -> None:
        self.close_call_count += 1

    def re_open(self) -> None:
        self.re_open_call_count += 1

    @property
    def total_calls(self) -> int:
        return self.open_call_count + self.close_call_count + self.re_open_call_count

    def __repr__(self) -> str:
        return f"FakeInventory({self.name!r})"


class ExplodingInventory(FakeInventory):
    """A test double whose operations all fail."""

    def open(self) -> None:
        raise RuntimeError("open failed")

    def close(self) -> None:
        raise RuntimeError("close failed")

    def re_open(self) -> None:
        raise RuntimeError("re-open failed")
