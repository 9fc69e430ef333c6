from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True, frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for variant in self.tuple():
            assert 0 <= variant <= 255, (
                f"Expected all color values to be between 0 and 255. Found {self.tuple()}"
            )

    def tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def with_alpha(self, alpha: int) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, alpha)

    def __iter__(self) -> Iterator[int]:
        return iter(self.tuple())

    def __getitem__(self, index: int) -> int:
        return self.tuple()[index]
