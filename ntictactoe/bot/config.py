"""Search limits shared by every bot strategy."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional


@dataclass(frozen=True)
class SearchBudget:
    """Optional caps on search depth, iteration count and elapsed time.

    A missing cap means that dimension is unbounded. The `with_*` methods
    return a new budget, so budgets can be built up step by step:

        SearchBudget.empty().with_max_depth(4).with_max_time(2, "seconds")
    """

    max_depth: Optional[int] = None
    max_iterations: Optional[int] = None
    max_time_millis: Optional[int] = None

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value is not None and value < 0:
                raise ValueError(f"{f.name} must not be negative, got {value}")

    @classmethod
    def empty(cls) -> SearchBudget:
        return _EMPTY

    def with_max_depth(self, max_depth: Optional[int]) -> SearchBudget:
        return dataclasses.replace(self, max_depth=max_depth)

    def with_max_iterations(self, max_iterations: Optional[int]) -> SearchBudget:
        return dataclasses.replace(self, max_iterations=max_iterations)

    def with_max_time_millis(self, max_time_millis: Optional[int]) -> SearchBudget:
        return dataclasses.replace(self, max_time_millis=max_time_millis)

    def with_max_time(self, amount: float, unit: str = "seconds") -> SearchBudget:
        """Set the time cap from an amount and a timedelta unit name, e.g. "seconds"."""
        try:
            duration = timedelta(**{unit: amount})
        except TypeError:
            raise ValueError(f"Unknown time unit: {unit!r}") from None
        return self.with_max_time_millis(duration // timedelta(milliseconds=1))

    @property
    def has_max_depth(self) -> bool:
        return self.max_depth is not None

    @property
    def has_max_iterations(self) -> bool:
        return self.max_iterations is not None

    @property
    def has_max_time_millis(self) -> bool:
        return self.max_time_millis is not None

    def exceeds_max_depth(self, depth: int) -> bool:
        return self.max_depth is not None and depth >= self.max_depth

    def exceeds_max_iterations(self, iterations: int) -> bool:
        return self.max_iterations is not None and iterations >= self.max_iterations

    def exceeds_max_time_millis(self, time_millis: float) -> bool:
        return self.max_time_millis is not None and time_millis >= self.max_time_millis


_EMPTY = SearchBudget()
