"""Manual override layer.

A sparse category -> minutes map kept apart from the computed aggregate.
The two are merged only when read, so clearing the overrides always
falls back to the live aggregate.
"""

from collections.abc import Mapping

from loguru import logger

from plar.credits.categories import TimeCategory
from plar.credits.errors import InvalidOverrideError


class OverrideLayer:
    """Sparse manual values that take precedence over the aggregate."""

    def __init__(self) -> None:
        self._values: dict[TimeCategory, int] = {}

    def __contains__(self, category: object) -> bool:
        return category in self._values

    def __len__(self) -> int:
        return len(self._values)

    def get(self, category: TimeCategory) -> int | None:
        return self._values.get(category)

    def set(self, category: TimeCategory, minutes: int) -> None:
        """Store an override for one category.

        Args:
            category: Category to override
            minutes: Credited minutes to report instead of the aggregate

        Raises:
            InvalidOverrideError: If minutes is not a non-negative integer.
                The prior value, if any, is kept.
        """
        # bool is an int subclass but never a valid minute count
        if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes < 0:
            raise InvalidOverrideError(
                "INVALID_OVERRIDE",
                [f"override for {category.value!r} must be a non-negative integer, got {minutes!r}"],
            )
        previous = self._values.get(category)
        self._values[category] = minutes
        logger.debug(f"Override {category.value}: {previous} -> {minutes}")

    def clear(self) -> None:
        if self._values:
            logger.debug(f"Clearing {len(self._values)} override(s)")
        self._values.clear()

    def effective_total(self, category: TimeCategory, aggregate: Mapping[TimeCategory, int]) -> int:
        """Override value if one exists, else the aggregate value."""
        if category in self._values:
            return self._values[category]
        return aggregate.get(category, 0)

    def merge(self, aggregate: Mapping[TimeCategory, int]) -> dict[TimeCategory, int]:
        """Overlay overrides onto a copy of the aggregate.

        Only categories present in the aggregate are returned.
        """
        return {category: self.effective_total(category, aggregate) for category in aggregate}

    def as_dict(self) -> dict[TimeCategory, int]:
        return dict(self._values)
