"""Tests for requirement reconciliation."""

import pytest

from plar.credits.categories import TimeCategory
from plar.credits.reconcile import completion_percent, compute_remaining, over_credited

IFR = TimeCategory.IFR_DUAL
SIM = TimeCategory.SIM
NIGHT = TimeCategory.NIGHT


class TestComputeRemaining:
    """Tests for compute_remaining."""

    def test_scenario_remaining_after_credit(self) -> None:
        """Test 3000 required minus 330 credited leaves 2670."""
        assert compute_remaining({IFR: 330}, {IFR: 3000}, [IFR]) == {IFR: 2670}

    @pytest.mark.parametrize(
        ("requirement", "effective"),
        [(0, 0), (0, 50), (100, 0), (100, 100), (100, 250), (3000, 330)],
    )
    def test_never_negative(self, requirement: int, effective: int) -> None:
        """Test remaining equals max(0, requirement - effective)."""
        remaining = compute_remaining({IFR: effective}, {IFR: requirement}, [IFR])
        assert remaining[IFR] == max(0, requirement - effective)
        assert remaining[IFR] >= 0

    def test_missing_entries_count_as_zero(self) -> None:
        """Test categories absent from either mapping are treated as 0."""
        remaining = compute_remaining({}, {IFR: 60}, [IFR, SIM])
        assert remaining == {IFR: 60, SIM: 0}


class TestOverCredited:
    """Tests for over-credit detection."""

    def test_only_categories_above_requirement(self) -> None:
        """Test over-credit is reported per category and equality is not over."""
        effective = {IFR: 3100, SIM: 330, NIGHT: 10}
        requirements = {IFR: 3000, SIM: 330, NIGHT: 180}
        assert over_credited(effective, requirements, [IFR, SIM, NIGHT]) == {IFR}


class TestCompletionPercent:
    """Tests for completion_percent."""

    def test_partial(self) -> None:
        assert completion_percent(150, 600) == 25.0

    def test_capped_at_100(self) -> None:
        assert completion_percent(900, 600) == 100.0

    def test_zero_requirement_is_complete(self) -> None:
        assert completion_percent(0, 0) == 100.0
