"""Tests for credited-minute aggregation."""

import itertools

from plar.credits.aggregate import compute_aggregate, phase_credited_totals, phase_totals
from plar.credits.categories import TimeCategory
from plar.credits.types import Phase, SyllabusCatalog

IFR = TimeCategory.IFR_DUAL
VFR = TimeCategory.VFR_DUAL
SIM = TimeCategory.SIM


class TestComputeAggregate:
    """Tests for compute_aggregate."""

    def test_nothing_credited_yields_zero_for_every_category(self, p1_catalog: SyllabusCatalog) -> None:
        """Test each tracked category appears with 0 when nothing is credited."""
        assert compute_aggregate(p1_catalog.phases, p1_catalog.categories) == {VFR: 0, IFR: 0, SIM: 0}

    def test_scenario_two_long_one_short(self, p1_catalog: SyllabusCatalog) -> None:
        """Test crediting e3, e5 (120) and e1 (90) sums IFR to 330."""
        p1 = p1_catalog.phases[0]
        for event in p1.events:
            event.credited = event.id in {"e1", "e3", "e5"}

        aggregate = compute_aggregate(p1_catalog.phases, p1_catalog.categories)

        assert aggregate[IFR] == 120 + 120 + 90
        assert aggregate[VFR] == 30
        assert aggregate[SIM] == 0

    def test_matches_sum_of_credited_events_for_every_configuration(self, p1_catalog: SyllabusCatalog) -> None:
        """Test aggregate equals the credited-event sum across all P1 flag combinations."""
        p1 = p1_catalog.phases[0]
        for flags in itertools.product([False, True], repeat=len(p1.events)):
            for event, flag in zip(p1.events, flags, strict=True):
                event.credited = flag

            aggregate = compute_aggregate(p1_catalog.phases, p1_catalog.categories)

            for category in p1_catalog.categories:
                expected = sum(e.minutes_for(category) for e in p1.events if e.credited)
                assert aggregate[category] == expected

    def test_spans_phases(self, p1_catalog: SyllabusCatalog) -> None:
        """Test credited events in different phases all contribute."""
        p1, p2 = p1_catalog.phases
        p1.events[0].credited = True
        p2.events[1].credited = True

        aggregate = compute_aggregate(p1_catalog.phases, p1_catalog.categories)

        assert aggregate == {VFR: 10, IFR: 90, SIM: 90}

    def test_phase_contributions_sum_to_aggregate(self, p1_catalog: SyllabusCatalog) -> None:
        """Test per-phase credited totals add up to the aggregate."""
        p1, p2 = p1_catalog.phases
        p1.events[2].credited = True
        p1.events[3].credited = True
        p2.events[0].credited = True

        aggregate = compute_aggregate(p1_catalog.phases, p1_catalog.categories)
        per_phase = [phase_credited_totals(phase, p1_catalog.categories) for phase in p1_catalog.phases]

        for category in p1_catalog.categories:
            assert sum(totals[category] for totals in per_phase) == aggregate[category]


class TestPhaseTotals:
    """Tests for phase_totals."""

    def test_counts_all_events_regardless_of_credit(self, p1_catalog: SyllabusCatalog) -> None:
        """Test phase totals include uncredited events."""
        p1 = p1_catalog.phases[0]
        p1.events[0].credited = True

        assert phase_totals(p1, p1_catalog.categories) == {VFR: 60, IFR: 4 * 90 + 2 * 120, SIM: 0}

    def test_empty_phase(self) -> None:
        """Test an empty phase totals zero."""
        assert phase_totals(Phase(id="empty", name="Empty"), [IFR]) == {IFR: 0}
