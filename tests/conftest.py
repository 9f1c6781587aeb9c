"""Root conftest for all tests.

Shared catalog fixtures for the credit engine tests.
"""

from pathlib import Path

import pytest

from plar.credits.categories import TimeCategory
from plar.credits.session import CreditSession
from plar.credits.types import Phase, SyllabusCatalog, TrainingEvent

IFR = TimeCategory.IFR_DUAL
VFR = TimeCategory.VFR_DUAL
SIM = TimeCategory.SIM


def make_event(event_id: str, credited: bool = False, **minutes: int) -> TrainingEvent:
    """Build an event; keyword args are category values (e.g., ifr_dual=90)."""
    return TrainingEvent(
        id=event_id,
        name=event_id.upper(),
        minutes={TimeCategory(key): value for key, value in minutes.items()},
        credited=credited,
    )


@pytest.fixture
def p1_catalog() -> SyllabusCatalog:
    """Phase P1: six IFR events at 90 minutes except e3 and e5 at 120.

    Phase P2 holds simulator events so cross-phase totals can be checked.
    """
    p1_events = tuple(
        make_event(f"e{i}", ifr_dual=120 if i in (3, 5) else 90, vfr_dual=10)
        for i in range(1, 7)
    )
    p2_events = (
        make_event("s1", sim=120),
        make_event("s2", sim=90),
    )
    return SyllabusCatalog(
        name="Test Syllabus",
        categories=(VFR, IFR, SIM),
        requirements={VFR: 250, IFR: 3000, SIM: 330},
        phases=(
            Phase(id="P1", name="Phase 1", events=p1_events),
            Phase(id="P2", name="Phase 2", events=p2_events),
        ),
    )


@pytest.fixture
def session(p1_catalog: SyllabusCatalog) -> CreditSession:
    return CreditSession(p1_catalog)


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Write a small valid YAML catalog and return its path."""
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "name: Mini\n"
        "categories: [ifr_dual, night]\n"
        "requirements: {ifr_dual: 600, night: 60}\n"
        "phases:\n"
        "  - id: a\n"
        "    name: Phase A\n"
        "    events:\n"
        "      - {id: a1, name: A1, description: Night hold, minutes: {ifr_dual: 90, night: 30}}\n"
        "      - {id: a2, name: A2, minutes: {ifr_dual: 120}, credited: true}\n",
        encoding="utf-8",
    )
    return path
