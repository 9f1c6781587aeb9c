"""Credit reconciliation engine.

Aggregates credited lesson minutes per time category, applies manual
overrides, and reconciles the result against syllabus requirements.
"""

from plar.credits.aggregate import compute_aggregate
from plar.credits.catalog import load_catalog, parse_catalog
from plar.credits.categories import TimeCategory
from plar.credits.errors import (
    CatalogError,
    CreditEngineError,
    InvalidOverrideError,
    InvalidToggleError,
    ResetNotRequestedError,
    UnknownIdentifierError,
)
from plar.credits.overrides import OverrideLayer
from plar.credits.reconcile import compute_remaining
from plar.credits.selection import phase_state
from plar.credits.session import CreditSession, CreditSummary
from plar.credits.time_format import format_minutes, parse_minutes
from plar.credits.types import Phase, PhaseState, SyllabusCatalog, TrainingEvent

__all__ = [
    "CatalogError",
    "CreditEngineError",
    "CreditSession",
    "CreditSummary",
    "InvalidOverrideError",
    "InvalidToggleError",
    "OverrideLayer",
    "Phase",
    "PhaseState",
    "ResetNotRequestedError",
    "SyllabusCatalog",
    "TimeCategory",
    "TrainingEvent",
    "UnknownIdentifierError",
    "compute_aggregate",
    "compute_remaining",
    "format_minutes",
    "load_catalog",
    "parse_catalog",
    "parse_minutes",
    "phase_state",
]
