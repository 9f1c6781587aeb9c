"""Time categories tracked by the credit engine.

Categories are fixed at configuration time. A catalog picks the subset it
tracks (and their display order); it cannot add new ones.
"""

from dataclasses import dataclass
from enum import StrEnum


class TimeCategory(StrEnum):
    VFR_DUAL = "vfr_dual"
    IFR_DUAL = "ifr_dual"
    IFR_HOOD = "ifr_hood"
    SIM = "sim"
    XC = "xc"
    NIGHT = "night"
    SOLO = "solo"
    PIC = "pic"
    SIC = "sic"
    INSTRUMENT = "instrument"


@dataclass(frozen=True)
class CategoryInfo:
    """Display metadata for a time category.

    Attributes:
        category: The category this describes
        label: Column header (e.g., "IFR Dual")
        short_label: Compact header for narrow layouts (e.g., "IFR")
        description: One-line explanation shown as a tooltip
    """

    category: TimeCategory
    label: str
    short_label: str
    description: str


CATEGORY_INFO: dict[TimeCategory, CategoryInfo] = {
    info.category: info
    for info in (
        CategoryInfo(TimeCategory.VFR_DUAL, "VFR Dual", "VFR", "Visual Flight Rules with instructor"),
        CategoryInfo(TimeCategory.IFR_DUAL, "IFR Dual", "IFR", "Instrument Flight Rules with instructor"),
        CategoryInfo(TimeCategory.IFR_HOOD, "IFR Hood", "Hood", "Simulated instrument conditions"),
        CategoryInfo(TimeCategory.SIM, "Simulator", "Sim", "Flight simulator training"),
        CategoryInfo(TimeCategory.XC, "Cross Country", "XC", "Cross country navigation"),
        CategoryInfo(TimeCategory.NIGHT, "Night", "Night", "Night flying hours"),
        CategoryInfo(TimeCategory.SOLO, "Solo", "Solo", "Solo flight time"),
        CategoryInfo(TimeCategory.PIC, "PIC", "PIC", "Pilot in Command time"),
        CategoryInfo(TimeCategory.SIC, "SIC", "SIC", "Second in Command time"),
        CategoryInfo(TimeCategory.INSTRUMENT, "Instrument", "Inst", "Actual instrument time"),
    )
}


def category_info(category: TimeCategory) -> CategoryInfo:
    """Get display metadata for a category."""
    return CATEGORY_INFO[category]
