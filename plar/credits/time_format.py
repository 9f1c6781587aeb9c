"""H:MM text conversion for integer minute values.

The engine works in integer minutes. These helpers sit at the boundary
with whatever renders or edits the values.
"""

import re

# Hours are unbounded; minutes are one or two digits and must be < 60
_HMM_PATTERN = re.compile(r"^(\d+)\s*:\s*(\d{1,2})$")

# Inputs that mean "zero" without being valid H:MM
_ZERO_INPUTS = {"", "0", "0:00"}


def format_minutes(minutes: int) -> str:
    """Format minutes as H:MM.

    Args:
        minutes: Non-negative minute value

    Returns:
        Display string (e.g., 330 -> "5:30", 0 -> "0:00")
    """
    hours, mins = divmod(max(0, int(minutes)), 60)
    return f"{hours}:{mins:02d}"


def parse_minutes(text: str | None) -> int | None:
    """Parse H:MM text into minutes.

    Blank input and "0" are read as zero. Anything that is not H:MM with
    minutes below 60 is rejected.

    Args:
        text: Raw user input

    Returns:
        Minutes, or None if the input is malformed
    """
    if text is None:
        return None

    value = text.strip()
    if value in _ZERO_INPUTS:
        return 0

    match = _HMM_PATTERN.match(value)
    if not match:
        return None

    hours = int(match.group(1))
    mins = int(match.group(2))
    if mins >= 60:
        return None

    return hours * 60 + mins
