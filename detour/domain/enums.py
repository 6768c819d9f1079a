"""Domain enumerations."""

import enum


class Driver(str, enum.Enum):
    """Which of the two trips absorbs the detour."""

    AB = "AB"  # the A -> B driver picks up the C -> D passenger
    CD = "CD"  # the C -> D driver picks up the A -> B passenger
