"""Join strategy and compile mode enumerations."""

from __future__ import annotations

from enum import Enum, IntEnum


class JoinStrategy(IntEnum):
    """Strategies the outer query builder assigns to each populated relation."""

    HAS_FK = 1
    VIA_FK = 2
    VIA_JUNCTOR = 3


class CompileMode(Enum):
    """The two mutually exclusive SELECT compilation modes."""

    AGGREGATE = "aggregate"
    PROJECTION = "projection"
