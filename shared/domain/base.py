"""
Base Domain Classes

Value objects are immutable and compared by value. Both booking
contexts describe their time windows with value objects built on
this base.
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass
