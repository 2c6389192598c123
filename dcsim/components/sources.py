from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentSource:
    """
    Ideal current source injecting ``current`` from a to b.
    """
    name: str
    a: str
    b: str
    current: float


@dataclass(frozen=True)
class VoltageSource:
    """
    Ideal voltage source enforcing V(a) - V(b) = voltage.

    Adds one auxiliary unknown to the MNA system: the current through the
    source, positive when flowing from a to b inside it.
    """
    name: str
    a: str
    b: str
    voltage: float
