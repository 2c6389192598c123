from __future__ import annotations
from dataclasses import dataclass

from ..errors import InvalidElementError


@dataclass(frozen=True)
class Resistor:
    """
    Linear resistor between nodes a and b.

    Its current is reported positive when flowing from a to b.
    """
    name: str
    a: str
    b: str
    resistance: float

    def __post_init__(self) -> None:
        if not self.resistance > 0:
            raise InvalidElementError(f"Resistor '{self.name}' must have positive resistance, got {self.resistance}.")

    @property
    def conductance(self) -> float:
        return 1.0 / self.resistance
