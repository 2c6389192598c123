from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, List, Mapping, Optional

from .components import Element, Resistor
from .errors import InsufficientNodesError, InvalidElementError, InvalidTopologyError

if TYPE_CHECKING:
    from .solver import SolverOptions


@dataclass(frozen=True)
class Terminals:
    """Terminal pair used for equivalent-resistance queries."""
    a: str
    b: str


@dataclass(frozen=True)
class Solution:
    """
    Result of one DC solve.

    Attributes:
        ref_node: Node held at 0 V.
        voltages: Node name -> voltage relative to ref_node.
        currents: Element name -> signed current, positive from a to b.
    """
    ref_node: str
    voltages: Mapping[str, float]
    currents: Mapping[str, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "voltages", MappingProxyType(dict(self.voltages)))
        object.__setattr__(self, "currents", MappingProxyType(dict(self.currents)))

    def node_voltage(self, node: str) -> float:
        # Nodes outside the solved set read as 0 V.
        return self.voltages.get(node, 0.0)

    def voltage_diff(self, a: str, b: str) -> float:
        return self.node_voltage(a) - self.node_voltage(b)

    def branch_current(self, element_name: str) -> float:
        if element_name not in self.currents:
            raise KeyError(f"Element '{element_name}' not present in the solution.")
        return self.currents[element_name]


@dataclass
class Circuit:
    """
    DC circuit topology: ordered nodes, ordered elements and optional terminals.

    Nodes keep their insertion order, which fixes the order of the voltage
    unknowns. ``add_element`` registers an element's endpoints on first use.
    """

    nodes: List[str] = field(default_factory=list)
    elements: List[Element] = field(default_factory=list)
    terminals: Optional[Terminals] = None

    def add_node(self, name: str) -> None:
        if name not in self.nodes:
            self.nodes.append(name)

    def add_element(self, element: Element) -> None:
        if any(existing.name == element.name for existing in self.elements):
            raise InvalidElementError(f"Element '{element.name}' already exists.")
        self.add_node(element.a)
        self.add_node(element.b)
        self.elements.append(element)

    def element(self, name: str) -> Element:
        for element in self.elements:
            if element.name == name:
                return element
        raise KeyError(f"Component '{name}' not present in the circuit.")

    def validate(self) -> None:
        if len(self.nodes) < 2:
            raise InsufficientNodesError(f"Circuit must have at least 2 nodes, got {len(self.nodes)}.")
        if len(set(self.nodes)) != len(self.nodes):
            raise InvalidTopologyError("Circuit node names must be unique.")
        known = set(self.nodes)
        seen = set()
        for element in self.elements:
            if element.name in seen:
                raise InvalidElementError(f"Duplicate element name '{element.name}'.")
            seen.add(element.name)
            for node in (element.a, element.b):
                if node not in known:
                    raise InvalidTopologyError(f"Element '{element.name}' references unknown node '{node}'.")
            if isinstance(element, Resistor) and not element.resistance > 0:
                raise InvalidElementError(f"Resistor '{element.name}' has non-positive resistance.")
        if self.terminals is not None:
            for node in (self.terminals.a, self.terminals.b):
                if node not in known:
                    raise InvalidTopologyError(f"Terminal '{node}' is not a circuit node.")

    def solve(self, options: Optional[SolverOptions] = None) -> Solution:
        from .solver import solve

        return solve(self, options)
