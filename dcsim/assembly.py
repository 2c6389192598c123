"""
MNA assembly: reference-node choice, unknown indexing and element stamping.

Unknown layout for a circuit with m non-reference nodes and k voltage sources:

    x = [V(node_0) ... V(node_{m-1}) | I(vs_0) ... I(vs_{k-1})]

Node unknowns follow ``Circuit.nodes`` order and source currents follow
``Circuit.elements`` order.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Dict, Optional, Sequence

from .circuit import Circuit
from .components import (
    CurrentSource,
    MnaSystem,
    Resistor,
    VoltageSource,
    stamp_conductance,
    stamp_current_source,
    stamp_voltage_source,
)
from .errors import InvalidReferenceNodeError

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_PREFERENCE = ("0", "GND", "gnd", "ref", "REF")


def pick_reference_node(
    nodes: Sequence[str],
    preference: Sequence[str] = DEFAULT_REFERENCE_PREFERENCE,
) -> str:
    """
    Return the first name of ``preference`` present in ``nodes``, else ``nodes[0]``.
    """
    node_set = set(nodes)
    for name in preference:
        if name in node_set:
            return name
    return nodes[0]


def resolve_reference_node(
    nodes: Sequence[str],
    ref_node: Optional[str] = None,
    preference: Sequence[str] = DEFAULT_REFERENCE_PREFERENCE,
) -> str:
    if ref_node is None:
        return pick_reference_node(nodes, preference)
    if ref_node not in nodes:
        raise InvalidReferenceNodeError(f"Reference node '{ref_node}' is not a circuit node.")
    return ref_node


@dataclass(frozen=True)
class UnknownIndex:
    """
    Mapping from circuit quantities to positions in the MNA unknown vector.

    Attributes:
        ref_node: Reference node (no unknown).
        node_index: Non-reference node name -> index in [0, m).
        source_index: Voltage source name -> index in [m, m + k).
    """
    ref_node: str
    node_index: Dict[str, int]
    source_index: Dict[str, int]

    @property
    def n_nodes(self) -> int:
        return len(self.node_index)

    @property
    def size(self) -> int:
        return len(self.node_index) + len(self.source_index)

    def node(self, name: str) -> int | None:
        return self.node_index.get(name)

    def source(self, name: str) -> int:
        return self.source_index[name]


def build_unknown_index(circuit: Circuit, ref_node: str) -> UnknownIndex:
    voltage_nodes = [n for n in circuit.nodes if n != ref_node]
    node_index = {name: idx for idx, name in enumerate(voltage_nodes)}
    m = len(voltage_nodes)
    source_index: Dict[str, int] = {}
    for element in circuit.elements:
        if isinstance(element, VoltageSource):
            source_index[element.name] = m + len(source_index)
    return UnknownIndex(ref_node=ref_node, node_index=node_index, source_index=source_index)


def assemble(circuit: Circuit, index: UnknownIndex) -> MnaSystem:
    """
    Stamp every element of ``circuit`` into a fresh MNA system.

    Args:
        circuit: Validated circuit.
        index: Unknown layout built by ``build_unknown_index``.

    Returns:
        MnaSystem holding the coefficient matrix A and right-hand side z.
    """
    system = MnaSystem(index.size)
    for element in circuit.elements:
        ia = index.node(element.a)
        ib = index.node(element.b)
        if isinstance(element, Resistor):
            stamp_conductance(system, ia, ib, element.conductance)
        elif isinstance(element, CurrentSource):
            stamp_current_source(system, ia, ib, element.current)
        elif isinstance(element, VoltageSource):
            stamp_voltage_source(system, index.source(element.name), ia, ib, element.voltage)
        else:
            raise TypeError(f"Unsupported element type: {type(element).__name__}")
    logger.debug(
        "Assembled MNA system: %d node unknowns, %d source unknowns (ref=%s).",
        index.n_nodes,
        index.size - index.n_nodes,
        index.ref_node,
    )
    return system
