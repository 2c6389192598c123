from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Dict, Optional, Tuple

from .assembly import (
    DEFAULT_REFERENCE_PREFERENCE,
    UnknownIndex,
    assemble,
    build_unknown_index,
    resolve_reference_node,
)
from .circuit import Circuit, Solution
from .components import CurrentSource, Resistor, VoltageSource
from .linalg import DEFAULT_PIVOT_RTOL, Array, solve_linear_system

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverOptions:
    """
    Configuration for a DC solve.

    Attributes:
        ref_node: Explicit reference node; None picks one from reference_preference.
        reference_preference: Ordered node names tried as reference before
            falling back to the first circuit node.
        pivot_rtol: Relative pivot threshold passed to the dense solver.
    """
    ref_node: Optional[str] = None
    reference_preference: Tuple[str, ...] = DEFAULT_REFERENCE_PREFERENCE
    pivot_rtol: float = DEFAULT_PIVOT_RTOL


def solve(circuit: Circuit, options: Optional[SolverOptions] = None) -> Solution:
    """
    Compute every node voltage and branch current of a DC circuit.

    Args:
        circuit: Circuit to solve. Not modified.
        options: Reference-node and pivot settings (defaults if None).

    Returns:
        Fresh Solution with the reference node at 0 V.

    Raises:
        InvalidTopologyError: Fewer than two nodes, unknown endpoints or an
            explicit reference node outside the circuit.
        InvalidElementError: Non-positive resistance or duplicate names.
        SingularMatrixError: The topology has no unique solution (floating
            nodes, conflicting voltage sources).
    """
    options = options or SolverOptions()
    circuit.validate()
    ref_node = resolve_reference_node(circuit.nodes, options.ref_node, options.reference_preference)
    index = build_unknown_index(circuit, ref_node)
    logger.debug("Solving circuit with %d unknowns, reference node '%s'.", index.size, ref_node)

    system = assemble(circuit, index)
    x = solve_linear_system(system.A, system.z, pivot_rtol=options.pivot_rtol)
    return _build_solution(circuit, index, x)


def _build_solution(circuit: Circuit, index: UnknownIndex, x: Array) -> Solution:
    voltages: Dict[str, float] = {index.ref_node: 0.0}
    for name, idx in index.node_index.items():
        voltages[name] = float(x[idx])

    currents: Dict[str, float] = {}
    for element in circuit.elements:
        if isinstance(element, VoltageSource):
            currents[element.name] = float(x[index.source(element.name)])
        elif isinstance(element, Resistor):
            currents[element.name] = (voltages[element.a] - voltages[element.b]) / element.resistance
        elif isinstance(element, CurrentSource):
            currents[element.name] = float(element.current)
        else:
            raise TypeError(f"Unsupported element type: {type(element).__name__}")

    return Solution(ref_node=index.ref_node, voltages=voltages, currents=currents)
