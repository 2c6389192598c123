"""
Thevenin-equivalent resistance between two terminals.

The independent sources are deactivated (voltage sources become 0 V shorts,
current sources become opens), a 1 A test current is driven from terminal A
to terminal B and the resulting terminal voltage is read back. Only the
magnitude is returned: the result is meaningful for passive two-terminal
networks, i.e. once no independent source remains active between the
terminals.
"""

from __future__ import annotations
from dataclasses import replace
import logging
from typing import List, Optional

from .circuit import Circuit
from .components import CurrentSource, Element, Resistor, VoltageSource
from .errors import InvalidTopologyError
from .solver import SolverOptions, solve

logger = logging.getLogger(__name__)

TEST_SOURCE_NAME = "I_test"
TEST_CURRENT = 1.0


def deactivate_sources(circuit: Circuit) -> List[Element]:
    """
    Return the circuit's elements with every independent source turned off.
    """
    elements: List[Element] = []
    for element in circuit.elements:
        if isinstance(element, Resistor):
            elements.append(element)
        elif isinstance(element, VoltageSource):
            elements.append(replace(element, voltage=0.0))
        elif isinstance(element, CurrentSource):
            continue
        else:
            raise TypeError(f"Unsupported element type: {type(element).__name__}")
    return elements


def _test_source_name(circuit: Circuit) -> str:
    taken = {element.name for element in circuit.elements}
    name = TEST_SOURCE_NAME
    suffix = 1
    while name in taken:
        name = f"{TEST_SOURCE_NAME}_{suffix}"
        suffix += 1
    return name


def equivalent_resistance(
    circuit: Circuit,
    terminal_a: Optional[str] = None,
    terminal_b: Optional[str] = None,
    options: Optional[SolverOptions] = None,
) -> float:
    """
    Equivalent resistance seen between terminal_a and terminal_b.

    Args:
        circuit: Circuit to measure. Not modified.
        terminal_a: First terminal; defaults to ``circuit.terminals.a``.
        terminal_b: Second terminal; defaults to ``circuit.terminals.b``.
        options: Solver options for the inner solve.

    Returns:
        |V(a) - V(b)| under a 1 A test current, in ohms.

    Raises:
        InvalidTopologyError: No terminals given or a terminal is not a node.
        SingularMatrixError: The terminals are not connected.
    """
    if terminal_a is None or terminal_b is None:
        if circuit.terminals is None:
            raise InvalidTopologyError("No terminals given and the circuit defines none.")
        terminal_a = circuit.terminals.a if terminal_a is None else terminal_a
        terminal_b = circuit.terminals.b if terminal_b is None else terminal_b
    for node in (terminal_a, terminal_b):
        if node not in circuit.nodes:
            raise InvalidTopologyError(f"Terminal '{node}' is not a circuit node.")

    elements = deactivate_sources(circuit)
    test_name = _test_source_name(circuit)
    elements.append(CurrentSource(test_name, terminal_a, terminal_b, TEST_CURRENT))
    logger.debug("Measuring Req between '%s' and '%s' with test source '%s'.", terminal_a, terminal_b, test_name)

    test_circuit = Circuit(nodes=list(circuit.nodes), elements=elements)
    solution = solve(test_circuit, options)
    return abs(solution.voltage_diff(terminal_a, terminal_b)) / TEST_CURRENT
