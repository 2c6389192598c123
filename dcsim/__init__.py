"""
DC resistive circuit solver based on Modified Nodal Analysis.
"""

from .circuit import Circuit, Solution, Terminals  # noqa: F401
from .components import CurrentSource, Element, Resistor, VoltageSource  # noqa: F401
from .equivalent import equivalent_resistance  # noqa: F401
from .errors import (  # noqa: F401
    CircuitError,
    DimensionMismatchError,
    InsufficientNodesError,
    InvalidElementError,
    InvalidReferenceNodeError,
    InvalidTopologyError,
    SingularMatrixError,
)
from .solver import SolverOptions, solve  # noqa: F401
from . import validate  # noqa: F401

__all__ = [
    "Circuit",
    "Solution",
    "Terminals",
    "Element",
    "Resistor",
    "VoltageSource",
    "CurrentSource",
    "SolverOptions",
    "solve",
    "equivalent_resistance",
    "validate",
    "CircuitError",
    "InvalidTopologyError",
    "InsufficientNodesError",
    "InvalidReferenceNodeError",
    "InvalidElementError",
    "SingularMatrixError",
    "DimensionMismatchError",
]
