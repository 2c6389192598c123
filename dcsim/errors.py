"""Exceptions raised while validating, assembling and solving circuits."""


class CircuitError(Exception):
    """Base class for every dcsim failure."""


class InvalidTopologyError(CircuitError, ValueError):
    """Raised when the circuit's node set cannot support a solve."""


class InsufficientNodesError(InvalidTopologyError):
    """Raised when a circuit has fewer than two nodes."""


class InvalidReferenceNodeError(InvalidTopologyError):
    """Raised when an explicit reference node is not part of the circuit."""


class InvalidElementError(CircuitError, ValueError):
    """Raised when an element's parameters are invalid."""


class SingularMatrixError(CircuitError, RuntimeError):
    """Raised when the MNA system has no unique solution."""


class DimensionMismatchError(CircuitError, ValueError):
    """Raised when matrix and vector shapes disagree."""
