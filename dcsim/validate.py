"""Tolerance checks for comparing submitted answers against a solved circuit."""

from __future__ import annotations
from dataclasses import dataclass, field
import math
from typing import Dict, List, Mapping, Optional

from .circuit import Circuit, Solution, Terminals
from .equivalent import equivalent_resistance

REL_FLOOR = 1e-12


@dataclass(frozen=True)
class Tolerances:
    """
    Acceptance tolerances: an answer passes if it is within abs_tol OR rel_tol.
    """
    abs_tol: float = 1e-2
    rel_tol: float = 1e-2


DEFAULT_TOLERANCES = Tolerances()


@dataclass(frozen=True)
class CheckResult:
    ok: bool
    expected: float
    got: float
    abs_err: float
    rel_err: float


@dataclass(frozen=True)
class VoltageTarget:
    key: str
    a: str
    b: str
    label: Optional[str] = None


@dataclass(frozen=True)
class CurrentTarget:
    element: str
    label: Optional[str] = None


@dataclass(frozen=True)
class ValidationTargets:
    voltages: List[VoltageTarget] = field(default_factory=list)
    currents: List[CurrentTarget] = field(default_factory=list)
    req: Optional[Terminals] = None


@dataclass(frozen=True)
class Answers:
    """
    Submitted values: VoltageTarget.key -> V(a) - V(b), element name -> current (a to b).
    """
    voltages: Mapping[str, float] = field(default_factory=dict)
    currents: Mapping[str, float] = field(default_factory=dict)
    req: Optional[float] = None


@dataclass
class ValidationResult:
    voltages: Dict[str, CheckResult] = field(default_factory=dict)
    currents: Dict[str, CheckResult] = field(default_factory=dict)
    req: Optional[CheckResult] = None

    @property
    def all_ok(self) -> bool:
        checks = list(self.voltages.values()) + list(self.currents.values())
        if self.req is not None:
            checks.append(self.req)
        return all(c.ok for c in checks)


def check(expected: float, got: float, tol: Tolerances = DEFAULT_TOLERANCES) -> CheckResult:
    abs_err = abs(got - expected)
    rel_err = abs_err / max(REL_FLOOR, abs(expected))
    ok = abs_err <= tol.abs_tol or rel_err <= tol.rel_tol
    return CheckResult(ok=ok, expected=expected, got=got, abs_err=abs_err, rel_err=rel_err)


def parse_number(text: str) -> float | None:
    """
    Parse a user-typed number, accepting a decimal comma. Returns None if invalid.
    """
    s = text.strip().replace(",", ".", 1)
    # float() would accept "1_000"; digit separators are not valid answers.
    if not s or "_" in s:
        return None
    try:
        value = float(s)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def validate_answers(
    circuit: Circuit,
    solution: Solution,
    targets: ValidationTargets,
    answers: Answers,
    tol: Tolerances = DEFAULT_TOLERANCES,
) -> ValidationResult:
    """
    Check submitted answers against the solved circuit.

    Args:
        circuit: Circuit the solution belongs to (used for the Req target).
        solution: Solution returned by ``dcsim.solve``.
        targets: Quantities to check.
        answers: Submitted values; the Req target is skipped if answers.req is None.
        tol: Acceptance tolerances.

    Returns:
        ValidationResult with one CheckResult per target. A missing answer
        fails with got = nan.
    """
    result = ValidationResult()
    for target in targets.voltages:
        expected = solution.voltage_diff(target.a, target.b)
        got = answers.voltages.get(target.key, math.nan)
        result.voltages[target.key] = check(expected, got, tol)

    for target in targets.currents:
        expected = solution.branch_current(target.element)
        got = answers.currents.get(target.element, math.nan)
        result.currents[target.element] = check(expected, got, tol)

    if targets.req is not None and answers.req is not None:
        expected = equivalent_resistance(circuit, targets.req.a, targets.req.b)
        result.req = check(expected, answers.req, tol)
    return result
