import math

import pytest

from dcsim import Circuit, Resistor, Terminals, VoltageSource, solve
from dcsim.validate import (
    DEFAULT_TOLERANCES,
    Answers,
    CurrentTarget,
    Tolerances,
    ValidationTargets,
    VoltageTarget,
    check,
    parse_number,
    validate_answers,
)


def test_default_tolerances():
    assert DEFAULT_TOLERANCES.abs_tol == 0.01
    assert DEFAULT_TOLERANCES.rel_tol == 0.01


def test_absolute_tolerance_accepts_small_values():
    result = check(0.005, 0.012)
    assert result.ok
    assert result.abs_err == pytest.approx(0.007)


def test_relative_tolerance_accepts_large_values():
    result = check(1000.0, 1009.0)
    assert result.ok
    assert result.rel_err == pytest.approx(0.009)


def test_outside_both_tolerances_fails():
    assert not check(1000.0, 1011.0).ok
    assert not check(0.5, 0.52).ok


def test_zero_expected_uses_floor():
    result = check(0.0, 0.5)
    assert not result.ok
    assert math.isfinite(result.rel_err)


def test_custom_tolerances():
    assert check(10.0, 10.4, Tolerances(abs_tol=0.5, rel_tol=0.0)).ok
    assert not check(10.0, 10.4, Tolerances(abs_tol=0.1, rel_tol=0.01)).ok


def test_nan_answer_fails():
    assert not check(1.0, math.nan).ok


@pytest.mark.parametrize(
    "text, expected",
    [("5", 5.0), (" 2.5 ", 2.5), ("3,75", 3.75), ("-1e-3", -0.001)],
)
def test_parse_number(text, expected):
    assert parse_number(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "   ", "abc", "inf", "nan", "1,2,3", "1_000", "2_5"])
def test_parse_number_rejects(text):
    assert parse_number(text) is None


def test_validate_answers():
    circuit = Circuit(
        nodes=["0", "n1", "n2"],
        elements=[
            VoltageSource("V1", "n1", "0", 10.0),
            Resistor("R1", "n1", "n2", 1000.0),
            Resistor("R2", "n2", "0", 1000.0),
        ],
    )
    sol = solve(circuit)
    targets = ValidationTargets(
        voltages=[VoltageTarget("v12", "n1", "n2"), VoltageTarget("v20", "n2", "0")],
        currents=[CurrentTarget("R1"), CurrentTarget("R2")],
        req=Terminals("n2", "0"),
    )

    result = validate_answers(
        circuit,
        sol,
        targets,
        Answers(voltages={"v12": 5.0, "v20": 4.0}, currents={"R1": 0.005}, req=502.0),
    )

    assert result.voltages["v12"].ok
    assert not result.voltages["v20"].ok
    assert result.currents["R1"].ok
    assert not result.currents["R2"].ok
    assert math.isnan(result.currents["R2"].got)
    assert result.req is not None and result.req.ok
    assert result.req.expected == pytest.approx(500.0)
    assert not result.all_ok


def test_validate_answers_skips_req_without_answer():
    circuit = Circuit(nodes=["A", "B"], elements=[Resistor("R1", "A", "B", 10.0)])
    sol = solve(circuit)
    targets = ValidationTargets(currents=[CurrentTarget("R1")], req=Terminals("A", "B"))

    result = validate_answers(circuit, sol, targets, Answers(currents={"R1": 0.0}))

    assert result.req is None
    assert result.all_ok
