import pytest

from dcsim import (
    Circuit,
    CurrentSource,
    InvalidTopologyError,
    Resistor,
    SingularMatrixError,
    SolverOptions,
    Terminals,
    VoltageSource,
    equivalent_resistance,
)
from dcsim.equivalent import deactivate_sources


def parallel_pair() -> Circuit:
    return Circuit(
        nodes=["A", "B"],
        elements=[Resistor("R1", "A", "B", 100.0), Resistor("R2", "A", "B", 300.0)],
    )


def test_parallel_resistors():
    assert equivalent_resistance(parallel_pair(), "A", "B") == pytest.approx(75.0)


@pytest.mark.parametrize("ref_node", ["A", "B"])
def test_parallel_resistors_any_reference(ref_node):
    req = equivalent_resistance(parallel_pair(), "A", "B", SolverOptions(ref_node=ref_node))
    assert req == pytest.approx(75.0)


def test_terminal_order_does_not_matter():
    circuit = parallel_pair()
    assert equivalent_resistance(circuit, "B", "A") == pytest.approx(equivalent_resistance(circuit, "A", "B"))


def test_resistor_orientation_does_not_matter():
    flipped = Circuit(
        nodes=["A", "B"],
        elements=[Resistor("R1", "B", "A", 100.0), Resistor("R2", "A", "B", 300.0)],
    )
    assert equivalent_resistance(flipped, "A", "B") == pytest.approx(75.0)


def test_voltage_source_is_shorted():
    # R1 to n1, source shorts n1 to ground, so Req(n2, 0) = R1 || R2.
    circuit = Circuit(
        nodes=["0", "n1", "n2"],
        elements=[
            VoltageSource("V1", "n1", "0", 10.0),
            Resistor("R1", "n1", "n2", 1000.0),
            Resistor("R2", "n2", "0", 1000.0),
        ],
    )
    assert equivalent_resistance(circuit, "n2", "0") == pytest.approx(500.0)


def test_current_source_is_opened():
    circuit = Circuit(
        nodes=["0", "a", "b"],
        elements=[
            Resistor("R1", "a", "b", 200.0),
            Resistor("R2", "b", "0", 300.0),
            CurrentSource("I1", "a", "0", 0.5),
        ],
    )
    assert equivalent_resistance(circuit, "a", "0") == pytest.approx(500.0)


def test_uses_stored_terminals():
    circuit = parallel_pair()
    circuit.terminals = Terminals("A", "B")
    assert equivalent_resistance(circuit) == pytest.approx(75.0)


def test_missing_terminals_raise():
    with pytest.raises(InvalidTopologyError):
        equivalent_resistance(parallel_pair())


def test_unknown_terminal_raises():
    with pytest.raises(InvalidTopologyError):
        equivalent_resistance(parallel_pair(), "A", "C")


def test_disconnected_terminals_are_singular():
    circuit = Circuit(
        nodes=["0", "a", "b", "c"],
        elements=[Resistor("R1", "a", "0", 10.0), Resistor("R2", "b", "c", 10.0)],
    )
    with pytest.raises(SingularMatrixError):
        equivalent_resistance(circuit, "a", "b")


def test_test_source_name_does_not_collide():
    circuit = Circuit(
        nodes=["A", "B"],
        elements=[Resistor("I_test", "A", "B", 100.0), Resistor("I_test_1", "A", "B", 100.0)],
    )
    assert equivalent_resistance(circuit, "A", "B") == pytest.approx(50.0)


def test_deactivate_sources_keeps_resistors_and_zeroes_voltage_sources():
    circuit = Circuit(
        nodes=["0", "a"],
        elements=[
            VoltageSource("V1", "a", "0", 12.0),
            Resistor("R1", "a", "0", 10.0),
            CurrentSource("I1", "a", "0", 1.0),
        ],
    )

    elements = deactivate_sources(circuit)

    assert [e.name for e in elements] == ["V1", "R1"]
    assert elements[0].voltage == 0.0
    assert circuit.elements[0].voltage == 12.0


def test_source_values_do_not_change_req():
    def build(volts, amps):
        return Circuit(
            nodes=["0", "a", "b"],
            elements=[
                VoltageSource("V1", "a", "0", volts),
                Resistor("R1", "a", "b", 100.0),
                Resistor("R2", "b", "0", 100.0),
                CurrentSource("I1", "0", "b", amps),
            ],
        )

    assert equivalent_resistance(build(1.0, 0.0), "b", "0") == pytest.approx(
        equivalent_resistance(build(-30.0, 2.0), "b", "0")
    )
