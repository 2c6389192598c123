"""
Bridge demo: two voltage sources with opposite polarities and a bridge resistor.

Nodes n0..n3, Req terminals n1 / n3:

    V1: V(n1) - V(n0) = 12 V
    V2: V(n0) - V(n3) = 5 V
    R1 n1-n2 220 Ω, R2 n2-n0 330 Ω, R3 n2-n3 470 Ω, R4 n1-n3 680 Ω (bridge)
"""

import logging
from typing import Tuple

from dcsim import Circuit, Resistor, Terminals, VoltageSource, equivalent_resistance, solve
from dcsim.validate import CurrentTarget, ValidationTargets, VoltageTarget


def demo_circuit() -> Tuple[Circuit, ValidationTargets]:
    circuit = Circuit(
        nodes=["n0", "n1", "n2", "n3"],
        elements=[
            VoltageSource("V1", "n1", "n0", 12.0),
            VoltageSource("V2", "n0", "n3", 5.0),
            Resistor("R1", "n1", "n2", 220.0),
            Resistor("R2", "n2", "n0", 330.0),
            Resistor("R3", "n2", "n3", 470.0),
            Resistor("R4", "n1", "n3", 680.0),
        ],
        terminals=Terminals("n1", "n3"),
    )
    targets = ValidationTargets(
        voltages=[
            VoltageTarget("V_n1n2", "n1", "n2", "V(n1,n2)"),
            VoltageTarget("V_n2n3", "n2", "n3", "V(n2,n3)"),
            VoltageTarget("V_n1n3", "n1", "n3", "V(n1,n3)"),
        ],
        currents=[
            CurrentTarget("R1", "I(R1) n1→n2"),
            CurrentTarget("R2", "I(R2) n2→n0"),
            CurrentTarget("R3", "I(R3) n2→n3"),
            CurrentTarget("R4", "I(R4) n1→n3"),
        ],
        req=Terminals("n1", "n3"),
    )
    return circuit, targets


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    circuit, targets = demo_circuit()
    solution = solve(circuit)

    print(f"Reference node: {solution.ref_node}")
    for target in targets.voltages:
        print(f"{target.label} = {solution.voltage_diff(target.a, target.b):.4f} V")
    for target in targets.currents:
        print(f"{target.label} = {solution.branch_current(target.element) * 1e3:.4f} mA")

    req = equivalent_resistance(circuit)
    print(f"Req(n1, n3) = {req:.3f} Ω")


if __name__ == "__main__":
    main()
