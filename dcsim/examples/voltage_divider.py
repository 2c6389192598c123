"""
DC analysis example (resistive voltage divider with a load branch).

Circuit:
    Vs (10 V) -> R1 (1 kΩ) -> node vout -> parallel of R2 (1 kΩ), Rload (2 kΩ)
    and a 1 mA leakage current source Ileak -> gnd.

This script solves the circuit, then reports:
- Node voltages relative to gnd.
- Branch currents of every element.
- Power dissipated in each resistor and the total delivered by the source.
"""

import logging

from dcsim import Circuit, CurrentSource, Resistor, VoltageSource, solve


def build_circuit() -> Circuit:
    circuit = Circuit()
    circuit.add_element(VoltageSource("Vs", "vin", "gnd", 10.0))
    circuit.add_element(Resistor("R1", "vin", "vout", 1000.0))
    circuit.add_element(Resistor("R2", "vout", "gnd", 1000.0))
    circuit.add_element(Resistor("Rload", "vout", "gnd", 2000.0))
    circuit.add_element(CurrentSource("Ileak", "vout", "gnd", 1e-3))
    return circuit


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    circuit = build_circuit()
    solution = solve(circuit)

    for node in circuit.nodes:
        print(f"V({node}) = {solution.node_voltage(node):.4f} V")

    for element in circuit.elements:
        print(f"I({element.name}) = {solution.branch_current(element.name) * 1e3:.4f} mA")

    dissipated = {}
    for element in circuit.elements:
        if isinstance(element, Resistor):
            i = solution.branch_current(element.name)
            dissipated[element.name] = i * i * element.resistance
            print(f"{element.name} power: P={dissipated[element.name] * 1e3:.3f} mW")

    # Source current flows a -> b inside the source, so delivered power is -V*I.
    delivered = -solution.voltage_diff("vin", "gnd") * solution.branch_current("Vs")
    print(f"Power delivered by Vs: {delivered * 1e3:.3f} mW")
    print(f"Total resistor dissipation: {sum(dissipated.values()) * 1e3:.3f} mW")


if __name__ == "__main__":
    main()
