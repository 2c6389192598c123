from typing import Union

from .base import MnaSystem, stamp_conductance, stamp_current_source, stamp_voltage_source  # noqa: F401
from .passive import Resistor  # noqa: F401
from .sources import CurrentSource, VoltageSource  # noqa: F401

Element = Union[Resistor, VoltageSource, CurrentSource]
