"""Machine definition model and validator."""

from fsmspec.spec.errors import FsmError, ParseError, SpecError, ValidationError
from fsmspec.spec.machine import MachineSpec
from fsmspec.spec.parser import parse, try_parse
from fsmspec.spec.state import StateSpec
from fsmspec.spec.types import UNDEFINED, type_name

__all__ = [
    # Errors
    "FsmError",
    "SpecError",
    "ValidationError",
    "ParseError",
    # Model
    "MachineSpec",
    "StateSpec",
    "UNDEFINED",
    "type_name",
    # Parsing
    "parse",
    "try_parse",
]
