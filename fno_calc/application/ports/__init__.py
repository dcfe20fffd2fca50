"""Application ports (interfaces)."""
from fno_calc.application.ports.outbound.input_parser_port import InputParserPort

__all__ = [
    "InputParserPort",
]
