"""Runtime template parameters."""

from balsapy.parameters.parameters import (
    AsParameters,
    PythonScalar,
    TemplateParameters,
    resolve_parameters,
    to_value,
)

__all__ = [
    "AsParameters",
    "PythonScalar",
    "TemplateParameters",
    "resolve_parameters",
    "to_value",
]
