"""Field function evaluation."""

from .function_processor import FieldType, FunctionProcessor

__all__ = ["FieldType", "FunctionProcessor"]
