"""
Domain models for the call boundary.

Contains the immutable Pydantic models exchanged at the operation
boundary: OperationCall, OperationResult, OperationError.
"""

from mathengine.core.domain.operation_call import OperationCall
from mathengine.core.domain.operation_result import OperationError, OperationResult
from mathengine.core.math.numerical_safeguards import ErrorKind

__all__ = [
    "ErrorKind",
    "OperationCall",
    "OperationError",
    "OperationResult",
]
