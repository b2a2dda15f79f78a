"""
Custom exceptions for the Milvus SDK.
"""

class MilvusException(Exception):
    """Base exception for all Milvus SDK errors."""
    pass

class MilvusConnectionError(MilvusException):
    """Raised when there's an issue connecting to the Milvus server."""
    pass

class MilvusTimeoutError(MilvusException):
    """Raised when an operation exceeds its deadline."""
    pass

class MilvusInvalidMappingError(MilvusException, ValueError):
    """Raised when a collection mapping cannot be converted to its wire form."""
    pass

class MilvusApiError(MilvusException):
    """Raised for errors returned by the Milvus API, either as a gRPC failure or a non-SUCCESS status."""
    def __init__(self, message: str, grpc_error: Exception = None, status_code=None, details: str = None):
        super().__init__(message)
        self.grpc_error = grpc_error
        self.status_code = status_code
        self.details = details

        if grpc_error:
            if hasattr(grpc_error, 'code') and callable(grpc_error.code):
                try:
                    self.status_code = grpc_error.code().name
                except Exception:
                    pass  # Keep original status_code if any

            if hasattr(grpc_error, 'details') and callable(grpc_error.details):
                try:
                    self.details = grpc_error.details()
                except Exception:
                    pass  # Keep original details if any

    def __str__(self):
        base_str = super().__str__()
        if self.status_code:
            base_str += f" (Status Code: {self.status_code})"
        if self.details:
            base_str += f" Details: {self.details}"
        return base_str

class MilvusClientConfigurationError(MilvusException):
    """Raised for client configuration errors."""
    pass
