"""
Pydantic models and enums for the Milvus SDK.

These are the Pythonic counterparts of the enums and option blobs carried
by the Milvus gRPC API. Wire messages themselves live in ``_grpc``; the
translation between the two is in ``conversions``.
"""
from typing import Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field # type: ignore

# --- Enums ---

class DataType(str, Enum):
    """Data type of a collection field."""
    BOOL = "BOOL"
    INT8 = "INT8"
    INT16 = "INT16"
    INT32 = "INT32"
    INT64 = "INT64"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    STRING = "STRING"
    BINARY_VECTOR = "BINARY_VECTOR"
    FLOAT_VECTOR = "FLOAT_VECTOR"
    # Any code the SDK does not recognise, including the wire's NONE.
    UNKNOWN = "UNKNOWN"

class StatusCode(str, Enum):
    """Error codes carried in a server Status reply."""
    SUCCESS = "SUCCESS"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"
    CONNECT_FAILED = "CONNECT_FAILED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    COLLECTION_NOT_EXISTS = "COLLECTION_NOT_EXISTS"
    ILLEGAL_ARGUMENT = "ILLEGAL_ARGUMENT"
    ILLEGAL_DIMENSION = "ILLEGAL_DIMENSION"
    ILLEGAL_COLLECTION_NAME = "ILLEGAL_COLLECTION_NAME"

# --- Collection-level options ---

class CollectionParams(BaseModel):
    """
    Collection options sent as the mapping's JSON extra params.

    ``segment_row_limit`` defaults to 100,000 on the server; a merge is
    triggered once more entities than this are inserted. ``auto_id`` defaults
    to true, in which case entity ids are generated by Milvus.
    """
    model_config = ConfigDict(extra="allow")

    segment_row_limit: Optional[int] = Field(None, gt=0)
    auto_id: Optional[bool] = None

__all__ = [
    "DataType",
    "StatusCode",
    "CollectionParams",
]
