"""
Conversion utilities between SDK enums and gRPC enum codes.
"""
from typing import Dict

from milvus_sdk import models
from milvus_sdk._grpc import milvus_pb2

# --- Enum Mappings ---

# DataType
_PYDANTIC_TO_GRPC_DATA_TYPE_MAP: Dict[models.DataType, int] = {
    models.DataType.BOOL: milvus_pb2.DataType.BOOL,
    models.DataType.INT8: milvus_pb2.DataType.INT8,
    models.DataType.INT16: milvus_pb2.DataType.INT16,
    models.DataType.INT32: milvus_pb2.DataType.INT32,
    models.DataType.INT64: milvus_pb2.DataType.INT64,
    models.DataType.FLOAT: milvus_pb2.DataType.FLOAT,
    models.DataType.DOUBLE: milvus_pb2.DataType.DOUBLE,
    models.DataType.STRING: milvus_pb2.DataType.STRING,
    models.DataType.BINARY_VECTOR: milvus_pb2.DataType.VECTOR_BINARY,
    models.DataType.FLOAT_VECTOR: milvus_pb2.DataType.VECTOR_FLOAT,
}
_GRPC_TO_PYDANTIC_DATA_TYPE_MAP: Dict[int, models.DataType] = {
    v: k for k, v in _PYDANTIC_TO_GRPC_DATA_TYPE_MAP.items()
}

# StatusCode
_GRPC_TO_PYDANTIC_STATUS_CODE_MAP: Dict[int, models.StatusCode] = {
    milvus_pb2.ErrorCode.SUCCESS: models.StatusCode.SUCCESS,
    milvus_pb2.ErrorCode.UNEXPECTED_ERROR: models.StatusCode.UNEXPECTED_ERROR,
    milvus_pb2.ErrorCode.CONNECT_FAILED: models.StatusCode.CONNECT_FAILED,
    milvus_pb2.ErrorCode.PERMISSION_DENIED: models.StatusCode.PERMISSION_DENIED,
    milvus_pb2.ErrorCode.COLLECTION_NOT_EXISTS: models.StatusCode.COLLECTION_NOT_EXISTS,
    milvus_pb2.ErrorCode.ILLEGAL_ARGUMENT: models.StatusCode.ILLEGAL_ARGUMENT,
    milvus_pb2.ErrorCode.ILLEGAL_DIMENSION: models.StatusCode.ILLEGAL_DIMENSION,
    milvus_pb2.ErrorCode.ILLEGAL_COLLECTION_NAME: models.StatusCode.ILLEGAL_COLLECTION_NAME,
}

# --- Conversion Functions ---

def pydantic_to_grpc_data_type(data_type: models.DataType) -> int:
    return _PYDANTIC_TO_GRPC_DATA_TYPE_MAP.get(data_type, milvus_pb2.DataType.NONE)

def grpc_to_pydantic_data_type(data_type_pb: int) -> models.DataType:
    return _GRPC_TO_PYDANTIC_DATA_TYPE_MAP.get(data_type_pb, models.DataType.UNKNOWN)

def grpc_to_pydantic_status_code(error_code_pb: int) -> models.StatusCode:
    return _GRPC_TO_PYDANTIC_STATUS_CODE_MAP.get(error_code_pb, models.StatusCode.UNEXPECTED_ERROR) # Default
