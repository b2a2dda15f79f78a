"""
Milvus Python SDK
"""
__version__ = "0.1.0"

from loguru import logger

from .client import MilvusClient, AsyncMilvusClient
from .mapping import CollectionMapping, EXTRA_PARAM_KEY
from .exceptions import (
    MilvusException,
    MilvusConnectionError,
    MilvusTimeoutError,
    MilvusApiError,
    MilvusInvalidMappingError,
    MilvusClientConfigurationError,
)
from .models import (
    DataType,
    StatusCode,
    CollectionParams,
)

# Library logging is opt-in: logger.enable("milvus_sdk")
logger.disable(__name__)

__all__ = [
    "MilvusClient",
    "AsyncMilvusClient",
    "CollectionMapping",
    "EXTRA_PARAM_KEY",
    # Exceptions
    "MilvusException",
    "MilvusConnectionError",
    "MilvusTimeoutError",
    "MilvusApiError",
    "MilvusInvalidMappingError",
    "MilvusClientConfigurationError",
    # Models & Enums
    "DataType",
    "StatusCode",
    "CollectionParams",
]
