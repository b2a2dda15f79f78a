"""
Main client for interacting with a Milvus server.
"""
import time
import random
import asyncio
from typing import Optional, List, Any, Tuple, Callable, Awaitable
import grpc # type: ignore
import grpc.aio # For async client
from loguru import logger

# gRPC messages and stub
from ._grpc import milvus_pb2
from ._grpc import milvus_pb2_grpc

from . import conversions
from .mapping import CollectionMapping

# Custom exceptions
from .exceptions import (
    MilvusConnectionError,
    MilvusApiError,
    MilvusClientConfigurationError,
    MilvusException,
    MilvusTimeoutError,
)

DEFAULT_PORT = 19530


def _validate_tls_options(private_key: Optional[bytes], certificate_chain: Optional[bytes]) -> None:
    if (private_key is None) != (certificate_chain is None):
        raise MilvusClientConfigurationError(
            "private_key and certificate_chain must be provided together for mutual TLS."
        )


def _check_status(status: milvus_pb2.Status, operation_name: str) -> None:
    """Raises MilvusApiError when a reply Status is not SUCCESS."""
    if status.error_code != milvus_pb2.ErrorCode.SUCCESS:
        status_code = conversions.grpc_to_pydantic_status_code(status.error_code)
        raise MilvusApiError(
            f"Failed to {operation_name}",
            status_code=status_code.value,
            details=status.reason or None,
        )


def _api_error_from_rpc(e: grpc.RpcError, operation_name: str) -> MilvusException:
    if hasattr(e, 'code') and callable(e.code) and e.code() == grpc.StatusCode.DEADLINE_EXCEEDED:
        return MilvusTimeoutError(f"Timed out during {operation_name}")
    return MilvusApiError(f"Failed to {operation_name}", grpc_error=e)


class MilvusClient:
    """
    The main synchronous client for interacting with a Milvus server.
    """
    def __init__(
        self,
        host: str = "localhost",
        port: int = DEFAULT_PORT,
        timeout: Optional[float] = None,
        secure: bool = False,
        root_certs: Optional[bytes] = None,
        private_key: Optional[bytes] = None,
        certificate_chain: Optional[bytes] = None,
        grpc_options: Optional[List[Tuple[str, Any]]] = None,
        retries_enabled: bool = True,
        max_retries: int = 3,
        initial_backoff_ms: int = 200,
        max_backoff_ms: int = 5000,
        backoff_multiplier: float = 1.5,
        retry_jitter: bool = True,
        retryable_status_codes: Optional[List[grpc.StatusCode]] = None,
    ):
        _validate_tls_options(private_key, certificate_chain)

        self.host = host
        self.port = port
        self.timeout = timeout
        self.secure = secure
        self.root_certs = root_certs
        self.private_key = private_key
        self.certificate_chain = certificate_chain
        self.grpc_options = grpc_options

        # Retry configuration
        self.retries_enabled = retries_enabled
        self.max_retries = max_retries
        self.initial_backoff_ms = initial_backoff_ms
        self.max_backoff_ms = max_backoff_ms
        self.backoff_multiplier = backoff_multiplier
        self.retry_jitter = retry_jitter
        self.retryable_status_codes = retryable_status_codes or [
            grpc.StatusCode.UNAVAILABLE,
            grpc.StatusCode.RESOURCE_EXHAUSTED,
        ]

        self._channel: Optional[grpc.Channel] = None
        self._stub: Optional[milvus_pb2_grpc.MilvusServiceStub] = None

        self._connect()

    def _connect(self) -> None:
        """Establishes the gRPC connection."""
        if self._channel:
            self._channel.close()

        target = f"{self.host}:{self.port}"
        try:
            if self.secure:
                credentials = grpc.ssl_channel_credentials(
                    root_certificates=self.root_certs,
                    private_key=self.private_key,
                    certificate_chain=self.certificate_chain
                )
                self._channel = grpc.secure_channel(target, credentials, options=self.grpc_options)
            else:
                self._channel = grpc.insecure_channel(target, options=self.grpc_options)

            self._stub = milvus_pb2_grpc.MilvusServiceStub(self._channel)
            logger.debug("Opened {} channel to {}", "secure" if self.secure else "insecure", target)

        except grpc.RpcError as e:
            raise MilvusConnectionError(f"Failed to connect to Milvus at {target}: {e}")
        except Exception as e:
            raise MilvusConnectionError(f"An unexpected error occurred while connecting to {target}: {e}")

    def close(self) -> None:
        """Closes the gRPC connection."""
        if self._channel:
            self._channel.close()
            self._channel = None
            self._stub = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # --- Retry Helper ---
    def _execute_with_retry(self, grpc_call: Callable, operation_name: str, *args, **kwargs):
        """
        Executes a gRPC call with retry logic for specific error codes.
        """
        if not self.retries_enabled:
            try:
                return grpc_call(*args, **kwargs)
            except grpc.RpcError as e:
                raise _api_error_from_rpc(e, operation_name)
            except MilvusApiError:
                raise
            except Exception as e:
                raise MilvusException(f"An unexpected error occurred during {operation_name}: {e}")

        current_backoff_ms = self.initial_backoff_ms

        for attempt in range(self.max_retries + 1):
            try:
                return grpc_call(*args, **kwargs)
            except grpc.RpcError as e:
                if hasattr(e, 'code') and callable(e.code) and e.code() in self.retryable_status_codes:
                    if attempt < self.max_retries:
                        sleep_duration_ms = current_backoff_ms
                        if self.retry_jitter:
                            sleep_duration_ms *= (1 + random.uniform(-0.1, 0.1))

                        logger.debug(
                            "Retrying {} after {} (attempt {}/{}, sleeping {:.0f}ms)",
                            operation_name, e.code(), attempt + 1, self.max_retries, sleep_duration_ms,
                        )
                        time.sleep(sleep_duration_ms / 1000.0)

                        current_backoff_ms = min(self.max_backoff_ms, current_backoff_ms * self.backoff_multiplier)
                        continue
                    logger.warning("Giving up on {} after {} retries", operation_name, self.max_retries)
                raise _api_error_from_rpc(e, operation_name)
            except MilvusApiError:
                raise
            except Exception as e:
                raise MilvusException(f"An unexpected error occurred during {operation_name}: {e}")

        raise MilvusException(f"Failed to {operation_name} after all retries, but no gRPC exception was captured.")

    def _require_stub(self) -> milvus_pb2_grpc.MilvusServiceStub:
        if not self._stub:
            raise MilvusConnectionError("Client not connected.")
        return self._stub

    # --- Collection Methods ---
    def create_collection(self, mapping: CollectionMapping) -> None:
        """
        Creates a collection from ``mapping``.

        Raises:
            MilvusInvalidMappingError: If the mapping has no fields. No RPC is made.
        """
        stub = self._require_stub()
        operation_name = f"create collection '{mapping.get_collection_name()}'"
        request = mapping.grpc()
        status = self._execute_with_retry(stub.CreateCollection, operation_name, request, timeout=self.timeout)
        _check_status(status, operation_name)

    def has_collection(self, collection_name: str) -> bool:
        stub = self._require_stub()
        operation_name = f"check collection '{collection_name}'"
        request = milvus_pb2.CollectionName(collection_name=collection_name)
        reply = self._execute_with_retry(stub.HasCollection, operation_name, request, timeout=self.timeout)
        _check_status(reply.status, operation_name)
        return reply.bool_reply

    def get_collection_info(self, collection_name: str) -> CollectionMapping:
        """Describes a collection, returning its mapping as stored by the server."""
        stub = self._require_stub()
        operation_name = f"get collection info for '{collection_name}'"
        request = milvus_pb2.CollectionName(collection_name=collection_name)
        response = self._execute_with_retry(stub.DescribeCollection, operation_name, request, timeout=self.timeout)
        _check_status(response.status, operation_name)
        return CollectionMapping.from_grpc(response)

    def list_collections(self) -> List[str]:
        stub = self._require_stub()
        reply = self._execute_with_retry(stub.ShowCollections, "list collections", milvus_pb2.Command(), timeout=self.timeout)
        _check_status(reply.status, "list collections")
        return list(reply.collection_names)

    def drop_collection(self, collection_name: str) -> None:
        stub = self._require_stub()
        operation_name = f"drop collection '{collection_name}'"
        request = milvus_pb2.CollectionName(collection_name=collection_name)
        status = self._execute_with_retry(stub.DropCollection, operation_name, request, timeout=self.timeout)
        _check_status(status, operation_name)


class AsyncMilvusClient:
    """
    The main asynchronous client for interacting with a Milvus server.
    """
    def __init__(
        self,
        host: str = "localhost",
        port: int = DEFAULT_PORT,
        timeout: Optional[float] = None,
        secure: bool = False,
        root_certs: Optional[bytes] = None,
        private_key: Optional[bytes] = None,
        certificate_chain: Optional[bytes] = None,
        grpc_options: Optional[List[Tuple[str, Any]]] = None,
        retries_enabled: bool = True,
        max_retries: int = 3,
        initial_backoff_ms: int = 200,
        max_backoff_ms: int = 5000,
        backoff_multiplier: float = 1.5,
        retry_jitter: bool = True,
        retryable_status_codes: Optional[List[grpc.StatusCode]] = None,
    ):
        _validate_tls_options(private_key, certificate_chain)

        self.host = host
        self.port = port
        self.timeout = timeout
        self.secure = secure
        self.root_certs = root_certs
        self.private_key = private_key
        self.certificate_chain = certificate_chain
        self.grpc_options = grpc_options

        self.retries_enabled = retries_enabled
        self.max_retries = max_retries
        self.initial_backoff_ms = initial_backoff_ms
        self.max_backoff_ms = max_backoff_ms
        self.backoff_multiplier = backoff_multiplier
        self.retry_jitter = retry_jitter
        self.retryable_status_codes = retryable_status_codes or [
            grpc.StatusCode.UNAVAILABLE,
            grpc.StatusCode.RESOURCE_EXHAUSTED,
        ]

        self._channel: Optional[grpc.aio.Channel] = None
        self._stub: Optional[milvus_pb2_grpc.MilvusServiceStub] = None

    async def connect(self) -> None:
        if self._channel:
            await self._channel.close()

        target = f"{self.host}:{self.port}"
        try:
            if self.secure:
                credentials = grpc.ssl_channel_credentials(
                    root_certificates=self.root_certs,
                    private_key=self.private_key,
                    certificate_chain=self.certificate_chain
                )
                self._channel = grpc.aio.secure_channel(target, credentials, options=self.grpc_options)
            else:
                self._channel = grpc.aio.insecure_channel(target, options=self.grpc_options)

            self._stub = milvus_pb2_grpc.MilvusServiceStub(self._channel)
            logger.debug("Opened async {} channel to {}", "secure" if self.secure else "insecure", target)

        except grpc.aio.AioRpcError as e:
            raise MilvusConnectionError(f"Failed to connect to Milvus at {target}: {e}")
        except Exception as e:
            raise MilvusConnectionError(f"An unexpected error occurred while connecting to {target}: {e}")

    async def close(self) -> None:
        if self._channel:
            await self._channel.close()
            self._channel = None
            self._stub = None

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # --- Async Retry Helper ---
    async def _execute_with_retry_async(self, async_grpc_call: Callable[..., Awaitable], operation_name: str, *args, **kwargs):
        """
        Executes an asynchronous gRPC call with retry logic.
        """
        if not self.retries_enabled:
            try:
                return await async_grpc_call(*args, **kwargs)
            except grpc.aio.AioRpcError as e:
                raise _api_error_from_rpc(e, operation_name)
            except MilvusApiError:
                raise
            except Exception as e:
                raise MilvusException(f"An unexpected error occurred during {operation_name}: {e}")

        current_backoff_ms = self.initial_backoff_ms

        for attempt in range(self.max_retries + 1):
            try:
                return await async_grpc_call(*args, **kwargs)
            except grpc.aio.AioRpcError as e:
                if e.code() in self.retryable_status_codes:
                    if attempt < self.max_retries:
                        sleep_duration_ms = current_backoff_ms
                        if self.retry_jitter:
                            sleep_duration_ms *= (1 + random.uniform(-0.1, 0.1))

                        logger.debug(
                            "Retrying {} after {} (attempt {}/{}, sleeping {:.0f}ms)",
                            operation_name, e.code(), attempt + 1, self.max_retries, sleep_duration_ms,
                        )
                        await asyncio.sleep(sleep_duration_ms / 1000.0)

                        current_backoff_ms = min(self.max_backoff_ms, current_backoff_ms * self.backoff_multiplier)
                        continue
                    logger.warning("Giving up on {} after {} retries", operation_name, self.max_retries)
                raise _api_error_from_rpc(e, operation_name)
            except MilvusApiError:
                raise
            except Exception as e:
                raise MilvusException(f"An unexpected error occurred during {operation_name}: {e}")

        raise MilvusException(f"Failed to {operation_name} after all retries, but no gRPC exception was captured (async).")

    async def _require_stub(self) -> milvus_pb2_grpc.MilvusServiceStub:
        if not self._stub:
            await self.connect()
            if not self._stub:
                raise MilvusConnectionError("Client not connected after connect attempt.")
        return self._stub

    # --- Async Collection Methods ---
    async def create_collection(self, mapping: CollectionMapping) -> None:
        # Validate before connecting so an empty mapping never reaches the wire.
        request = mapping.grpc()
        stub = await self._require_stub()
        operation_name = f"create collection '{mapping.get_collection_name()}'"
        status = await self._execute_with_retry_async(stub.CreateCollection, operation_name, request, timeout=self.timeout)
        _check_status(status, operation_name)

    async def has_collection(self, collection_name: str) -> bool:
        stub = await self._require_stub()
        operation_name = f"check collection '{collection_name}'"
        request = milvus_pb2.CollectionName(collection_name=collection_name)
        reply = await self._execute_with_retry_async(stub.HasCollection, operation_name, request, timeout=self.timeout)
        _check_status(reply.status, operation_name)
        return reply.bool_reply

    async def get_collection_info(self, collection_name: str) -> CollectionMapping:
        stub = await self._require_stub()
        operation_name = f"get collection info for '{collection_name}'"
        request = milvus_pb2.CollectionName(collection_name=collection_name)
        response = await self._execute_with_retry_async(stub.DescribeCollection, operation_name, request, timeout=self.timeout)
        _check_status(response.status, operation_name)
        return CollectionMapping.from_grpc(response)

    async def list_collections(self) -> List[str]:
        stub = await self._require_stub()
        reply = await self._execute_with_retry_async(stub.ShowCollections, "list collections", milvus_pb2.Command(), timeout=self.timeout)
        _check_status(reply.status, "list collections")
        return list(reply.collection_names)

    async def drop_collection(self, collection_name: str) -> None:
        stub = await self._require_stub()
        operation_name = f"drop collection '{collection_name}'"
        request = milvus_pb2.CollectionName(collection_name=collection_name)
        status = await self._execute_with_retry_async(stub.DropCollection, operation_name, request, timeout=self.timeout)
        _check_status(status, operation_name)
