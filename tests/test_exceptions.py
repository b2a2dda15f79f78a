"""
Unit tests for the SDK exceptions.
"""
import grpc # type: ignore
import grpc.aio # type: ignore

from milvus_sdk.exceptions import MilvusApiError, MilvusException

def test_api_error_reads_code_and_details_from_rpc_error():
    error = grpc.RpcError("Mock gRPC error")
    error.code = lambda: grpc.StatusCode.NOT_FOUND
    error.details = lambda: "collection missing"

    api_error = MilvusApiError("Failed", grpc_error=error)

    assert api_error.status_code == "NOT_FOUND"
    assert api_error.details == "collection missing"
    assert api_error.grpc_error is error
    assert str(api_error) == "Failed (Status Code: NOT_FOUND) Details: collection missing"

def test_api_error_reads_aio_rpc_error():
    error = grpc.aio.AioRpcError(
        grpc.StatusCode.UNAVAILABLE,
        initial_metadata=grpc.aio.Metadata(),
        trailing_metadata=grpc.aio.Metadata(),
        details="server down",
    )

    api_error = MilvusApiError("Failed", grpc_error=error)

    assert api_error.status_code == "UNAVAILABLE"
    assert api_error.details == "server down"

def test_api_error_without_rpc_accessors_keeps_given_values():
    api_error = MilvusApiError("Failed", grpc_error=RuntimeError("boom"), status_code="ILLEGAL_ARGUMENT")

    assert api_error.status_code == "ILLEGAL_ARGUMENT"
    assert api_error.details is None
    assert str(api_error) == "Failed (Status Code: ILLEGAL_ARGUMENT)"

def test_api_error_from_status_only():
    api_error = MilvusApiError("Failed to drop", status_code="COLLECTION_NOT_EXISTS", details="gone")

    assert isinstance(api_error, MilvusException)
    assert api_error.grpc_error is None
    assert str(api_error) == "Failed to drop (Status Code: COLLECTION_NOT_EXISTS) Details: gone"
