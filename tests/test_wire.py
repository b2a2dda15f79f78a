"""
Tests the generated wire modules against an in-process gRPC server.
"""
from concurrent import futures

import pytest
import grpc # type: ignore

from milvus_sdk import MilvusClient, CollectionMapping, models
from milvus_sdk._grpc import milvus_pb2, milvus_pb2_grpc

class FakeMilvusServicer(milvus_pb2_grpc.MilvusServiceServicer):
    def __init__(self):
        self.created = []

    def CreateCollection(self, request, context):
        self.created.append(request)
        return milvus_pb2.Status(error_code=milvus_pb2.ErrorCode.SUCCESS)

    def DescribeCollection(self, request, context):
        for mapping in self.created:
            if mapping.collection_name == request.collection_name:
                return milvus_pb2.Mapping(
                    status=milvus_pb2.Status(error_code=milvus_pb2.ErrorCode.SUCCESS),
                    collection_name=mapping.collection_name,
                    fields=mapping.fields,
                    extra_params=mapping.extra_params,
                )
        return milvus_pb2.Mapping(
            status=milvus_pb2.Status(error_code=milvus_pb2.ErrorCode.COLLECTION_NOT_EXISTS, reason="missing")
        )

    def ShowCollections(self, request, context):
        return milvus_pb2.CollectionNameList(
            status=milvus_pb2.Status(error_code=milvus_pb2.ErrorCode.SUCCESS),
            collection_names=[m.collection_name for m in self.created],
        )

@pytest.fixture
def servicer():
    return FakeMilvusServicer()

@pytest.fixture
def server_port(servicer):
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=2))
    milvus_pb2_grpc.add_MilvusServiceServicer_to_server(servicer, server)
    port = server.add_insecure_port("localhost:0")
    server.start()
    yield port
    server.stop(None)

def test_service_descriptor_methods():
    service = milvus_pb2.DESCRIPTOR.services_by_name["MilvusService"]
    assert milvus_pb2.DESCRIPTOR.package == "milvus.grpc"
    assert [m.name for m in service.methods] == [
        "CreateCollection", "HasCollection", "DescribeCollection", "ShowCollections", "DropCollection",
    ]
    show = service.methods_by_name["ShowCollections"]
    assert show.input_type.full_name == "milvus.grpc.Command"
    assert show.output_type.full_name == "milvus.grpc.CollectionNameList"

def test_message_field_numbers():
    assert milvus_pb2.FieldParam.NAME_FIELD_NUMBER == 2
    assert milvus_pb2.FieldParam.TYPE_FIELD_NUMBER == 3
    assert milvus_pb2.FieldParam.EXTRA_PARAMS_FIELD_NUMBER == 5
    assert milvus_pb2.Mapping.COLLECTION_NAME_FIELD_NUMBER == 2
    assert milvus_pb2.Mapping.FIELDS_FIELD_NUMBER == 3
    assert milvus_pb2.Mapping.EXTRA_PARAMS_FIELD_NUMBER == 4
    assert milvus_pb2.DataType.VECTOR_BINARY == 100
    assert milvus_pb2.DataType.VECTOR_FLOAT == 101

def test_unknown_type_code_survives_the_wire():
    wire = milvus_pb2.FieldParam(name="future", type=42).SerializeToString()
    assert milvus_pb2.FieldParam.FromString(wire).type == 42

def test_list_collections_over_channel(server_port):
    with MilvusClient(host="localhost", port=server_port, max_retries=0) as client:
        assert client.list_collections() == []

def test_create_then_describe_over_channel(server_port, servicer):
    mapping = (
        CollectionMapping.create("wired")
        .add_field("id", models.DataType.INT64)
        .add_vector_field("embedding", models.DataType.FLOAT_VECTOR, 16)
        .set_params_in_json('{"auto_id": false}')
    )

    with MilvusClient(host="localhost", port=server_port, max_retries=0) as client:
        client.create_collection(mapping)
        assert client.list_collections() == ["wired"]
        described = client.get_collection_info("wired")

    assert described == mapping
    assert described.get_dimension("embedding") == 16
    assert servicer.created[0].fields[1].type == milvus_pb2.DataType.VECTOR_FLOAT
