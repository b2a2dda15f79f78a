"""
Collection mapping: the schema description sent to CreateCollection and
returned by DescribeCollection.
"""
import json
from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from . import conversions
from . import models
from ._grpc import milvus_pb2
from .exceptions import MilvusInvalidMappingError

# Key of the extra param that carries embedded JSON. The same key is used in
# two containers: a field's extra_params holds its {"dim": n}, the mapping's
# extra_params holds the collection-level options blob.
EXTRA_PARAM_KEY = "params"


def _find_params_in_json(extra_params: Iterable[milvus_pb2.KeyValuePair]) -> Optional[str]:
    # First match wins; later pairs under the same key are never read.
    for kv in extra_params:
        if kv.key == EXTRA_PARAM_KEY:
            return kv.value
    return None


class CollectionMapping:
    """Represents a collection mapping.

    Mutators append to an underlying ``Mapping`` message and return the
    mapping itself, so calls can be chained::

        mapping = (
            CollectionMapping.create("docs")
            .add_field("id", DataType.INT64)
            .add_vector_field("embedding", DataType.FLOAT_VECTOR, 128)
            .set_params_in_json('{"segment_row_limit": 50000}')
        )

    Nothing is validated until :meth:`grpc` is called. A mapping is not safe
    to mutate from several threads at once.
    """

    def __init__(self, mapping: milvus_pb2.Mapping):
        self._mapping = milvus_pb2.Mapping()
        self._mapping.CopyFrom(mapping)
        # Reply status is not part of the schema.
        self._mapping.ClearField("status")

    @classmethod
    def create(cls, collection_name: str) -> "CollectionMapping":
        return cls(milvus_pb2.Mapping(collection_name=collection_name))

    @classmethod
    def from_grpc(cls, mapping: milvus_pb2.Mapping) -> "CollectionMapping":
        """Builds a mapping from a message, e.g. a DescribeCollection reply."""
        return cls(mapping)

    def add_field(self, name: str, data_type: models.DataType) -> "CollectionMapping":
        """
        Add a scalar field.

        Args:
            name: The field name.
            data_type: The field data type.

        Returns:
            This CollectionMapping.
        """
        self._mapping.fields.add(
            name=name,
            type=conversions.pydantic_to_grpc_data_type(data_type),
        )
        return self

    def add_vector_field(self, name: str, data_type: models.DataType, dimension: int) -> "CollectionMapping":
        """
        Add a vector field.

        The dimension is stored as ``{"dim": dimension}`` under
        ``EXTRA_PARAM_KEY`` in the field's own extra params. It is not range
        checked here; the server rejects bad values.

        Args:
            name: The field name.
            data_type: The field data type.
            dimension: The vector dimension.

        Returns:
            This CollectionMapping.
        """
        self._mapping.fields.add(
            name=name,
            type=conversions.pydantic_to_grpc_data_type(data_type),
            extra_params=[
                milvus_pb2.KeyValuePair(key=EXTRA_PARAM_KEY, value=json.dumps({"dim": dimension})),
            ],
        )
        return self

    def get_fields(self) -> List[Dict[str, Any]]:
        """
        Returns one dict per field, in insertion order, with ``"name"`` and
        ``"type"`` keys. Fields carrying extra params also have an
        ``EXTRA_PARAM_KEY`` entry with the raw JSON string.
        """
        fields = []
        for field_pb in self._mapping.fields:
            field: Dict[str, Any] = {
                "name": field_pb.name,
                "type": conversions.grpc_to_pydantic_data_type(field_pb.type),
            }
            params_in_json = _find_params_in_json(field_pb.extra_params)
            if params_in_json is not None:
                field[EXTRA_PARAM_KEY] = params_in_json
            fields.append(field)
        return fields

    def get_dimension(self, field_name: str) -> Optional[int]:
        """
        Returns the vector dimension of the first field named ``field_name``,
        or None if that field has no dimension or its params are not a JSON
        object.

        Raises:
            KeyError: If no field has that name.
        """
        for field_pb in self._mapping.fields:
            if field_pb.name != field_name:
                continue
            params_in_json = _find_params_in_json(field_pb.extra_params)
            if params_in_json is None:
                return None
            params = json.loads(params_in_json)
            if not isinstance(params, dict):
                return None
            return params.get("dim")
        raise KeyError(field_name)

    def set_params_in_json(self, params_in_json: str) -> "CollectionMapping":
        """
        Set extra params as a JSON string.

        Two optional parameters can be included. ``segment_row_limit``
        defaults to 100,000; a merge is triggered once more entities than
        this are inserted into the collection. ``auto_id`` defaults to true,
        in which case entity ids are generated by Milvus.

        Each call appends another pair; only the first one is returned by
        :meth:`get_params_in_json`.

        Returns:
            This CollectionMapping.
        """
        self._mapping.extra_params.add(key=EXTRA_PARAM_KEY, value=params_in_json)
        return self

    def set_params(self, params: models.CollectionParams) -> "CollectionMapping":
        """Typed form of :meth:`set_params_in_json`; unset options are omitted."""
        return self.set_params_in_json(params.model_dump_json(exclude_none=True))

    def get_params_in_json(self) -> Optional[str]:
        return _find_params_in_json(self._mapping.extra_params)

    def get_params(self) -> Optional[models.CollectionParams]:
        params_in_json = self.get_params_in_json()
        if params_in_json is None:
            return None
        return models.CollectionParams.model_validate_json(params_in_json)

    def get_collection_name(self) -> str:
        return self._mapping.collection_name

    @property
    def collection_name(self) -> str:
        return self._mapping.collection_name

    def grpc(self) -> milvus_pb2.Mapping:
        """
        Returns a new ``Mapping`` message for this collection.

        Raises:
            MilvusInvalidMappingError: If no field has been added.
        """
        if len(self._mapping.fields) == 0:
            raise MilvusInvalidMappingError("Fields must not be empty.")
        mapping = milvus_pb2.Mapping()
        mapping.CopyFrom(self._mapping)
        logger.debug(
            "Built mapping for collection '{}' with {} field(s)",
            mapping.collection_name, len(mapping.fields),
        )
        return mapping

    def __eq__(self, other):
        if not isinstance(other, CollectionMapping):
            return NotImplemented
        return self._mapping == other._mapping

    def __str__(self):
        return (
            f"CollectionMapping = {{collectionName = {self.get_collection_name()}, "
            f"fields = {self.get_fields()}, params = {self.get_params_in_json()}}}"
        )

    __repr__ = __str__
