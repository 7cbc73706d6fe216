"""Wire Schema: versioned protobuf definition of the record sent to aggregation workers.

Invariants:
    - Field numbers are fixed per WIRE_SCHEMA_VERSION and never reused
    - Layout is bit-compatible with the aggregation workers' AggregatablePayload:
          message StandardCiphertext  { bytes data = 1; }
          message AggregatablePayload { StandardCiphertext payload = 1;
                                        string shared_info = 2;
                                        string key_id = 3; }
    - Built once at import into a private DescriptorPool; read-only afterwards
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory


WIRE_SCHEMA_VERSION: int = 1
WIRE_PACKAGE: str = f"aggregation_service.wire.v{WIRE_SCHEMA_VERSION}"

_Field = descriptor_pb2.FieldDescriptorProto


def build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    """Descriptor of the wire schema for the current version."""
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=f"aggregation_service/wire/v{WIRE_SCHEMA_VERSION}/aggregatable_payload.proto",
        package=WIRE_PACKAGE,
        syntax="proto3",
    )

    ciphertext = file_proto.message_type.add(name="StandardCiphertext")
    ciphertext.field.add(
        name="data", number=1,
        type=_Field.TYPE_BYTES, label=_Field.LABEL_OPTIONAL,
    )

    payload = file_proto.message_type.add(name="AggregatablePayload")
    payload.field.add(
        name="payload", number=1,
        type=_Field.TYPE_MESSAGE, label=_Field.LABEL_OPTIONAL,
        type_name=f".{WIRE_PACKAGE}.StandardCiphertext",
    )
    payload.field.add(
        name="shared_info", number=2,
        type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL,
    )
    payload.field.add(
        name="key_id", number=3,
        type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL,
    )
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(build_file_descriptor().SerializeToString())

AggregatablePayloadMessage = message_factory.GetMessageClass(
    _pool.FindMessageTypeByName(f"{WIRE_PACKAGE}.AggregatablePayload"),
)
