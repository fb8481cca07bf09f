"""Protobuf messages for the on-disk server list.

The schema is equivalent to::

    syntax = "proto3";
    package serverlist_cache;

    message ServerRecord {
        string address = 1;
        int32 port = 2;
    }

    message ServerRecordList {
        repeated ServerRecord records = 1;
    }

It is registered at import time in a private descriptor pool so the package
needs no protoc build step and cannot clash with other users of the default
pool.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import Message

PROTO_PACKAGE = "serverlist_cache"

_Field = descriptor_pb2.FieldDescriptorProto


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="serverlist_cache/serverlist.proto",
        package=PROTO_PACKAGE,
        syntax="proto3",
    )

    record = file_proto.message_type.add(name="ServerRecord")
    record.field.add(
        name="address", number=1, type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL
    )
    record.field.add(name="port", number=2, type=_Field.TYPE_INT32, label=_Field.LABEL_OPTIONAL)

    record_list = file_proto.message_type.add(name="ServerRecordList")
    record_list.field.add(
        name="records",
        number=1,
        type=_Field.TYPE_MESSAGE,
        label=_Field.LABEL_REPEATED,
        type_name=f".{PROTO_PACKAGE}.ServerRecord",
    )
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file_descriptor().SerializeToString())

ServerRecord: type[Message] = message_factory.GetMessageClass(
    _pool.FindMessageTypeByName(f"{PROTO_PACKAGE}.ServerRecord")
)
ServerRecordList: type[Message] = message_factory.GetMessageClass(
    _pool.FindMessageTypeByName(f"{PROTO_PACKAGE}.ServerRecordList")
)
