"""Server list wire format package.

This package contains the protobuf messages and the length-prefixed record
codec used to persist server lists to disk.
"""

from serverlist_cache.protocol.codec import (
    ServerListDecodeError,
    decode_records,
    encode_records,
    make_record,
)
from serverlist_cache.protocol.messages import ServerRecord, ServerRecordList

__all__ = [
    "ServerListDecodeError",
    "ServerRecord",
    "ServerRecordList",
    "decode_records",
    "encode_records",
    "make_record",
]
