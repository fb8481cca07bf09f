"""Length-prefixed record codec for the server list file.

Each record is written as protobuf field 1 with wire type 2: the tag byte
``0x0A``, a base-128 varint byte length, then the serialized ServerRecord.
A stream of such records is byte-for-byte a serialized ServerRecordList, so
the whole file is encoded and decoded through that wrapper message.
"""

import logging
from collections.abc import Iterable

from google.protobuf.message import DecodeError, Message

from serverlist_cache.protocol.messages import ServerRecord, ServerRecordList

logger = logging.getLogger(__name__)


class ServerListDecodeError(ValueError):
    """Raised when stored server list bytes cannot be decoded."""


def make_record(address: str, port: int) -> Message:
    """Create a ServerRecord message."""
    return ServerRecord(address=address, port=port)


def encode_records(records: Iterable[Message]) -> bytes:
    """Encode records as a sequence of length-delimited messages.

    Args:
        records: ServerRecord messages in write order

    Returns:
        Encoded bytes; empty when there are no records

    """
    record_list = ServerRecordList()
    record_list.records.extend(records)
    return record_list.SerializeToString()


def decode_records(data: bytes) -> list[Message]:
    """Decode a sequence of length-delimited records until end of stream.

    Args:
        data: Bytes previously produced by encode_records

    Returns:
        ServerRecord messages in stored order

    Raises:
        ServerListDecodeError: If the data is truncated, not valid protobuf
            or holds an address that is not valid UTF-8

    """
    if not data:
        return []

    try:
        record_list = ServerRecordList.FromString(data)
    except (DecodeError, UnicodeDecodeError) as e:
        msg = f"Unable to decode server list ({len(data)} bytes): {e}"
        raise ServerListDecodeError(msg) from e

    logger.debug("Decoded %d server records", len(record_list.records))
    return list(record_list.records)
