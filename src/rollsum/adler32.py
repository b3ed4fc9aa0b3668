"""
Whole-buffer Adler-32 helpers.

Adler-32 (RFC 1950) is composed of two sums accumulated per byte: ``s1`` is the sum of all bytes
plus one and ``s2`` is the sum of all ``s1`` values, both modulo 65521. The checksum is stored as
``s2 * 65536 + s1`` in network byte order.
"""

import struct
import zlib

from .error import InvalidDigest

MOD = 65521  # largest prime below 65536
DIGEST_SIZE = 4
MAX_WINDOW_SIZE = (1 << 32) - 1

_DIGEST_FORMAT = struct.Struct('>I')


def checksum(data: bytes | bytearray | memoryview, value: int = 1) -> int:
  """
  Return the Adler-32 of ``data``, continuing from ``value`` when checksumming a stream in parts.
  """
  return zlib.adler32(data, value) & 0xFFFFFFFF


def pack(value: int) -> bytes:
  return _DIGEST_FORMAT.pack(value & 0xFFFFFFFF)


def unpack(digest: bytes | bytearray | memoryview) -> int:
  if len(digest) != DIGEST_SIZE:
    raise InvalidDigest(f'Adler-32 digests are {DIGEST_SIZE} bytes, got {len(digest)}')

  return _DIGEST_FORMAT.unpack(digest)[0]
