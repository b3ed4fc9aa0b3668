from __future__ import annotations

import pytest

from rollsum.adler32 import DIGEST_SIZE, MOD, checksum, pack, unpack
from rollsum.error import InvalidDigest


def test_modulus_is_largest_prime_below_65536() -> None:
  assert MOD == 65521


@pytest.mark.parametrize(
  ('data', 'expected'),
  [
    (b'', 1),
    (b'a', 6422626),
    (b'abc', 38600999),
    (b'Wikipedia', 0x11E60398),
  ],
)
def test_checksum_known_values(data: bytes, expected: int) -> None:
  assert checksum(data) == expected


def test_checksum_continues_from_previous_value() -> None:
  data = b'0123456789' * 1000
  value = 1

  for start in range(0, len(data), 777):
    value = checksum(data[start : start + 777], value)

  assert value == checksum(data)


def test_pack_is_big_endian() -> None:
  assert pack(0x11E60398) == b'\x11\xe6\x03\x98'
  assert len(pack(1)) == DIGEST_SIZE


def test_unpack_reverses_pack() -> None:
  assert unpack(b'\x11\xe6\x03\x98') == 0x11E60398


@pytest.mark.parametrize('digest', [b'', b'\x00\x01', b'\x00' * 5])
def test_unpack_rejects_wrong_length(digest: bytes) -> None:
  with pytest.raises(InvalidDigest):
    unpack(digest)
