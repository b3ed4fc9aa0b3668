from typing import Iterable, Iterator

from .adler32 import DIGEST_SIZE, MAX_WINDOW_SIZE, MOD, pack
from .error import InvalidConfiguration


class RollingChecksum:
  """
  Adler-32 over a sliding window of the most recent ``window_size`` bytes.

  After every consumed byte the state equals the Adler-32 of the last ``window_size`` bytes of the
  stream, or of the whole stream while it is still shorter than the window. Each byte costs O(1):
  the incoming byte is added and the byte leaving the window is subtracted from both sums.

  Instances are not safe for concurrent use; callers feeding one instance from several threads
  must serialise access themselves.
  """

  digest_size = DIGEST_SIZE

  def __init__(self, window_size: int):
    if isinstance(window_size, bool) or not isinstance(window_size, int):
      raise InvalidConfiguration(f'window_size must be an integer, got {window_size!r}')

    if not 1 <= window_size <= MAX_WINDOW_SIZE:
      raise InvalidConfiguration(
        f'window_size must be between 1 and {MAX_WINDOW_SIZE}, got {window_size}'
      )

    self._window_size = window_size
    self._window = bytearray(window_size)
    # Multiple of MOD large enough that adding it keeps s1 non-negative after an eviction.
    self._offset = ((255 * window_size) // MOD + 1) * MOD
    self.reset()

  @property
  def window_size(self) -> int:
    return self._window_size

  @property
  def position(self) -> int:
    return self._position

  @property
  def filled(self) -> bool:
    return self._filled

  @property
  def s1(self) -> int:
    return self._s1

  @property
  def s2(self) -> int:
    return self._s2

  def reset(self) -> None:
    self._s1 = 1
    self._s2 = 0
    self._position = 0
    self._filled = False
    self._window[:] = bytes(self._window_size)

  def roll(self, in_byte: int) -> None:
    """Consume a single byte, evicting the oldest one once the window is full."""
    position = self._position
    evicted = self._window[position]

    # Store first so an out-of-range byte is rejected before the sums change.
    self._window[position] = in_byte

    s1 = self._s1 + in_byte + self._offset - evicted
    s2 = self._s2 + s1 - self._window_size * evicted

    # Once the window has wrapped, every roll also drops one "+1" term from s2.
    if self._filled:
      s2 -= 1

    self._s1 = s1 % MOD
    self._s2 = s2 % MOD

    position += 1
    if position == self._window_size:
      position = 0
      self._filled = True
    self._position = position

  def update(self, data: Iterable[int]) -> None:
    """
    Consume ``data`` in order.

    The result is identical to calling :meth:`roll` once per byte, however the input is split.
    If an invalid element is encountered, the bytes before it stay consumed.
    """
    window = self._window
    size = self._window_size
    offset = self._offset
    s1, s2 = self._s1, self._s2
    position, filled = self._position, self._filled

    try:
      for in_byte in data:
        evicted = window[position]
        window[position] = in_byte

        s1 = (s1 + in_byte + offset - evicted) % MOD
        s2 = s2 + s1 - size * evicted
        if filled:
          s2 -= 1
        s2 %= MOD

        position += 1
        if position == size:
          position = 0
          filled = True
    finally:
      self._s1, self._s2 = s1, s2
      self._position, self._filled = position, filled

  def write(self, data: bytes | bytearray | memoryview) -> int:
    view = memoryview(data).cast('B')
    self.update(view)
    return len(view)

  def digest(self) -> int:
    return (self._s2 << 16) | self._s1

  def digest_bytes(self) -> bytes:
    return pack(self.digest())

  def hexdigest(self) -> str:
    return self.digest_bytes().hex()

  def window_bytes(self) -> bytes:
    """Return the bytes currently covered by the checksum, oldest first."""
    if not self._filled:
      return bytes(self._window[: self._position])

    return bytes(self._window[self._position :] + self._window[: self._position])


def rolling_digests(data: Iterable[int], window_size: int) -> Iterator[int]:
  """Yield the windowed checksum after each byte of ``data``."""
  rolling = RollingChecksum(window_size)

  for in_byte in data:
    rolling.roll(in_byte)
    yield rolling.digest()
