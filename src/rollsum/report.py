from dataclasses import dataclass

from .adler32 import pack


@dataclass(frozen=True)
class ChecksumReport:
  name: str
  bytes_read: int
  window_size: int
  window_checksum: int
  full_checksum: int | None = None
  window_verified: bool | None = None

  @property
  def window_length(self) -> int:
    return min(self.bytes_read, self.window_size)

  @property
  def window_hex(self) -> str:
    return pack(self.window_checksum).hex()

  @property
  def full_hex(self) -> str | None:
    if self.full_checksum is None:
      return None
    return pack(self.full_checksum).hex()
