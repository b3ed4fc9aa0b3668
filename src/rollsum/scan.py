from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, Callable

from .adler32 import checksum
from .error import InvalidConfiguration, RollsumError
from .report import ChecksumReport
from .rolling_checksum import RollingChecksum

DEFAULT_WINDOW_SIZE = 4096
DEFAULT_CHUNK_SIZE = 1 << 20  # 1 MiB reads

STDIN_NAME = '-'

ChunkCallback = Callable[[int], None]


def scan_stream(
  stream: BinaryIO,
  window_size: int = DEFAULT_WINDOW_SIZE,
  *,
  name: str = STDIN_NAME,
  chunk_size: int = DEFAULT_CHUNK_SIZE,
  full: bool = False,
  verify: bool = False,
  on_chunk: ChunkCallback | None = None,
) -> ChecksumReport:
  """
  Feed ``stream`` through a rolling checksum and report the checksum of its trailing window.

  With ``full`` the Adler-32 of the entire stream is computed alongside. With ``verify`` the
  rolling value is compared against a from-scratch checksum of the final window contents.
  ``on_chunk`` is called with the size of every chunk read.
  """
  if chunk_size <= 0:
    raise InvalidConfiguration('chunk_size must be a positive integer')

  rolling = RollingChecksum(window_size)
  full_value = 1 if full else None
  bytes_read = 0

  while True:
    chunk = stream.read(chunk_size)

    if not chunk:
      break

    rolling.write(chunk)
    bytes_read += len(chunk)

    if full_value is not None:
      full_value = checksum(chunk, full_value)

    if on_chunk is not None:
      on_chunk(len(chunk))

  verified = None
  if verify:
    verified = checksum(rolling.window_bytes()) == rolling.digest()

  return ChecksumReport(
    name=name,
    bytes_read=bytes_read,
    window_size=window_size,
    window_checksum=rolling.digest(),
    full_checksum=full_value,
    window_verified=verified,
  )


def scan_path(
  path: Path | str,
  window_size: int = DEFAULT_WINDOW_SIZE,
  *,
  chunk_size: int = DEFAULT_CHUNK_SIZE,
  full: bool = False,
  verify: bool = False,
  on_chunk: ChunkCallback | None = None,
) -> ChecksumReport:
  """
  Scan the file at ``path``; ``-`` reads standard input.
  """
  options = dict(chunk_size=chunk_size, full=full, verify=verify, on_chunk=on_chunk)

  if str(path) == STDIN_NAME:
    return scan_stream(sys.stdin.buffer, window_size, name=STDIN_NAME, **options)

  source = Path(path)

  if not source.exists():
    raise RollsumError(f'Input file does not exist: {source}')

  if source.is_dir():
    raise RollsumError(f'Input path is a directory: {source}')

  try:
    with source.open('rb') as fh:
      return scan_stream(fh, window_size, name=str(source), **options)
  except OSError as exc:
    raise RollsumError(str(exc)) from exc
