from __future__ import annotations

import io
import random
import sys
import zlib
from pathlib import Path

import pytest

from rollsum.error import InvalidConfiguration, RollsumError
from rollsum.scan import scan_path, scan_stream


def test_scan_stream_reports_trailing_window() -> None:
  data = random.Random(5).randbytes(10_000)

  report = scan_stream(io.BytesIO(data), 1024, chunk_size=300)

  assert report.name == '-'
  assert report.bytes_read == len(data)
  assert report.window_size == 1024
  assert report.window_length == 1024
  assert report.window_checksum == zlib.adler32(data[-1024:])
  assert report.full_checksum is None
  assert report.full_hex is None
  assert report.window_verified is None


def test_scan_stream_short_input_covers_everything() -> None:
  report = scan_stream(io.BytesIO(b'Wikipedia'), 32)

  assert report.window_length == 9
  assert report.window_hex == '11e60398'


def test_scan_stream_full_checksum_and_verify() -> None:
  data = random.Random(6).randbytes(5000)

  report = scan_stream(io.BytesIO(data), 100, chunk_size=64, full=True, verify=True)

  assert report.full_checksum == zlib.adler32(data)
  assert report.full_hex == zlib.adler32(data).to_bytes(4, 'big').hex()
  assert report.window_verified is True


def test_scan_stream_calls_on_chunk_for_each_read() -> None:
  sizes: list[int] = []

  scan_stream(io.BytesIO(b'x' * 250), 16, chunk_size=100, on_chunk=sizes.append)

  assert sizes == [100, 100, 50]


def test_scan_stream_rejects_non_positive_chunk_size() -> None:
  with pytest.raises(InvalidConfiguration):
    scan_stream(io.BytesIO(b'abc'), 16, chunk_size=0)


def test_scan_stream_rejects_bad_window_size() -> None:
  with pytest.raises(InvalidConfiguration):
    scan_stream(io.BytesIO(b'abc'), 0)


def test_scan_path_reads_file(tmp_path: Path) -> None:
  target = tmp_path / 'data.bin'
  data = random.Random(8).randbytes(3000)
  target.write_bytes(data)

  report = scan_path(target, 255, chunk_size=128)

  assert report.name == str(target)
  assert report.bytes_read == 3000
  assert report.window_checksum == zlib.adler32(data[-255:])


def test_scan_path_empty_file(tmp_path: Path) -> None:
  target = tmp_path / 'empty.bin'
  target.write_bytes(b'')

  report = scan_path(target, 64, full=True, verify=True)

  assert report.bytes_read == 0
  assert report.window_checksum == 1
  assert report.full_checksum == 1
  assert report.window_verified is True


def test_scan_path_missing_file(tmp_path: Path) -> None:
  with pytest.raises(RollsumError, match='does not exist'):
    scan_path(tmp_path / 'missing.bin')


def test_scan_path_directory(tmp_path: Path) -> None:
  with pytest.raises(RollsumError, match='is a directory'):
    scan_path(tmp_path)


def test_scan_path_wraps_os_errors(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
  target = tmp_path / 'data.bin'
  target.write_bytes(b'abc')

  def explode(*_: object, **__: object) -> None:
    raise PermissionError('permission denied')

  monkeypatch.setattr(Path, 'open', explode)

  with pytest.raises(RollsumError, match='permission denied') as excinfo:
    scan_path(target)

  assert isinstance(excinfo.value.__cause__, PermissionError)


def test_scan_path_dash_reads_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
  monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(b'Wikipedia')))

  report = scan_path('-', 32)

  assert report.name == '-'
  assert report.window_checksum == 0x11E60398
