from __future__ import annotations

import argparse
import random
import time
import zlib
from dataclasses import dataclass

from rollsum.rolling_checksum import RollingChecksum


@dataclass(slots=True)
class BenchmarkResult:
  rolling_time: float
  recompute_time: float
  positions: int


def run_benchmark(*, size_kb: int, window_size: int, seed: int) -> BenchmarkResult:
  data = random.Random(seed).randbytes(size_kb * 1024)

  rolling = RollingChecksum(window_size)
  rolling_digests: list[int] = []

  start = time.perf_counter()
  for in_byte in data:
    rolling.roll(in_byte)
    rolling_digests.append(rolling.digest())
  rolling_time = time.perf_counter() - start

  start = time.perf_counter()
  recomputed = [
    zlib.adler32(data[max(0, end - window_size) : end]) for end in range(1, len(data) + 1)
  ]
  recompute_time = time.perf_counter() - start

  if recomputed != rolling_digests:
    raise RuntimeError('Rolling digests diverged from recomputed checksums')

  return BenchmarkResult(
    rolling_time=rolling_time, recompute_time=recompute_time, positions=len(data)
  )


def main() -> None:
  parser = argparse.ArgumentParser(
    description='Compare rolling updates against recomputing Adler-32 for every window.'
  )
  parser.add_argument('--size-kb', type=int, default=1024, help='Size of the input in KiB')
  parser.add_argument('--window-size', type=int, default=4096, help='Rolling window (bytes)')
  parser.add_argument('--seed', type=int, default=1337, help='Seed for the random input')

  args = parser.parse_args()

  result = run_benchmark(size_kb=args.size_kb, window_size=args.window_size, seed=args.seed)

  print('=== Rolling Checksum Benchmark ===')
  print(f'Input size       : {args.size_kb} KiB')
  print(f'Window size      : {args.window_size} bytes')
  print(f'Positions        : {result.positions:,}')
  print()
  print(f'Rolling time     : {result.rolling_time:.2f}s')
  print(f'Recompute time   : {result.recompute_time:.2f}s')
  if result.rolling_time > 0:
    print(f'Speedup          : {result.recompute_time / result.rolling_time:.1f}x')


if __name__ == '__main__':
  main()
