from __future__ import annotations

from contextlib import nullcontext
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

from rich.console import Console
from rich.progress import (
  BarColumn,
  DownloadColumn,
  Progress,
  TaskID,
  TaskProgressColumn,
  TextColumn,
  TimeRemainingColumn,
)
from rich.table import Table

from rollsum.arguments import Arguments
from rollsum.error import InvalidConfiguration, RollsumError
from rollsum.report import ChecksumReport
from rollsum.scan import STDIN_NAME, ChunkCallback, scan_path


def _validate(args: Arguments) -> None:
  if args.window_size <= 0:
    raise InvalidConfiguration('--window-size must be a positive integer')

  if args.chunk_size <= 0:
    raise InvalidConfiguration('--chunk-size must be a positive integer')


def _total_bytes(paths: Iterable[Path]) -> Optional[int]:
  total = 0

  for path in paths:
    if str(path) == STDIN_NAME:
      return None

    try:
      total += path.stat().st_size
    except OSError:
      continue

  return total


def _wrap_with_progress(
  paths: Sequence[Path], console: Console, *, enable_progress: bool = True
) -> Tuple[Optional[ChunkCallback], Optional[Progress]]:
  total = _total_bytes(paths)

  progress = Progress(
    TextColumn('[progress.description]{task.description}'),
    BarColumn(),
    TaskProgressColumn(),
    DownloadColumn(),
    TimeRemainingColumn(),
    console=console,
    transient=True,
    disable=(not enable_progress) or (not console.is_interactive) or total == 0,
  )

  if progress.disable:
    return None, None

  task_id: TaskID = progress.add_task('Checksumming', total=total)

  def on_chunk(size: int) -> None:
    progress.advance(task_id, size)

  return on_chunk, progress


def _describe(report: ChecksumReport) -> str:
  return (
    f'{report.name}: {report.window_hex} '
    f'(last {report.window_length:,} of {report.bytes_read:,} bytes)'
  )


def _build_table(reports: Sequence[ChecksumReport], *, full: bool, verify: bool) -> Table:
  table = Table(show_lines=True)
  table.add_column('File', overflow='fold')
  table.add_column('Bytes', justify='right')
  table.add_column('Window', justify='right')
  table.add_column('Rolling')

  if full:
    table.add_column('Adler-32')

  if verify:
    table.add_column('Verified')

  for report in reports:
    row = [
      report.name,
      f'{report.bytes_read:,}',
      f'{report.window_length:,}',
      report.window_hex,
    ]

    if full:
      row.append(report.full_hex or '')

    if verify:
      row.append('ok' if report.window_verified else 'MISMATCH')

    table.add_row(*row)

  return table


def main() -> int:
  arguments = Arguments.from_args()

  console, err_console = Console(), Console(stderr=True)
  reports: list[ChecksumReport] = []

  try:
    _validate(arguments)

    on_chunk, progress_cm = _wrap_with_progress(
      arguments.paths, console, enable_progress=not arguments.verbose
    )

    with progress_cm if progress_cm is not None else nullcontext():
      for path in arguments.paths:
        report = scan_path(
          path,
          arguments.window_size,
          chunk_size=arguments.chunk_size,
          full=arguments.full,
          verify=arguments.verify,
          on_chunk=on_chunk,
        )
        reports.append(report)

        if arguments.verbose:
          console.print(_describe(report), markup=False, highlight=False)
  except RollsumError as exc:
    err_console.print(f'[bold red]error:[/] {exc}')
    return 1
  except Exception as exc:  # pragma: no cover - CLI guardrail
    err_console.print(f'[bold red]error:[/] {exc}')
    return 1

  console.print(_build_table(reports, full=arguments.full, verify=arguments.verify))

  mismatched = [report.name for report in reports if report.window_verified is False]

  if mismatched:
    err_console.print(f'[bold red]error:[/] window checksum mismatch: {", ".join(mismatched)}')
    return 1

  return 0


if __name__ == '__main__':
  raise SystemExit(main())
