from __future__ import annotations

import argparse
import typing as t
from dataclasses import dataclass
from pathlib import Path

from .scan import DEFAULT_CHUNK_SIZE, DEFAULT_WINDOW_SIZE


class HelpFormatter(argparse.HelpFormatter):
  """
  Help formatter that prints one compact line per option, followed by its default.
  """

  def __init__(
    self,
    prog: str,
    indent_increment: int = 2,
    max_help_position: int = 50,
    width: t.Optional[int] = None,
  ):
    super().__init__(prog, indent_increment, max_help_position, width)

  def _format_action_invocation(self, action: argparse.Action) -> str:
    if not action.option_strings:
      return self._format_args(action, action.dest)

    if isinstance(action, argparse._HelpAction):
      return '-h --help'

    option = action.option_strings[-1]

    if action.nargs == 0:
      return option

    metavar = self._metavar_formatter(action, action.dest)(1)[0]
    return f'{option} {metavar}'

  def _format_action(self, action: argparse.Action) -> str:
    if isinstance(action, argparse._HelpAction):
      help_text = 'Show this help message and exit'
    else:
      help_text = action.help or ''

    if action.default is not None and action.default != argparse.SUPPRESS:
      help_text = f'{help_text} (default: {action.default})'

    return f'  {self._format_action_invocation(action)} {help_text}\n'


@dataclass
class Arguments:
  """
  A wrapper class providing concrete types for parsed command-line arguments.
  """

  paths: list[Path]
  window_size: int
  chunk_size: int
  full: bool
  verify: bool
  verbose: bool

  @staticmethod
  def from_args() -> Arguments:
    parser = argparse.ArgumentParser(
      prog='rollsum',
      description='Print the Adler-32 of the trailing window of each input.',
      formatter_class=HelpFormatter,
    )

    parser.add_argument(
      'paths',
      type=Path,
      nargs='+',
      metavar='PATH',
      help='Files to checksum; use - for standard input',
    )

    parser.add_argument(
      '-w',
      '--window-size',
      type=int,
      default=DEFAULT_WINDOW_SIZE,
      metavar='BYTES',
      help='Number of trailing bytes covered by the checksum.',
    )

    parser.add_argument(
      '--chunk-size',
      type=int,
      default=DEFAULT_CHUNK_SIZE,
      metavar='BYTES',
      help='Read size used when streaming inputs.',
    )

    parser.add_argument(
      '--full',
      action='store_true',
      help='Also print the Adler-32 of the entire input.',
    )

    parser.add_argument(
      '--verify',
      action='store_true',
      help='Recompute the final window from scratch and compare.',
    )

    parser.add_argument(
      '-v',
      '--verbose',
      action='store_true',
      help='Print each input as it is processed.',
    )

    return Arguments(**vars(parser.parse_args()))
