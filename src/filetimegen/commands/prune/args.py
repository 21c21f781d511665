from __future__ import annotations
from typing import Optional
from argparse import ArgumentParser, ArgumentTypeError

from filetimegen.common.args import CommonArgs


class Args(CommonArgs):
  prune: bool

  keep_minutely: Optional[int]
  keep_hourly: Optional[int]
  keep_daily: Optional[int]
  keep_weekly: Optional[int]
  keep_monthly: Optional[int]


COUNT_OPTS = [
  ("-M", "--keep-minutely"),
  ("-H", "--keep-hourly"),
  ("-d", "--keep-daily"),
  ("-w", "--keep-weekly"),
  ("-m", "--keep-monthly")
]


def positive_int(value: str) -> int:
  try:
    number = int(value)
    if number < 1:
      raise ValueError
  except ValueError:
    raise ArgumentTypeError(f"invalid value '{value}': all --keep arguments must be >= 1")
  return number


def setup(parser: ArgumentParser) -> None:
  parser.add_argument(
    '--prune', action='store_true',
    help="read a list of files on stdin and output the ones that should be deleted based on --keep options"
  )

  # keep policy arguments, unset means the tier is disabled
  group = parser.add_argument_group('keep policy', 'how many files should be kept, only used with --prune')
  for short, opt in COUNT_OPTS:
    group.add_argument(short, opt, type=positive_int, metavar="N", default=None)
