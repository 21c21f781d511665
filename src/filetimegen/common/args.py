from __future__ import annotations
from typing import Protocol


class CommonArgs(Protocol):
  template: str
  newline: bool
  verbose: bool


def get_delimiter(args: CommonArgs) -> str:
  return '\n' if args.newline else '\0'
