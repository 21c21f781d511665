from __future__ import annotations
from argparse import ArgumentParser

from filetimegen.common.args import CommonArgs


class Args(CommonArgs):
  pass


def setup(parser: ArgumentParser) -> None:
  """Generate has no options of its own, it only uses the common ones."""
  pass
