from __future__ import annotations
from collections.abc import Sequence
from typing import Optional, cast
import argparse
import importlib.metadata

from .common.args import CommonArgs as CommonArgs
from .common.template import PLACEHOLDER, NamingTemplate
from .commands import (
  prune as _prune,
  generate as _generate
)


DESCRIPTION = """\
Outputs a filename according to TEMPLATE. Typically this is a prefix plus a time.
If --prune is given, a list of names will be taken on stdin, and the names
that should be discarded are output.

A TEMPLATE starting with "-" must follow "--", e.g. filetimegen -- -snap-{now}
"""


class Args(CommonArgs):
    subcommand: str


def get_args(argv: Optional[Sequence[str]] = None) -> Args:
    parser = argparse.ArgumentParser(
        'filetimegen',
        description=DESCRIPTION,
        formatter_class=CompactHelpFormatter,
        add_help=False,
        allow_abbrev=False
    )
    parser.add_argument('-h', '--help', action=HelpAction, help="print this message")
    parser.add_argument('--version', action='version', version=f'%(prog)s {_get_version()}')
    parser.add_argument(
        'template', type=str, metavar="TEMPLATE",
        help=f"how the output should be named, every {PLACEHOLDER} is replaced with the current time"
    )
    parser.add_argument(
        '--newline', action='store_true',
        help="when printing and accepting input, use newlines instead of null separators"
    )
    parser.add_argument('-v', '--verbose', action='store_true', help="log decisions to stderr")

    # command specific options
    _generate.args.setup(parser)
    _prune.args.setup(parser)

    args = parser.parse_args(argv)
    if not NamingTemplate(args.template).has_placeholder:
        parser.error(f"TEMPLATE must contain {PLACEHOLDER} somewhere")

    args.subcommand = 'prune' if args.prune else 'generate'
    return cast(Args, args)


def _get_version() -> str:
    try:
        return importlib.metadata.version('filetimegen')
    except importlib.metadata.PackageNotFoundError:
        return 'unknown'


class HelpAction(argparse.Action):
    """Prints help, then exits unsuccessfully because nothing was generated."""
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help()
        parser.exit(1)


class CompactHelpFormatter(argparse.RawDescriptionHelpFormatter):
    def __init__(self, prog):
        super().__init__(prog, max_help_position=40, width=120)
