#!/usr/bin/env python3

from __future__ import annotations
from collections.abc import Sequence
from typing import Optional, cast
import logging

from .setup_logging import setup_logging, set_level, PACKAGE
setup_logging()
from .args import get_args
from .commands import (
  prune as _prune,
  generate as _generate
)

log = logging.getLogger(__name__)


def cli(argv: Optional[Sequence[str]] = None) -> int:
    try:
        _entrypoint(argv)
    except Exception as e:
        log.error(e)
        return 1
    return 0


def _entrypoint(argv: Optional[Sequence[str]] = None):
    args = get_args(argv)
    s = args.subcommand
    args.__delattr__("subcommand")

    if args.verbose:
        set_level(logging.getLogger(PACKAGE), logging.INFO)

    match s:
        case 'prune':
            _prune.entrypoint(cast(_prune.Args, args))
        case 'generate':
            _generate.entrypoint(cast(_generate.Args, args))
        case _:
            assert False
