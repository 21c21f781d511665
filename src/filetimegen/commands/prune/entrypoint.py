from __future__ import annotations
from typing import TYPE_CHECKING
import logging

from filetimegen.common.args import get_delimiter
from filetimegen.common.candidate import split_input
from filetimegen.common.stdio import read_stdin, write_stdout
from filetimegen.common.template import NamingTemplate

from .policy import KeepPolicy
from .prune_files import prune_files
if TYPE_CHECKING:
  from .args import Args


log = logging.getLogger(__name__)


def entrypoint(args: Args):
  policy = KeepPolicy(
    minutely = args.keep_minutely,
    hourly = args.keep_hourly,
    daily = args.keep_daily,
    weekly = args.keep_weekly,
    monthly = args.keep_monthly
  )
  template = NamingTemplate(args.template)
  delimiter = get_delimiter(args)

  lines = split_input(read_stdin(), delimiter)
  log.info(f'Read {len(lines)} input lines')

  pruned = prune_files(template, lines, policy)
  write_stdout(''.join(name + delimiter for name in pruned))
