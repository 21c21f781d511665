from __future__ import annotations
import logging

from filetimegen.common.stdio import write_stdout
from filetimegen.common.template import NamingTemplate
from filetimegen.common.timestamp import Timestamp
from .args import Args


log = logging.getLogger(__name__)


def entrypoint(args: Args) -> None:
  template = NamingTemplate(args.template)
  if not template.has_placeholder:
    raise ValueError("Template must contain {now} somewhere")

  now = Timestamp.now()
  name = template.stamp(now)

  # no trailing delimiter
  write_stdout(name)
  log.info(f'Generated name {name}')
