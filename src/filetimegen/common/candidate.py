from __future__ import annotations
from dataclasses import dataclass

from .template import NamingTemplate
from .timestamp import Timestamp


@dataclass(frozen=True)
class Candidate:
  line: str
  timestamp: Timestamp


def parse_candidate(template: NamingTemplate, line: str) -> Candidate:
  """Raises `MatchError` or `ParseError` if `line` was not generated from `template`"""
  return Candidate(line, Timestamp.parse(template.extract(line)))


def split_input(data: str, delimiter: str) -> list[str]:
  # a single trailing delimiter terminates the last entry instead of starting a new one
  if not data:
    return []
  lines = data.split(delimiter)
  if lines[-1] == '':
    lines.pop()
  return lines
