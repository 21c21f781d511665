from __future__ import annotations

from .timestamp import Timestamp, TIMESTAMP_WIDTH


PLACEHOLDER = '{now}'


class MatchError(Exception):
  def __init__(self, template: str, input: str) -> None:
    super().__init__(f'Template "{template}" does not match input "{input}"')


class NamingTemplate:
  """A filename with any number of `{now}` placeholders in it."""
  spec: str
  positions: list[int]

  def __init__(self, spec: str):
    self.spec = spec
    self.positions = []
    pos = spec.find(PLACEHOLDER)
    while pos != -1:
      self.positions.append(pos)
      pos = spec.find(PLACEHOLDER, pos + 1)

  def __repr__(self) -> str:
    return f"NamingTemplate({self.spec!r})"

  @property
  def has_placeholder(self) -> bool:
    return bool(self.positions)

  def stamp(self, timestamp: Timestamp) -> str:
    return self.spec.replace(PLACEHOLDER, timestamp.format())

  def extract(self, line: str) -> str:
    """
    Returns the text at the first placeholder of `line`.
    Placeholders are only checked for width here, the content is validated by `Timestamp.parse`.
    """
    if not self.positions:
      raise MatchError(self.spec, line)

    now_i = spec_i = line_i = 0
    while spec_i < len(self.spec) and line_i < len(line):
      if now_i < len(self.positions) and self.positions[now_i] == spec_i:
        now_i += 1
        spec_i += len(PLACEHOLDER)
        line_i += TIMESTAMP_WIDTH
      elif self.spec[spec_i] != line[line_i]:
        raise MatchError(self.spec, line)
      else:
        spec_i += 1
        line_i += 1

    if now_i != len(self.positions) or spec_i != len(self.spec) or line_i != len(line):
      raise MatchError(self.spec, line)

    # only literals precede the first placeholder, so its offset is the same in both
    start = self.positions[0]
    return line[start:start + TIMESTAMP_WIDTH]
