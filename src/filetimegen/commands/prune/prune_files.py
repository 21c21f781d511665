from collections.abc import Collection, Iterable
import logging

from filetimegen.common.candidate import Candidate, parse_candidate
from filetimegen.common.template import NamingTemplate, MatchError
from filetimegen.common.timestamp import ParseError
from .policy import apply_policy, KeepPolicy


log = logging.getLogger(__name__)


def collect_candidates(template: NamingTemplate, lines: Iterable[str]) -> list[Candidate]:
  candidates: list[Candidate] = []
  for line in lines:
    try:
      candidates.append(parse_candidate(template, line))
    except MatchError:
      log.warning(f'Template does not match input: {line}')
    except ParseError as e:
      log.warning(f"In input '{line}': {e}")
  return candidates


def prune_files(template: NamingTemplate, lines: Iterable[str], policy: KeepPolicy) -> list[str]:
  """
  Returns the names that should be deleted according to keep policy, latest first.
  Names are regenerated from `template`, lines that don't match it are skipped.
  """
  candidates = collect_candidates(template, lines)
  if not candidates:
    log.info('No matching files, nothing to do')
    return []

  keep, prune = apply_policy(candidates, policy)
  print_policy_result(keep, prune)
  return [template.stamp(c.timestamp) for c in prune]


def print_policy_result(keep: Collection[Candidate], prune: Collection[Candidate]):
  if not prune:
    log.info(f'Keeping all {len(keep)} files, not pruning any files')
    return

  log.info(f'Keeping {len(keep)} files, pruning these {len(prune)} files:')
  for cand in prune:
    log.info(f'    {cand.timestamp}  {cand.line}')
