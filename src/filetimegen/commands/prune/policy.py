from __future__ import annotations
from typing import Optional
from collections.abc import Collection, Sequence
from dataclasses import dataclass
import logging

from filetimegen.common.candidate import Candidate
from filetimegen.common.sort import sort_candidates_by_time
from filetimegen.common.timestamp import (
  Timestamp,
  Mask,
  COMP_MINUTELY,
  COMP_HOURLY,
  COMP_DAILY,
  COMP_WEEKLY,
  COMP_MONTHLY
)


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeepTier:
  name: str
  count: Optional[int]
  mask: Mask


@dataclass
class KeepPolicy:
  minutely: Optional[int] = None
  hourly: Optional[int] = None
  daily: Optional[int] = None
  weekly: Optional[int] = None
  monthly: Optional[int] = None

  def tiers(self) -> list[KeepTier]:
    return [
      KeepTier('minutely', self.minutely, COMP_MINUTELY),
      KeepTier('hourly', self.hourly, COMP_HOURLY),
      KeepTier('daily', self.daily, COMP_DAILY),
      KeepTier('weekly', self.weekly, COMP_WEEKLY),
      KeepTier('monthly', self.monthly, COMP_MONTHLY)
    ]


def find_tier_keep(times: Sequence[Timestamp], count: Optional[int], mask: Mask) -> list[int]:
  """
  Indices of the newest timestamp of each bucket, for the `count` newest buckets.
  `times` must be sorted from latest to oldest. Only buckets present in `times` are counted.
  """
  if count is None or not times:
    return []

  keep = [0]
  current = times[0]
  for i in range(1, len(times)):
    if len(keep) >= count:
      break
    if current.equal_under_mask(times[i], mask):
      continue
    current = times[i]
    keep.append(i)
  return keep


def select_keep(times: Sequence[Timestamp], policy: KeepPolicy) -> set[int]:
  """Union of all tiers. The most recent timestamp is always kept."""
  if not times:
    return set()

  keep = {0}
  for tier in policy.tiers():
    tier_keep = find_tier_keep(times, tier.count, tier.mask)
    if tier_keep:
      log.debug(f'Tier {tier.name} keeps {len(tier_keep)} of {len(times)}')
    keep.update(tier_keep)
  return keep


"""
Returns tuple (keep, prune)
Both are ordered from latest to oldest
"""
def apply_policy(candidates: Collection[Candidate], policy: KeepPolicy) -> tuple[list[Candidate], list[Candidate]]:
  # sorting is important for the algorithm to work correctly
  cands = sort_candidates_by_time(candidates, reverse=True)
  keep_idx = select_keep([c.timestamp for c in cands], policy)

  keep = [c for i, c in enumerate(cands) if i in keep_idx]
  prune = [c for i, c in enumerate(cands) if i not in keep_idx]
  return keep, prune
