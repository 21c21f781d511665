from __future__ import annotations
from collections.abc import Collection
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from dateutil.relativedelta import relativedelta
from enum import StrEnum
import re


# length of "2020-01-12T13:45:00"
TIMESTAMP_WIDTH = 19

TIMESTAMP_RE = re.compile(r'([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})')


class ParseError(Exception):
  def __init__(self, input: str, msg: str) -> None:
    super().__init__(f'Failed to parse timestamp "{input}": {msg}')


class TimeField(StrEnum):
  MINUTE = 'minute'
  HOUR = 'hour'
  DAY = 'day'
  MONTH = 'month'
  YEAR = 'year'
  WEEK = 'week'


Mask = frozenset[TimeField]

COMP_YEARLY: Mask = frozenset({TimeField.YEAR})
COMP_MONTHLY: Mask = COMP_YEARLY | {TimeField.MONTH}
COMP_DAILY: Mask = COMP_MONTHLY | {TimeField.DAY}
COMP_HOURLY: Mask = COMP_DAILY | {TimeField.HOUR}
COMP_MINUTELY: Mask = COMP_HOURLY | {TimeField.MINUTE}
# weeks don't cascade from months and days
COMP_WEEKLY: Mask = frozenset({TimeField.YEAR, TimeField.WEEK})


@dataclass(frozen=True)
class Timestamp:
  """
  Calendar fields as found in a filename, plus the derived fields used for bucketing.

  `week` is `yday // 7`, not the ISO 8601 week. `instant` is only used for ordering
  and is interpreted as local standard time, DST is never applied.
  """
  year: int
  month: int
  day: int
  hour: int
  minute: int
  second: int
  yday: int = field(compare=False)
  week: int = field(compare=False)
  instant: datetime = field(compare=False, repr=False)

  @classmethod
  def now(cls) -> Timestamp:
    return cls.from_datetime(datetime.now())

  @classmethod
  def from_datetime(cls, date: datetime) -> Timestamp:
    yday = date.timetuple().tm_yday - 1
    return cls(
      year=date.year,
      month=date.month,
      day=date.day,
      hour=date.hour,
      minute=date.minute,
      second=date.second,
      yday=yday,
      week=yday // 7,
      instant=date.replace(microsecond=0)
    )

  @classmethod
  def parse(cls, text: str) -> Timestamp:
    m = TIMESTAMP_RE.fullmatch(text)
    if m is None:
      raise ParseError(text, 'not in YYYY-MM-DDTHH:MM:SS format')
    year, month, day, hour, minute, second = (int(g) for g in m.groups())

    # Field ranges are not checked. Out of range values are normalized the way
    # mktime does it: months roll over into years first, then the rest is added.
    try:
      instant = datetime(year, 1, 1) + relativedelta(months=month - 1) + timedelta(
        days=day - 1,
        hours=hour,
        minutes=minute,
        seconds=second
      )
    except (ValueError, OverflowError) as e:
      raise ParseError(text, str(e))

    yday = instant.timetuple().tm_yday - 1
    return cls(
      year=year,
      month=month,
      day=day,
      hour=hour,
      minute=minute,
      second=second,
      yday=yday,
      week=yday // 7,
      instant=instant
    )

  def format(self) -> str:
    return f'{self.year:04d}-{self.month:02d}-{self.day:02d}T{self.hour:02d}:{self.minute:02d}:{self.second:02d}'

  def equal_under_mask(self, other: Timestamp, mask: Collection[TimeField]) -> bool:
    return all(getattr(self, f.value) == getattr(other, f.value) for f in mask)

  def __str__(self) -> str:
    return self.format()
