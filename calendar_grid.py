"""
今日から目標日までの月カレンダーを組み立てる

compact: 今日の月と目標日の月の 2 枚 (同じ月なら 1 枚)
full:    今日の月から目標日の週まで連続した月すべて
どちらも月ごとの日付は月曜始まりの完全な週 (7 の倍数) で並ぶ
"""
import logging
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum

from calendar_date import CalendarDate
from date_window import produce

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


class DisplayMode(str, Enum):
    COMPACT = "compact"
    FULL = "full"


@dataclass(frozen=True)
class Month:
    year: int
    name: str
    days: tuple[str, ...]
    is_overflow_month: bool = False

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "name": self.name,
            "days": list(self.days),
            "is_overflow_month": self.is_overflow_month,
        }


@dataclass
class _MonthBuilder:
    year: int
    name: str
    is_overflow_month: bool
    days: list[str] = field(default_factory=list)

    def fill(self, start: CalendarDate, end: CalendarDate) -> None:
        # [start, end) を追加
        self.days.extend(produce(start, end, ONE_DAY, _iso))

    def build(self) -> Month:
        return Month(self.year, self.name, tuple(self.days), self.is_overflow_month)


def _iso(day: CalendarDate, *_) -> str:
    return day.isoformat()


def _month_grid(anchor: CalendarDate) -> Month:
    """anchor を含む月の, 前後の週を補った日付一覧"""
    start = anchor.start_of_month().start_of_week()
    end = anchor.end_of_month().end_of_week().plus_days(1)
    return Month(anchor.year, anchor.month_label(), tuple(produce(start, end, ONE_DAY, _iso)))


def _compact_months(today: CalendarDate, target_date: CalendarDate) -> list[Month]:
    first_month = _month_grid(today)
    last_month = _month_grid(target_date)
    if first_month.name == last_month.name and first_month.year == last_month.year:
        return [first_month]
    return [first_month, last_month]


def _full_months(today: CalendarDate, target_date: CalendarDate) -> list[Month]:
    months: dict[tuple[int, str], _MonthBuilder] = {}
    walk = produce(today.start_of_month(), target_date.end_of_week().plus_days(1), ONE_DAY)

    for day in walk:
        key = (day.year, day.month_label())
        month = months.get(key)
        if month is None:
            # 目標日より後から始まる月は週を埋めるためだけのもの
            month = months[key] = _MonthBuilder(day.year, key[1], day > target_date)
            month.fill(day.start_of_week(), day)

        month.days.append(day.isoformat())

        # 月末の週の残りは同じ月に入れる
        if day.day == day.days_in_month:
            month.fill(day.plus_days(1), day.end_of_week().plus_days(1))

    if months:
        last_month = next(reversed(months.values()))
        last_day = CalendarDate.fromisoformat(last_month.days[-1], today.locale)
        last_month.fill(last_day.plus_days(1), last_day.end_of_month().end_of_week().plus_days(1))

    return [month.build() for month in months.values()]


def build_months(today: CalendarDate, target_date: CalendarDate, mode=DisplayMode.COMPACT) -> list[Month]:
    """
    today から target_date までの月一覧を返す
    target_date < today は呼び出し側で丸める前提だが, 念のため today に丸める
    """
    mode = DisplayMode(mode)

    if target_date < today:
        logger.warning("target date %s is before today %s, clamping", target_date, today)
        target_date = today

    if mode is DisplayMode.COMPACT:
        months = _compact_months(today, target_date)
    else:
        months = _full_months(today, target_date)

    months = [month for month in months if not month.is_overflow_month]
    logger.debug("built %d month(s) for %s..%s (%s)", len(months), today, target_date, mode.value)
    return months
