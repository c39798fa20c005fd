"""
日単位のカレンダー日付
週の始まりは月曜日 (ISO) で固定
"""
import calendar
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

MONTH_NAMES = {
    "fr": (
        "janvier", "février", "mars", "avril", "mai", "juin",
        "juillet", "août", "septembre", "octobre", "novembre", "décembre",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}

WEEKDAY_INITIALS = {
    "fr": ("L", "M", "M", "J", "V", "S", "D"),
    "en": ("M", "T", "W", "T", "F", "S", "S"),
}

DEFAULT_LOCALE = "fr"


@dataclass(frozen=True, order=True)
class CalendarDate:
    # 比較は日付のみ. locale は月名のためだけに持つ
    value: date
    locale: str = field(default=DEFAULT_LOCALE, compare=False)

    def __post_init__(self):
        if self.locale not in MONTH_NAMES:
            raise ValueError(f"unsupported locale: {self.locale!r}")

    @classmethod
    def fromisoformat(cls, text: str, locale: str = DEFAULT_LOCALE) -> "CalendarDate":
        return cls(date.fromisoformat(text), locale)

    @classmethod
    def today(cls, zone: ZoneInfo, locale: str = DEFAULT_LOCALE) -> "CalendarDate":
        """指定タイムゾーンでの今日"""
        return cls(datetime.now(zone).date(), locale)

    def _replace(self, value: date) -> "CalendarDate":
        return CalendarDate(value, self.locale)

    @property
    def year(self) -> int:
        return self.value.year

    @property
    def month(self) -> int:
        return self.value.month

    @property
    def day(self) -> int:
        return self.value.day

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.value.year, self.value.month)[1]

    def month_label(self) -> str:
        return MONTH_NAMES[self.locale][self.value.month - 1]

    def start_of_week(self) -> "CalendarDate":
        return self._replace(self.value - timedelta(days=self.value.weekday()))

    def end_of_week(self) -> "CalendarDate":
        return self._replace(self.value + timedelta(days=6 - self.value.weekday()))

    def start_of_month(self) -> "CalendarDate":
        return self._replace(self.value.replace(day=1))

    def end_of_month(self) -> "CalendarDate":
        return self._replace(self.value.replace(day=self.days_in_month))

    def plus_days(self, days: int) -> "CalendarDate":
        return self._replace(self.value + timedelta(days=days))

    def weeks_since(self, other: "CalendarDate") -> int:
        """other からの経過週数 (切り捨て, 過去なら負)"""
        return (self.value - other.value).days // 7

    def isoformat(self) -> str:
        return self.value.isoformat()

    def __add__(self, step):
        if not isinstance(step, timedelta):
            return NotImplemented
        # 日単位なので端数は捨てる
        return self.plus_days(step.days)

    def __str__(self) -> str:
        return self.isoformat()
