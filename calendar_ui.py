from dataclasses import asdict, dataclass
from typing import Optional

from calendar_date import WEEKDAY_INITIALS, CalendarDate
from calendar_grid import Month


@dataclass(frozen=True)
class DayCell:
    iso: str
    day: int
    is_today: bool
    is_target: bool
    is_current_month: bool
    weeks_since_today: int
    # 週ごとの色分け. 月外の日は None
    stripe: Optional[str]

    @property
    def is_notable(self) -> bool:
        return self.is_current_month and (self.is_today or self.is_target)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["is_notable"] = self.is_notable
        return data


def weekday_headers(locale: str) -> tuple[str, ...]:
    return WEEKDAY_INITIALS[locale]


def describe_days(month: Month, today: CalendarDate, target_date: Optional[CalendarDate] = None) -> list[DayCell]:
    """月の各日を描画用の情報にする"""
    week_start = today.start_of_week()
    iso_today = today.isoformat()
    iso_target = target_date.isoformat() if target_date else None

    cells: list[DayCell] = []
    for iso in month.days:
        day = CalendarDate.fromisoformat(iso, today.locale)
        # 年は見ない (月名だけで比較)
        is_current_month = day.month_label() == month.name
        weeks = day.weeks_since(week_start)
        stripe = None
        if is_current_month:
            stripe = "even" if weeks % 2 == 0 else "odd"

        cells.append(DayCell(
            iso=iso,
            day=day.day,
            is_today=iso == iso_today,
            is_target=iso == iso_target,
            is_current_month=is_current_month,
            weeks_since_today=weeks,
            stripe=stripe,
        ))
    return cells
