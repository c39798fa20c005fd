from datetime import date

from calendar_date import CalendarDate
from calendar_grid import build_months
from calendar_ui import describe_days, weekday_headers


def test_describe_days_marks_today_target_and_stripes():
    today = CalendarDate(date(2024, 3, 13))
    target = CalendarDate(date(2024, 3, 20))
    march = build_months(today, target)[0]

    cells = {cell.iso: cell for cell in describe_days(march, today, target)}
    assert len(cells) == len(march.days)

    leading = cells["2024-02-26"]
    assert leading.is_current_month is False
    assert leading.stripe is None
    assert leading.weeks_since_today == -2

    today_cell = cells["2024-03-13"]
    assert today_cell.is_today and not today_cell.is_target
    assert today_cell.is_notable
    assert today_cell.weeks_since_today == 0
    assert today_cell.stripe == "even"

    target_cell = cells["2024-03-20"]
    assert target_cell.is_target
    assert target_cell.day == 20
    assert target_cell.stripe == "odd"

    assert cells["2024-03-10"].weeks_since_today == -1
    assert cells["2024-03-10"].stripe == "odd"


def test_describe_days_without_target():
    today = CalendarDate(date(2024, 3, 13))
    march = build_months(today, today)[0]

    cells = describe_days(march, today)
    assert not any(cell.is_target for cell in cells)
    assert sum(cell.is_today for cell in cells) == 1


def test_day_cell_to_dict_includes_notable():
    today = CalendarDate(date(2024, 3, 13))
    march = build_months(today, today)[0]
    data = describe_days(march, today)[0].to_dict()
    assert data["iso"] == "2024-02-26"
    assert data["is_notable"] is False


def test_weekday_headers():
    assert weekday_headers("fr") == ("L", "M", "M", "J", "V", "S", "D")
    assert len(weekday_headers("en")) == 7
