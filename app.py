import os
import logging
from dotenv import load_dotenv

from zoneinfo import ZoneInfo

from flask import Flask, request, abort, jsonify

from calendar_date import CalendarDate, MONTH_NAMES
from calendar_grid import DisplayMode, build_months
from calendar_ui import describe_days, weekday_headers

load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["SECRET_KEY"] = os.getenv("SECRET_KEY")
app.config["CALENDAR_TIMEZONE"] = os.getenv("CALENDAR_TIMEZONE", "Europe/Paris")
app.config["CALENDAR_LOCALE"] = os.getenv("CALENDAR_LOCALE", "fr")
# 表示範囲の上限 (日数). 長すぎる範囲で計算が膨らまないように
app.config["CALENDAR_MAX_DAYS"] = int(os.getenv("CALENDAR_MAX_DAYS", "1100"))

if app.config["CALENDAR_LOCALE"] not in MONTH_NAMES:
    raise RuntimeError(f"Unsupported CALENDAR_LOCALE: {app.config['CALENDAR_LOCALE']}")


# 設定したタイムゾーンでの今日
def current_date() -> CalendarDate:
    zone = ZoneInfo(app.config["CALENDAR_TIMEZONE"])
    return CalendarDate.today(zone, app.config["CALENDAR_LOCALE"])


def clamp_target(today: CalendarDate, target_date: CalendarDate) -> CalendarDate:
    """
    目標日を [today, today + CALENDAR_MAX_DAYS] に収める
    """
    if target_date < today:
        logger.info("target date %s is in the past, using today %s", target_date, today)
        return today

    limit = today.plus_days(app.config["CALENDAR_MAX_DAYS"])
    if target_date > limit:
        logger.info("target date %s is beyond %s, capping", target_date, limit)
        return limit
    return target_date


def months_payload(today, target_date, mode, iso_target_date=None, requested=None) -> dict:
    months = build_months(today, target_date, mode)
    payload_months = []
    for month in months:
        data = month.to_dict()
        data["cells"] = [cell.to_dict() for cell in describe_days(month, today, requested)]
        payload_months.append(data)

    return {
        "months": payload_months,
        "iso_today": today.isoformat(),
        "iso_target_date": iso_target_date,
        "mode": mode.value,
        "weekdays": list(weekday_headers(today.locale)),
    }


def _mode_from_request() -> DisplayMode:
    raw = request.args.get("mode") or DisplayMode.COMPACT.value
    try:
        return DisplayMode(raw)
    except ValueError:
        logger.warning("rejected unknown mode %r", raw)
        abort(400)


@app.route("/")
def index():
    mode = _mode_from_request()
    iso_target_date = request.args.get("targetDate")
    today = current_date()

    requested = None
    if iso_target_date:
        try:
            requested = CalendarDate.fromisoformat(iso_target_date, today.locale)
        except ValueError:
            logger.warning("rejected target date %r", iso_target_date)
            abort(400)

    target_date = clamp_target(today, requested or today)

    return jsonify(months_payload(today, target_date, mode, iso_target_date, requested))

# 日付をパスで指定

@app.route("/months/<date_str>")
def months_view(date_str: str):
    mode = _mode_from_request()
    today = current_date()

    try:
        requested = CalendarDate.fromisoformat(date_str, today.locale)
    except ValueError:
        abort(404)

    target_date = clamp_target(today, requested)

    return jsonify(months_payload(today, target_date, mode, date_str, requested))


if __name__ == "__main__":
    app.run(debug=True)
