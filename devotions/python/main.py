"""Main Flask application for serving devotions."""

import calendar
import datetime
import logging

from devotional_content import devotion_builder
from devotional_content import liturgical_calendar
import flask
import settings
import utils

logging.basicConfig(
    level=settings.get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = flask.Flask(__name__)
app.json.sort_keys = False


def _requested_language():
  return flask.request.args.get("language") or settings.get_default_language()


def _not_found(message):
  return flask.jsonify({"error": message}), 404


@app.route("/api/devotions/today")
def today_devotions_route():
  """Returns every office for today in the configured timezone."""
  return devotions_route(utils.get_today_iso())


@app.route("/api/devotions/<date_str>")
def devotions_route(date_str):
  """Returns the morning, noon, evening and family offices for a date."""
  day = devotion_builder.build_devotion_day(date_str, _requested_language())
  if day is None:
    return _not_found(f"No devotions for {date_str}")
  return flask.jsonify(day.to_dict())


@app.route("/api/devotions/<date_str>/<time_of_day>")
def devotion_route(date_str, time_of_day):
  """Returns one office for a date and time of day."""
  devotion = devotion_builder.build_devotion(
      date_str, time_of_day, _requested_language()
  )
  if devotion is None:
    return _not_found(f"No {time_of_day} devotion for {date_str}")
  return flask.jsonify(devotion.to_dict())


@app.route("/api/lectionary/dates")
def lectionary_dates_route():
  """Returns every date that has lectionary readings."""
  return flask.jsonify({"dates": devotion_builder.all_dates()})


@app.route("/api/liturgical_season")
def liturgical_season_route():
  """Returns the season and color for ?date=YYYY-MM-DD (default today)."""
  date_str = flask.request.args.get("date") or utils.get_today_iso()
  info = liturgical_calendar.get_season_info(date_str)
  info["date"] = date_str
  return flask.jsonify(info)


@app.route("/api/liturgical_calendar")
def liturgical_calendar_route():
  """Returns the liturgical calendar grid for ?year=&month=."""
  today = utils.get_today()

  # Allow query params to change month/year
  try:
    year = int(flask.request.args.get("year", today.year))
    month = int(flask.request.args.get("month", today.month))
    if not datetime.MINYEAR < year < datetime.MAXYEAR:
      raise ValueError(f"Year out of range: {year}")
    datetime.date(year, month, 1)
  except ValueError:
    year = today.year
    month = today.month

  # Navigation
  prev_month_date = datetime.date(year, month, 1) - datetime.timedelta(days=1)
  next_month_date = datetime.date(year, month, 28) + datetime.timedelta(days=7)
  next_month_date = next_month_date.replace(day=1)

  builder = devotion_builder.get_default_builder()
  calendar_data = liturgical_calendar.generate_calendar_data(
      year, month, lectionary=builder.lectionary, today=today
  )
  return flask.jsonify({
      "year": year,
      "month": month,
      "month_name": calendar.month_name[month],
      "weeks": calendar_data,
      "prev_year": prev_month_date.year,
      "prev_month": prev_month_date.month,
      "next_year": next_month_date.year,
      "next_month": next_month_date.month,
  })


@app.route("/api/prayers/<language>")
def prayers_route(language):
  """Returns every prayer in a language's library."""
  library = devotion_builder.get_default_builder().prayer_resolver.library
  return flask.jsonify({
      "language": language,
      "prayers": library.get_prayers(language),
  })


@app.route("/api/prayers/<language>/<prayer_id>")
def prayer_route(language, prayer_id):
  """Returns one prayer by its id or any equivalent id."""
  library = devotion_builder.get_default_builder().prayer_resolver.library
  prayer = library.get_prayer_by_id(prayer_id, language)
  if prayer is None:
    return _not_found(f"Prayer {prayer_id} not found for language {language}")
  return flask.jsonify(prayer)


@app.errorhandler(404)
def not_found_error(e):
  """Returns JSON instead of the default HTML 404 page."""
  return _not_found(e.description)


@app.errorhandler(500)
def internal_error(e):
  """Logs server errors and returns a JSON 500."""
  app.logger.error("Internal server error: %s", e, exc_info=True)
  return flask.jsonify({"error": "Internal server error"}), 500


if __name__ == "__main__":
  app.run(debug=True, host="0.0.0.0", port=settings.get_port())
