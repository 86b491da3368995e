from flask import Flask, redirect, url_for, request, jsonify
import logging
from datetime import datetime, timedelta, timezone

from hijri_converter import Gregorian
from config import Config
from calendar_core import (
    InvalidInput, hijri_date, bengali_date, to_civil_date, to_bangla_number,
    format_gregorian_bangla, format_hijri_bangla, format_bengali,
)
from islamic_events import ISLAMIC_EVENTS, events_on, upcoming_events
from month_view import build_month

app = Flask(__name__)
app.config.from_object(Config)

logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    level=app.config['LOG_LEVEL'])

# Helper for Local Time (GMT+6 by default)
def get_local_now():
    """Returns the current time shifted to the configured local offset."""
    return datetime.now(timezone.utc) + timedelta(hours=app.config['UTC_OFFSET_HOURS'])

def get_today():
    """Returns today's date in local time."""
    return get_local_now().date()

def get_int_arg(name, default):
    """Integer query parameter; anything unparseable is rejected, not defaulted."""
    raw = request.args.get(name, '').strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidInput(f"{name} must be an integer, got {raw!r}")

def get_adjustment():
    return get_int_arg('adjustment', app.config['HIJRI_ADJUSTMENT'])

@app.errorhandler(InvalidInput)
def handle_invalid_input(e):
    app.logger.info(f"Invalid calendar input on {request.path}: {e}")
    return jsonify({'error': str(e)}), 400

def h_day_suffix(day):
    if 11 <= day <= 13: suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(day % 10, 'th')
    return f"{day}{suffix}"

def umm_al_qura_reference(day):
    """
    Umm al-Qura date from hijri_converter, shown beside the arithmetic date.
    Only covers 1343-1500 AH; returns None outside that range.
    """
    try:
        ref = Gregorian(day.year, day.month, day.day).to_hijri()
    except (OverflowError, ValueError) as e:
        app.logger.warning(f"Umm al-Qura reference unavailable for {day}: {e}")
        return None
    return {
        'day': ref.day,
        'month': ref.month,
        'month_name': ref.month_name(),
        'year': ref.year
    }

def calendar_payload(day, adjustment):
    """The three calendars for one civil day, ready for jsonify."""
    hijri = hijri_date(day, adjustment)
    bengali = bengali_date(day)

    hijri_data = hijri.to_dict()
    hijri_data.update({
        'approximate': True, # arithmetic, not moon sighting
        'adjustment': adjustment,
        'bangla': format_hijri_bangla(hijri)
    })
    bengali_data = bengali.to_dict()
    bengali_data['bangla'] = format_bengali(bengali)

    return {
        'gregorian': {
            'date': day.isoformat(),
            'weekday': day.strftime('%A'),
            'formatted': day.strftime('%B %d, %Y'),
            'bangla': format_gregorian_bangla(day)
        },
        'hijri': hijri_data,
        'bengali': bengali_data
    }

# --- Main Routes ---
@app.route('/ping')
def ping():
    return "PONG", 200

@app.route('/')
def index():
    return redirect(url_for('today_view'))

# --- Calendar API ---
@app.route('/api/today')
def today_view():
    today = get_today()
    payload = calendar_payload(today, get_adjustment())
    payload['local_time'] = to_bangla_number(get_local_now().strftime('%I:%M %p'))
    return jsonify(payload)

@app.route('/api/day_details')
def get_day_details():
    date_str = request.args.get('date')
    if not date_str:
        return jsonify({'error': 'Date required'}), 400

    day = to_civil_date(date_str)
    adjustment = get_adjustment()
    payload = calendar_payload(day, adjustment)

    hijri = hijri_date(day, adjustment)
    observances = events_on(hijri)

    significance = [f"📅 Islamic Date: {h_day_suffix(hijri.day)} {hijri.month_name}, {hijri.year} AH"]
    for event in observances:
        significance.append(f"🕌 {event.name}")
    bengali = payload['bengali']
    significance.append(f"🌾 Bangla Date: {bengali['bangla']} ({bengali['season']})")

    payload['reference'] = umm_al_qura_reference(day)
    payload['observances'] = [e.to_dict() for e in observances]
    payload['significance'] = significance
    return jsonify(payload)

@app.route('/api/calendar')
def month_calendar():
    today = get_today()
    year = get_int_arg('year', today.year)
    month = get_int_arg('month', today.month)
    first_day = get_int_arg('first_day', app.config['FIRST_DAY_OF_WEEK'])
    return jsonify(build_month(year, month, get_adjustment(), first_day, today=today))

@app.route('/api/islamic_events')
def islamic_events_view():
    from_str = request.args.get('from')
    start = to_civil_date(from_str) if from_str else get_today()
    adjustment = get_adjustment()
    limit = get_int_arg('limit', app.config['UPCOMING_EVENTS_LIMIT'])

    return jsonify({
        'from': start.isoformat(),
        'adjustment': adjustment,
        'upcoming': upcoming_events(start, adjustment, limit),
        'table': [e.to_dict() for e in ISLAMIC_EVENTS]
    })

@app.route('/api/bangla_number')
def bangla_number():
    value = request.args.get('value')
    if value is None:
        return jsonify({'error': 'Value required'}), 400
    return jsonify({'value': value, 'bangla': to_bangla_number(value)})

if __name__ == '__main__':
    app.run(debug=True)
