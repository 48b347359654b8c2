from datetime import date, datetime

import pendulum

from covid_recovered.utils.date_utils import format_date_param, get_previous_days, to_pendulum_date


def test_get_previous_days_from_reference_date():
    yesterday, day_before = get_previous_days(date(2023, 3, 1))

    assert yesterday.isoformat() == '2023-02-28'
    assert day_before.isoformat() == '2023-02-27'


def test_get_previous_days_accepts_string_and_datetime():
    assert get_previous_days('2024-01-01')[0].isoformat() == '2023-12-31'
    assert get_previous_days(datetime(2024, 1, 2, 23, 59))[1].isoformat() == '2023-12-31'


def test_get_previous_days_defaults_to_today():
    today = pendulum.today().date()

    yesterday, day_before = get_previous_days()

    assert yesterday == today.subtract(days=1)
    assert day_before == today.subtract(days=2)


def test_to_pendulum_date_returns_pendulum_date():
    assert isinstance(to_pendulum_date(date(2023, 3, 5)), pendulum.Date)


def test_format_date_param_is_iso():
    assert format_date_param(date(2023, 3, 5)) == '2023-03-05'
    assert format_date_param(pendulum.date(2023, 3, 5)) == '2023-03-05'
