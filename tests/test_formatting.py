from datetime import datetime, timezone

from backoffice.templatetags.backoffice_format import currency, short_datetime


def test_currency():
    assert currency(1234.5) == "$1,234.50"
    assert currency("0") == "$0.00"
    assert currency(-3) == "-$3.00"
    assert currency("n/a") == ""


def test_short_datetime_in_local_time():
    value = datetime(2026, 3, 2, 15, 7, tzinfo=timezone.utc)
    assert short_datetime(value) == "02/03/2026 09:07"
    assert short_datetime(None) == ""
