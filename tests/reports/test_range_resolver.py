from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from src.ponto_bot.ponto_bot.common.datetime_utils import parse_br_date
from src.ponto_bot.ponto_bot.reports.model import InvalidRange, ReportRange
from src.ponto_bot.ponto_bot.reports.range_resolver import resolve_range

TZ = ZoneInfo("America/Sao_Paulo")
NOW = datetime(2025, 6, 15, 12, 0, tzinfo=TZ)


def test_last_n_days_includes_today():
    rng = resolve_range("últimos 7 dias", now=NOW, tz=TZ)

    assert isinstance(rng, ReportRange)
    assert rng.start == datetime(2025, 6, 9, tzinfo=TZ)
    assert rng.end == datetime(2025, 6, 16, tzinfo=TZ)


def test_last_one_day_is_today():
    rng = resolve_range("últimos 1", now=NOW, tz=TZ)

    assert rng.start == datetime(2025, 6, 15, tzinfo=TZ)
    assert rng.end == datetime(2025, 6, 16, tzinfo=TZ)


@pytest.mark.parametrize("params", ["últimos 0 dias", "últimos -3 dias", "últimos sete dias", "últimos", "últimos ² dias"])
def test_last_n_days_rejects_non_positive_or_non_numeric(params):
    assert isinstance(resolve_range(params, now=NOW, tz=TZ), InvalidRange)


def test_last_n_days_too_far_back_is_invalid():
    assert isinstance(resolve_range("últimos 99999999999 dias", now=NOW, tz=TZ), InvalidRange)


def test_range_before_first_utc_instant_is_invalid():
    tokyo = ZoneInfo("Asia/Tokyo")
    now = datetime(2025, 6, 15, 12, 0, tzinfo=tokyo)
    back_to_year_one = (date(2025, 6, 15) - date(1, 1, 1)).days + 1

    assert isinstance(resolve_range("01/01/0001 até 01/01/0001", now=now, tz=tokyo), InvalidRange)
    assert isinstance(resolve_range(f"últimos {back_to_year_one} dias", now=now, tz=tokyo), InvalidRange)


def test_explicit_range_end_day_inclusive():
    rng = resolve_range("01/06/2025 até 05/06/2025", now=NOW, tz=TZ)

    assert rng.start == datetime(2025, 6, 1, tzinfo=TZ)
    assert rng.end == datetime(2025, 6, 6, tzinfo=TZ)
    assert rng.label == "01/06/2025 a 05/06/2025"


def test_explicit_single_day():
    rng = resolve_range("05/06/2025 até 05/06/2025", now=NOW, tz=TZ)

    assert rng.start == datetime(2025, 6, 5, tzinfo=TZ)
    assert rng.end == datetime(2025, 6, 6, tzinfo=TZ)


@pytest.mark.parametrize(
    "params",
    [
        "32/01/2025 até 05/01/2025",
        "01/13/2025 até 05/01/2026",
        "29/02/2025 até 01/03/2025",
        "01/06/2025 até",
        "até 05/06/2025",
        "2025-06-01 até 2025-06-05",
    ],
)
def test_explicit_range_rejects_bad_dates(params):
    result = resolve_range(params, now=NOW, tz=TZ)

    assert isinstance(result, InvalidRange)
    assert "DD/MM/AAAA" in result.reason


def test_explicit_range_rejects_reversed_dates():
    assert isinstance(resolve_range("05/06/2025 até 01/06/2025", now=NOW, tz=TZ), InvalidRange)


def test_yesterday():
    rng = resolve_range("ontem", now=NOW, tz=TZ)

    assert rng.start == datetime(2025, 6, 14, tzinfo=TZ)
    assert rng.end == datetime(2025, 6, 15, tzinfo=TZ)


@pytest.mark.parametrize("params", ["", "   ", "hoje", "qualquer coisa"])
def test_default_is_today(params):
    rng = resolve_range(params, now=NOW, tz=TZ)

    assert rng.start == datetime(2025, 6, 15, tzinfo=TZ)
    assert rng.end == datetime(2025, 6, 16, tzinfo=TZ)


def test_labels_differ_per_branch():
    labels = {
        resolve_range(p, now=NOW, tz=TZ).label
        for p in ["", "ontem", "últimos 7 dias", "01/06/2025 até 05/06/2025"]
    }
    assert len(labels) == 4
    assert all(labels)


def test_today_follows_reference_timezone_not_utc():
    # 01:00 UTC on the 16th is still the 15th in São Paulo
    now = datetime(2025, 6, 16, 1, 0, tzinfo=timezone.utc)

    rng = resolve_range("", now=now, tz=TZ)

    assert rng.start == datetime(2025, 6, 15, tzinfo=TZ)
    assert rng.start.astimezone(timezone.utc) == datetime(2025, 6, 15, 3, 0, tzinfo=timezone.utc)


def test_resolver_is_pure():
    first = resolve_range("últimos 3 dias", now=NOW, tz=TZ)
    second = resolve_range("últimos 3 dias", now=NOW, tz=TZ)
    assert first == second


def test_parse_br_date():
    assert parse_br_date("01/06/2025") == date(2025, 6, 1)
    assert parse_br_date("1/6/2025") == date(2025, 6, 1)
    assert parse_br_date("31/02/2025") is None
    assert parse_br_date("00/01/2025") is None
    assert parse_br_date("01/06/25") is None
