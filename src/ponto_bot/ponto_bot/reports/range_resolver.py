"""Turn the parameters of a "relatório" command into a concrete period.

Rules, first match wins:

1. ``DD/MM/AAAA até DD/MM/AAAA``: both days inclusive.
2. ``últimos N [dias]``: the last N days, today included.
3. ``ontem``: yesterday.
4. anything else (including nothing): today.

All day boundaries are midnights in the reference timezone, never in the
timezone of the machine running the bot.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo

from ..common.datetime_utils import format_br_date, local_date, local_midnight, parse_br_date, to_utc
from ..core.constants import DATE_INPUT_FORMAT, LAST_DAYS_TOKEN, RANGE_SEPARATOR_TOKEN, YESTERDAY_TOKEN
from .model import InvalidRange, RangeResult, ReportRange


def _day_range(first: date, last: date, tz: tzinfo, label: str) -> ReportRange:
    start = local_midnight(first, tz)
    end = local_midnight(last + timedelta(days=1), tz)
    # Raises OverflowError when a bound has no UTC instant (e.g. year 1 east of UTC).
    to_utc(start)
    to_utc(end)
    return ReportRange(start=start, end=end, label=label)


def _period_label(first: date, last: date) -> str:
    if first == last:
        return format_br_date(first)
    return f"{format_br_date(first)} a {format_br_date(last)}"


def _explicit_range(params_text: str, tz: tzinfo) -> RangeResult:
    start_text, _, end_text = params_text.partition(RANGE_SEPARATOR_TOKEN)
    start_text, end_text = start_text.strip(), end_text.strip()

    first = parse_br_date(start_text)
    if first is None:
        return InvalidRange(
            f'Data inicial inválida: "{start_text}". Use o formato {DATE_INPUT_FORMAT}, '
            'por exemplo "relatório 01/06/2025 até 05/06/2025".'
        )
    last = parse_br_date(end_text)
    if last is None:
        return InvalidRange(
            f'Data final inválida: "{end_text}". Use o formato {DATE_INPUT_FORMAT}, '
            'por exemplo "relatório 01/06/2025 até 05/06/2025".'
        )
    if last < first:
        return InvalidRange("A data inicial deve ser anterior ou igual à data final.")

    try:
        return _day_range(first, last, tz, _period_label(first, last))
    except OverflowError:
        return InvalidRange(f"Período fora do intervalo suportado. Use o formato {DATE_INPUT_FORMAT}.")


def _last_days_range(tokens: list[str], today: date, tz: tzinfo) -> RangeResult:
    count_text = tokens[1] if len(tokens) > 1 else ""
    invalid = InvalidRange(
        f'Número de dias inválido: "{count_text}". Use um número inteiro positivo, '
        'por exemplo "relatório últimos 7 dias".'
    )
    if not (count_text.isascii() and count_text.isdigit()):
        return invalid
    days = int(count_text)
    if days <= 0:
        return invalid

    try:
        first = today - timedelta(days=days - 1)
    except OverflowError:
        return invalid
    title = f"Últimos {days} dias" if days > 1 else "Último dia"
    try:
        return _day_range(first, today, tz, f"{title} ({_period_label(first, today)})")
    except OverflowError:
        return invalid


def resolve_range(params_text: str, *, now: datetime, tz: tzinfo) -> RangeResult:
    """Pure function of (params_text, now, tz)."""
    params_text = (params_text or "").strip()
    tokens = params_text.split()
    today = local_date(now, tz)

    if RANGE_SEPARATOR_TOKEN in params_text:
        return _explicit_range(params_text, tz)

    if tokens and tokens[0] == LAST_DAYS_TOKEN:
        return _last_days_range(tokens, today, tz)

    if params_text == YESTERDAY_TOKEN:
        yesterday = today - timedelta(days=1)
        return _day_range(yesterday, yesterday, tz, f"Ontem ({format_br_date(yesterday)})")

    return _day_range(today, today, tz, f"Hoje ({format_br_date(today)})")
