"""Hypothesis-based property tests for template-driven date parsing.

Focus on round-trip of valid components and rejection of rollover.
"""

from __future__ import annotations

import calendar
from datetime import date

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from dateparts.parsing import parse_datetime, to_date

pytestmark = pytest.mark.usefixtures("utc_local_time")

_dates = st.dates(min_value=date(1900, 1, 1), max_value=date(2100, 12, 31))
_hours = st.integers(min_value=0, max_value=23)
_minutes = st.integers(min_value=0, max_value=59)


class TestRoundTripProperties:
    """Valid components survive parsing unchanged."""

    @given(day=_dates, hour=_hours, minute=_minutes, second=_minutes)
    def test_default_template_preserves_components(
        self, day: date, hour: int, minute: int, second: int
    ) -> None:
        text = f"{day.day:02d}/{day.month:02d}/{day.year} {hour:02d}:{minute:02d}:{second:02d}"

        result = to_date(text)
        assert result is not None
        assert (result.day, result.month, result.year) == (day.day, day.month, day.year)
        assert (result.hour, result.minute, result.second) == (hour, minute, second)

    @given(
        day=_dates,
        order=st.permutations(["dd", "MM", "yyyy"]),
        separator=st.sampled_from(["/", " ", ":"]),
    )
    def test_any_placeholder_order(self, day: date, order: list[str], separator: str) -> None:
        values = {"dd": str(day.day), "MM": str(day.month), "yyyy": str(day.year)}
        template = separator.join(order)
        text = separator.join(values[token] for token in order)

        result = to_date(text, template)
        assert result is not None
        assert result.date() == day


class TestRejectionProperties:
    """Components outside their calendar range never parse."""

    @given(day=_dates, excess=st.integers(min_value=1, max_value=99))
    def test_day_past_month_end_rejected(self, day: date, excess: int) -> None:
        last_day = calendar.monthrange(day.year, day.month)[1]
        text = f"{last_day + excess}/{day.month}/{day.year}"
        event(f"excess={'small' if excess < 5 else 'large'}")

        result, errors = parse_datetime(text, "dd/MM/yyyy")
        assert result is None
        assert errors[0].component == "day"

    @given(day=_dates, month=st.integers(min_value=13, max_value=99))
    def test_month_past_december_rejected(self, day: date, month: int) -> None:
        assert to_date(f"{day.day}/{month}/{day.year}", "dd/MM/yyyy") is None

    @given(hour=st.integers(min_value=24, max_value=999))
    def test_hour_past_midnight_rejected(self, hour: int) -> None:
        assert to_date(f"15/01/2022 {hour}:00:00") is None

    @pytest.mark.fuzz
    @given(text=st.text(max_size=40))
    @settings(max_examples=2000)
    def test_arbitrary_text_never_raises(self, text: str) -> None:
        result, errors = parse_datetime(text)
        assert (result is None) == bool(errors)
