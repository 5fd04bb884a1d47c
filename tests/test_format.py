"""Tests for preset formats and layout rendering."""

from __future__ import annotations

import pytest

from datewise import Format, Instant, Lang, format_layout, format_preset

from conftest import BERLIN


@pytest.fixture
def sample() -> Instant:
    """Monday 2026-02-09 12:30:45 UTC."""
    return Instant(2026, 2, 9, 12, 30, 45)


class TestPresets:
    """Tests for format_preset."""

    @pytest.mark.parametrize(
        "fmt,expected",
        [
            (Format.ISO, "2026-02-09"),
            (Format.EU, "09.02.2026"),
            (Format.US, "02/09/2026"),
            (Format.LONG, "February 9, 2026"),
            (Format.RFC2822, "Mon, 09 Feb 2026 12:30:45 +0000"),
        ],
    )
    def test_english(self, sample, fmt, expected):
        assert format_preset(sample, fmt) == expected
        assert sample.format(fmt) == expected

    @pytest.mark.parametrize(
        "lang,expected",
        [
            (Lang.DE, "9. Februar 2026"),
            (Lang.FR, "9 février 2026"),
            (Lang.ES, "9 de febrero de 2026"),
        ],
    )
    def test_long_localized(self, sample, lang, expected):
        assert sample.with_lang(lang).format(Format.LONG) == expected

    def test_numeric_formats_ignore_lang(self, sample):
        german = sample.with_lang(Lang.DE)
        assert german.format(Format.ISO) == "2026-02-09"
        assert german.format(Format.RFC2822) == "Mon, 09 Feb 2026 12:30:45 +0000"

    def test_rendered_in_own_zone(self):
        late = Instant(2026, 2, 9, 23, 30).in_timezone(BERLIN)
        assert late.format(Format.ISO) == "2026-02-10"
        assert late.format(Format.RFC2822) == "Tue, 10 Feb 2026 00:30:00 +0100"

    def test_requires_format(self, sample):
        with pytest.raises(TypeError):
            format_preset(sample, "iso")


class TestLayout:
    """Tests for format_layout."""

    def test_numeric(self, sample):
        assert format_layout(sample, "%Y-%m-%d %H:%M:%S") == "2026-02-09 12:30:45"

    def test_nanoseconds(self):
        i = Instant(2026, 2, 9, nanosecond=1_500)
        assert format_layout(i, "%S.%f") == "00.000001500"

    def test_twelve_hour(self):
        assert format_layout(Instant(2026, 2, 9, 0, 5), "%I:%M %p") == "12:05 AM"
        assert format_layout(Instant(2026, 2, 9, 15, 4), "%I:%M %p") == "03:04 PM"

    def test_two_digit_year(self):
        assert format_layout(Instant(2005, 1, 1), "%y") == "05"

    def test_english_names(self, sample):
        assert format_layout(sample, "%A, %d. %B %Y") == "Monday, 09. February 2026"
        assert format_layout(sample, "%a, %d %b %Y") == "Mon, 09 Feb 2026"

    def test_german_names(self, sample):
        german = sample.with_lang(Lang.DE)
        assert german.format_layout("%A, %d. %B %Y") == "Montag, 09. Februar 2026"
        assert german.format_layout("%a, %d %b %Y") == "Mo, 09 Feb 2026"

    def test_zone_directives(self):
        i = Instant(2026, 7, 1, 12, timezone=BERLIN)
        assert format_layout(i, "%z %Z") == "+0200 Europe/Berlin"

    def test_negative_offset(self):
        i = Instant(2026, 1, 1, timezone="-05:30")
        assert format_layout(i, "%z") == "-0530"

    def test_literals(self, sample):
        assert format_layout(sample, "100%% %Y%") == "100% 2026%"

    def test_unsupported_directive(self, sample):
        with pytest.raises(ValueError):
            format_layout(sample, "%j")
