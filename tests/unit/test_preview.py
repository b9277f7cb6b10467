"""Unit tests for formats/preview.py — sample expansion and per-call counters."""

from __future__ import annotations

import re
from datetime import datetime

import pytest

from hrconf.formats.engine import InvalidFormatError
from hrconf.formats.preview import preview, preview_many, sample_context
from hrconf.settings import Settings

MARCH = datetime(2024, 3, 15, 9, 30)


class TestPreview:
    def test_document_reference(self):
        assert preview("DOC-{YYYY}-{MM}-{###}", at=MARCH) == "DOC-2024-03-001"

    def test_short_year_and_day(self):
        assert preview("{YY}{MM}{DD}", at=datetime(2009, 1, 5)) == "090105"

    def test_named_placeholders_use_samples(self):
        assert preview("{DEPT}/{LOC}/{TYPE}", at=MARCH) == "ENG/NY/EMP"

    def test_sample_values_from_settings(self):
        settings = Settings(preview_department="finance", preview_location="london")
        assert preview("{DEPT}-{LOC}", at=MARCH, settings=settings) == "FIN-LO"

    def test_literal_only(self):
        assert preview("STATIC", at=MARCH) == "STATIC"

    def test_no_counter_is_stable(self):
        fmt = "EMP{YYYY}{MM}{DD}-{DEPT}"
        assert preview(fmt, at=MARCH) == preview(fmt, at=MARCH)

    def test_equivalent_to_first_of_many(self):
        fmt = "INV-{YYYY}-{####}"
        assert preview(fmt, at=MARCH) == preview_many(fmt, 1, at=MARCH)[0]

    def test_invalid_format_raises(self):
        with pytest.raises(InvalidFormatError):
            preview("EMP{YYYY", at=MARCH)

    def test_defaults_to_now(self):
        assert preview("{YYYY}") == str(datetime.now().year)


class TestPreviewMany:
    def test_counter_runs_one_to_count(self):
        assert preview_many("EMP{YYYY}-{###}", 5, at=MARCH) == [
            "EMP2024-001",
            "EMP2024-002",
            "EMP2024-003",
            "EMP2024-004",
            "EMP2024-005",
        ]

    @pytest.mark.parametrize("width", [1, 2, 3, 4, 6])
    def test_counter_width_matches_hash_run(self, width):
        fmt = "ID-{" + "#" * width + "}"
        for item in preview_many(fmt, 9, at=MARCH):
            digits = item.removeprefix("ID-")
            assert re.fullmatch(rf"\d{{{width}}}", digits)

    def test_counter_grows_past_width(self):
        assert preview_many("{#}", 11, at=MARCH)[-1] == "11"

    def test_counter_resets_between_calls(self):
        first = preview_many("{###}", 3, at=MARCH)
        second = preview_many("{###}", 3, at=MARCH)
        assert first == second == ["001", "002", "003"]

    def test_repeated_counters_share_value(self):
        assert preview_many("{##}-{####}", 2, at=MARCH) == ["01-0001", "02-0002"]

    def test_only_counter_varies(self):
        items = preview_many("DOC-{YYYY}-{DEPT}-{###}", 5)
        prefixes = {i.rsplit("-", 1)[0] for i in items}
        assert len(prefixes) == 1
        assert [int(i.rsplit("-", 1)[1]) for i in items] == [1, 2, 3, 4, 5]

    def test_zero_count(self):
        assert preview_many("{###}", 0, at=MARCH) == []

    def test_negative_count(self):
        with pytest.raises(ValueError):
            preview_many("{###}", -1, at=MARCH)

    def test_invalid_format_raises(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            preview_many("EMP{}-{###}", 5, at=MARCH)
        assert "Empty placeholder" in exc_info.value.result.errors


class TestSampleContext:
    def test_uses_settings(self):
        ctx = sample_context(4, Settings(preview_department="OPS"))
        assert ctx.sequence == 4
        assert ctx.department == "OPS"
        assert ctx.employee_type == "EMP"
