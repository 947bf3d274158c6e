"""Tests for ViolationReport and TaskValidationError."""

from __future__ import annotations

import dataclasses

import pytest

from analog_validator.validation.report import TaskValidationError, ViolationReport


class TestViolationReport:

    def test_empty_report_is_valid(self):
        report = ViolationReport()
        assert report.is_valid
        assert report.count() == 0
        assert report.all_violations() == []

    def test_sets_are_deduplicated_and_frozen(self):
        report = ViolationReport(lattice_violations=["a", "a", "b"])
        assert report.lattice_violations == frozenset({"a", "b"})
        assert isinstance(report.lattice_violations, frozenset)

    def test_report_is_immutable(self):
        report = ViolationReport()
        with pytest.raises(dataclasses.FrozenInstanceError):
            report.misc_violations = frozenset({"x"})

    def test_categories_in_display_order(self):
        labels = [label for label, _ in ViolationReport().categories()]
        assert labels == ["lattice", "Ω", "Δ", "φ", "δ", "misc"]

    def test_count_and_validity(self):
        report = ViolationReport(
            omega_violations={"o1"},
            misc_violations={"m1", "m2"},
        )
        assert not report.is_valid
        assert report.count() == 3

    def test_all_violations_grouped_and_sorted(self):
        report = ViolationReport(
            lattice_violations={"b", "a"},
            misc_violations={"z"},
        )
        assert report.all_violations() == ["a", "b", "z"]

    def test_as_dict_lists_every_category(self):
        report = ViolationReport(phi_violations={"p2", "p1"})
        result = report.as_dict()
        assert result["φ"] == ["p1", "p2"]
        assert result["lattice"] == []
        assert len(result) == 6

    def test_equal_content_reports_compare_equal(self):
        assert ViolationReport(delta_violations={"d"}) == ViolationReport(delta_violations=["d"])


class TestTaskValidationError:

    def test_raise_if_invalid_passes_for_valid_report(self):
        ViolationReport().raise_if_invalid()

    def test_raise_if_invalid_raises_with_report(self):
        report = ViolationReport(local_detuning_violations={"bad scaling"})
        with pytest.raises(TaskValidationError, match="1 violation") as exc_info:
            report.raise_if_invalid()
        assert exc_info.value.report is report
        assert "[δ] bad scaling" in str(exc_info.value)
