"""Tests for the analog-validate command line."""

from __future__ import annotations

from pathlib import Path

from analog_validator.cli import build_parser, main, run_validation

CONFIGS = Path(__file__).resolve().parent.parent / "configs"
CHAIN = CONFIGS / "tasks" / "scar_chain.yaml"
LOCAL = CONFIGS / "tasks" / "scar_chain_local.yaml"
DEFAULT_CAPS = CONFIGS / "capabilities" / "default.yaml"


class TestRunValidation:

    def test_valid_task_passes_with_built_in_capabilities(self):
        result = run_validation(CHAIN)
        assert result.passed
        assert "built-in device capabilities" in result.output
        assert "RESULT: PASS" in result.output

    def test_valid_task_passes_with_capabilities_file(self):
        result = run_validation(CHAIN, DEFAULT_CAPS)
        assert result.passed
        assert f"OK: {DEFAULT_CAPS}" in result.output

    def test_every_category_is_listed(self):
        output = run_validation(CHAIN).output
        for label in ("lattice", "Ω", "Δ", "φ", "δ", "misc"):
            assert f"{label}: OK" in output

    def test_invalid_task_fails_with_violations(self):
        result = run_validation(LOCAL)
        assert not result.passed
        assert "RESULT: FAIL" in result.output
        assert "δ: FAIL — 1 violation(s)" in result.output
        assert "  - Δi value 0.005 is not consistent with resolution 0.01." in result.output

    def test_missing_task_reports_loader_error(self):
        result = run_validation("/nonexistent/task.yaml")
        assert not result.passed
        assert "could not load task" in result.output

    def test_missing_capabilities_reports_loader_error(self):
        result = run_validation(CHAIN, "/nonexistent/capabilities.yaml")
        assert not result.passed
        assert "could not load device capabilities" in result.output


class TestMain:

    def test_parser_defaults(self):
        args = build_parser().parse_args([str(CHAIN)])
        assert args.task == CHAIN
        assert args.capabilities is None
        assert args.verbose is False

    def test_exit_code_zero_on_pass(self, capsys):
        assert main([str(CHAIN)]) == 0
        assert "RESULT: PASS" in capsys.readouterr().out

    def test_exit_code_one_on_fail(self, capsys):
        assert main([str(LOCAL), "--capabilities", str(DEFAULT_CAPS), "--verbose"]) == 1
        assert "RESULT: FAIL" in capsys.readouterr().out
