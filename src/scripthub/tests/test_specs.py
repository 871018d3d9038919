# ---------------------------------------------------------------------------
# File: test_specs.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for menu spec parsing + the SpecRegistry.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Paul G. LeDuc				Initial tests
# 10/19/2026	Paul G. LeDuc				Case-sensitive flag tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from scripthub.menu.flags import MenuFlag, format_flags, is_disabled, parse_flags
from scripthub.menu.specs import (
	MalformedSpecError,
	MenuSpec,
	SpecRegistry,
	coerce_spec,
	parse_spec,
	parse_wait,
	with_source,
)


def test_parse_spec_five_fields_has_no_source_or_wait():
	spec = parse_spec("1|Setup|Init|do_init|")

	assert spec.key == "1"
	assert spec.group == "Setup"
	assert spec.label == "Init"
	assert spec.handler == "do_init"
	assert spec.source == ""
	assert spec.flags == MenuFlag.NONE
	assert spec.wait is None


def test_parse_spec_six_fields_reads_source():
	spec = parse_spec("tools.py|A|Tools|Run|do_run|disabled")

	assert spec.source == "tools.py"
	assert spec.key == "A"
	assert spec.flags == MenuFlag.DISABLED


def test_parse_spec_seven_fields_reads_wait():
	spec = parse_spec("builtin|X|Run modes|Exit|do_exit||1")
	assert spec.wait == 1.0


def test_parse_spec_keeps_empty_trailing_fields():
	spec = parse_spec("|Setup|Init|do_init|")
	assert spec.key == ""


@pytest.mark.parametrize("raw", ["a|b|c|d", "a|b|c|d|e|f|g|h", "nothing"])
def test_parse_spec_rejects_bad_field_count(raw):
	with pytest.raises(MalformedSpecError) as ei:
		parse_spec(raw)
	assert "field count" in str(ei.value)
	assert ei.value.record == raw


@pytest.mark.parametrize("raw", [
	"1||Init|do_init|",
	"1|Setup||do_init|",
	"1|Setup|Init||",
])
def test_parse_spec_rejects_missing_required_field(raw):
	with pytest.raises(MalformedSpecError):
		parse_spec(raw)


def test_parse_wait_accepts_integers_and_decimals():
	assert parse_wait("") is None
	assert parse_wait("0") == 0.0
	assert parse_wait("3") == 3.0
	assert parse_wait("1.5") == 1.5
	assert parse_wait(4) == 4.0


def test_parse_wait_invalid_logs_warning_and_uses_default(caplog):
	caplog.set_level("WARNING")

	assert parse_wait("soon") is None
	assert parse_wait("-1") is None
	assert parse_wait(-2) is None
	assert "Invalid wait value" in caplog.text


def test_parse_flags_is_a_comma_set():
	assert parse_flags("disabled,disabled_if_dryrun") == MenuFlag.DISABLED | MenuFlag.DISABLED_IF_DRYRUN
	assert parse_flags(" disabled_if_dryrun ") == MenuFlag.DISABLED_IF_DRYRUN
	assert parse_flags("") == MenuFlag.NONE
	assert parse_flags("bogus,disabled") == MenuFlag.DISABLED


def test_format_flags_round_trips_known_names():
	assert format_flags(MenuFlag.DISABLED | MenuFlag.DISABLED_IF_DRYRUN) == "disabled,disabled_if_dryrun"
	assert format_flags(MenuFlag.NONE) == ""


def test_is_disabled_policy():
	assert is_disabled(MenuFlag.DISABLED, dry_run=False) is True
	assert is_disabled(MenuFlag.DISABLED, dry_run=True) is True
	assert is_disabled(MenuFlag.DISABLED_IF_DRYRUN, dry_run=False) is False
	assert is_disabled(MenuFlag.DISABLED_IF_DRYRUN, dry_run=True) is True
	assert is_disabled(MenuFlag.NONE, dry_run=True) is False


def test_coerce_spec_accepts_records_and_strings():
	rec = MenuSpec("G", "L", "h")
	assert coerce_spec(rec) is rec
	assert coerce_spec("1|G|L|h|").label == "L"

	with pytest.raises(MalformedSpecError):
		coerce_spec(MenuSpec("", "L", "h"))
	with pytest.raises(MalformedSpecError):
		coerce_spec(42)  # type: ignore[arg-type]


def test_with_source_prefixes_strings_and_replaces_record_source():
	assert with_source("1|G|L|h|", "mod.py") == "mod.py|1|G|L|h|"
	assert with_source(MenuSpec("G", "L", "h"), "mod.py").source == "mod.py"


def test_spec_registry_collects_without_validation():
	reg = SpecRegistry()
	reg.add("garbage")
	reg.add_many(["1|G|L|h|", MenuSpec("G", "L2", "h")])

	assert len(reg) == 3
	assert reg.records()[0] == "garbage"

	reg.reset()
	assert len(reg) == 0


def test_spec_registry_add_from_source_tags_records():
	reg = SpecRegistry()
	count = reg.add_from_source("mod.py", ["1|G|L|h|", "|G|L2|h|"])

	assert count == 2
	assert list(reg) == ["mod.py|1|G|L|h|", "mod.py||G|L2|h|"]


def test_spec_registry_rejects_empty_record():
	with pytest.raises(ValueError):
		SpecRegistry().add("")


def test_parse_flags_tokens_are_case_sensitive():
	assert parse_flags("DISABLED") == MenuFlag.NONE
	assert parse_flags("Disabled_If_DryRun,disabled") == MenuFlag.DISABLED


def test_uppercase_flag_does_not_disable_item():
	spec = parse_spec("1|G|Label|h|DISABLED")

	assert spec.flags == MenuFlag.NONE
	assert is_disabled(spec.flags, dry_run=True) is False
