# ---------------------------------------------------------------------------
# File: test_config.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for KeyValueFile + HubSettings layering.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/03/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import os
import stat

import pytest

from scripthub.core.config import ConfigError, HubSettings, KeyValueFile, is_ident


def test_missing_file_loads_empty(tmp_path):
	kv = KeyValueFile(tmp_path / "none.conf")

	assert kv.exists() is False
	assert kv.load() == {}
	assert kv.get("A", "dflt") == "dflt"


def test_load_skips_comments_blanks_and_bad_lines(tmp_path):
	path = tmp_path / "a.conf"
	path.write_text(
		"# comment\n"
		"\n"
		"A=1\n"
		"  B = two words \n"
		"no equals here\n"
		"9BAD=x\n"
		"C=x=y\n",
		encoding="utf-8",
	)

	values = KeyValueFile(path).load()

	assert values == {"A": "1", "B": " two words", "C": "x=y"}


def test_set_upserts_and_restricts_permissions(tmp_path):
	kv = KeyValueFile(tmp_path / "sub" / "state")

	kv.set("A", "1")
	kv.set("B", "2")
	kv.set("A", "3")

	assert kv.load() == {"B": "2", "A": "3"}
	assert kv.path.read_text(encoding="utf-8").splitlines() == ["B=2", "A=3"]

	if os.name == "posix":
		assert stat.S_IMODE(kv.path.stat().st_mode) == 0o600


def test_set_keeps_comments(tmp_path):
	path = tmp_path / "c.conf"
	path.write_text("# keep me\nA=1\n", encoding="utf-8")

	KeyValueFile(path).set("A", "2")

	assert path.read_text(encoding="utf-8") == "# keep me\nA=2\n"


def test_unset_removes_key_and_deletes_empty_file(tmp_path):
	kv = KeyValueFile(tmp_path / "s")
	kv.set("A", "1")
	kv.set("B", "2")

	kv.unset("A")
	assert kv.load() == {"B": "2"}

	kv.unset("B")
	assert kv.exists() is False


def test_reset_deletes_file(tmp_path):
	kv = KeyValueFile(tmp_path / "s")
	kv.set("A", "1")

	kv.reset()
	kv.reset()

	assert kv.exists() is False


def test_invalid_keys_raise(tmp_path):
	kv = KeyValueFile(tmp_path / "s")

	with pytest.raises(ConfigError):
		kv.set("1BAD", "x")
	with pytest.raises(ConfigError):
		kv.get("has space")

	assert is_ident("_ok1") is True
	assert is_ident("no-dash") is False


def test_update_and_has(tmp_path):
	kv = KeyValueFile(tmp_path / "s")
	kv.update({"A": 1, "B": None})

	assert kv.has("A") is True
	assert kv.get("A") == "1"
	assert kv.get("B") == ""
	assert kv.keys() == ["A", "B"]


def test_settings_defaults_use_home(tmp_path):
	s = HubSettings.load(environ={}, home=tmp_path)

	assert s.get("hub.title") == "Script Hub"
	assert str(tmp_path) in s.get("hub.root")
	assert s.source_of("hub.root") == "default"
	assert s.source_of("nope") == "unset"


def test_settings_layering_file_then_env(tmp_path):
	cfg = tmp_path / "hub.conf"
	cfg.write_text("HUB_TITLE=From file\nLOG_LEVEL=WARNING\n", encoding="utf-8")

	s = HubSettings.load(
		config_path=cfg,
		environ={"SCRIPTHUB_LOG_LEVEL": "DEBUG"},
		home=tmp_path,
	)

	assert s.get("hub.title") == "From file"
	assert s.source_of("hub.title") == "config"
	assert s.get("logging.level") == "DEBUG"
	assert s.source_of("logging.level") == "env"
	assert s.source_of("config.file") == "cli"


def test_settings_config_file_from_env(tmp_path):
	cfg = tmp_path / "env.conf"
	cfg.write_text("HUB_ID=fromenv\n", encoding="utf-8")

	s = HubSettings.load(environ={"SCRIPTHUB_CONFIG_FILE": str(cfg)}, home=tmp_path)

	assert s.get("hub.id") == "fromenv"
	assert s.config_file.path == cfg


def test_settings_cli_set_wins(tmp_path):
	s = HubSettings.load(environ={"SCRIPTHUB_HUB_TITLE": "env"}, home=tmp_path)
	s.set("hub.title", "cli")

	assert s.get("hub.title") == "cli"
	assert s.source_of("hub.title") == "cli"
