"""Tests for config.py - .cdd.yml parsing and validation."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from cdd_rust.config import (
    CddConfig,
    ExtractConfig,
    WriterConfig,
    _resolve_dict,
    _resolve_env_vars,
    load_config,
    validate_config,
)

if TYPE_CHECKING:
    import pytest


def _write_cdd_yml(root: Path, data: Any) -> None:
    """Write .cdd.yml with given data."""
    (root / ".cdd.yml").write_text(yaml.dump(data), encoding="utf-8")


# ── _resolve_env_vars / _resolve_dict ─────────────────────────────────


class TestResolveEnvVars:
    def test_resolves_existing_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MY_VAR", "hello")
        assert _resolve_env_vars("${MY_VAR}") == "hello"

    def test_missing_var_returns_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MISSING_VAR", raising=False)
        assert _resolve_env_vars("${MISSING_VAR}") == ""

    def test_no_vars_unchanged(self) -> None:
        assert _resolve_env_vars("plain text") == "plain text"

    def test_nested_dict(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VIS", "pub(crate)")
        assert _resolve_dict({"writer": {"visibility": "${VIS}", "indent": 2}}) == {
            "writer": {"visibility": "pub(crate)", "indent": 2}
        }


# ── load_config ───────────────────────────────────────────────────────


class TestLoadConfig:
    def test_defaults_without_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("CDD_FAITHFUL_GENERICS", raising=False)
        monkeypatch.delenv("CDD_VISIBILITY", raising=False)
        config = load_config(tmp_path)
        assert config.extract == ExtractConfig()
        assert config.writer == WriterConfig()
        assert config.extract.language is None

    def test_reads_sections(self, tmp_path: Path) -> None:
        _write_cdd_yml(
            tmp_path,
            {
                "extract": {"faithful_generics": True},
                "writer": {"visibility": "", "indent": 2},
            },
        )
        config = load_config(tmp_path)
        assert config.extract.faithful_generics is True
        assert config.writer.visibility == ""
        assert config.writer.indent == 2

    def test_string_booleans(self, tmp_path: Path) -> None:
        _write_cdd_yml(tmp_path, {"extract": {"faithful_generics": "yes"}})
        assert load_config(tmp_path).extract.faithful_generics is True

    def test_env_fallbacks(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CDD_FAITHFUL_GENERICS", "1")
        monkeypatch.setenv("CDD_VISIBILITY", "pub(crate)")
        config = load_config(tmp_path)
        assert config.extract.faithful_generics is True
        assert config.writer.visibility == "pub(crate)"

    def test_file_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CDD_FAITHFUL_GENERICS", "1")
        _write_cdd_yml(tmp_path, {"extract": {"faithful_generics": False}})
        assert load_config(tmp_path).extract.faithful_generics is False

    def test_non_mapping_file_is_ignored(self, tmp_path: Path) -> None:
        _write_cdd_yml(tmp_path, ["not", "a", "mapping"])
        assert load_config(tmp_path) == CddConfig()

    def test_invalid_section_type_uses_defaults(self, tmp_path: Path) -> None:
        _write_cdd_yml(tmp_path, {"writer": "oops"})
        assert load_config(tmp_path).writer == WriterConfig()

    def test_reads_language(self, tmp_path: Path) -> None:
        _write_cdd_yml(tmp_path, {"extract": {"language": "rust"}})
        assert load_config(tmp_path).extract.language == "rust"

    def test_null_indent_uses_default(self, tmp_path: Path) -> None:
        _write_cdd_yml(tmp_path, {"writer": {"indent": None}})
        assert load_config(tmp_path).writer.indent == 4


# ── validate_config ───────────────────────────────────────────────────


class TestValidateConfig:
    def test_defaults_are_valid(self) -> None:
        assert validate_config(CddConfig()) == []

    def test_restricted_visibilities_are_valid(self) -> None:
        for visibility in ("", "pub", "pub(crate)", "pub(super)", "pub(in crate::models)"):
            config = CddConfig(writer=WriterConfig(visibility=visibility))
            assert validate_config(config) == [], visibility

    def test_bad_visibility(self) -> None:
        errors = validate_config(CddConfig(writer=WriterConfig(visibility="public")))
        assert any("writer.visibility" in e for e in errors)

    def test_bad_indent(self) -> None:
        errors = validate_config(CddConfig(writer=WriterConfig(indent=-1)))
        assert any("writer.indent" in e for e in errors)

    def test_unsupported_language(self) -> None:
        errors = validate_config(CddConfig(extract=ExtractConfig(language="go")))
        assert any("extract.language" in e for e in errors)
