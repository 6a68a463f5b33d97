"""Tests for the lintcache command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from lintcache.cache import LinterCache
from lintcache.cli.main import main
from lintcache.config import configuration_hash, load_config
from lintcache.model import Finding


@pytest.fixture()
def saved_cache(tmp_path: Path, sample_findings: list[Finding]) -> Path:
    """Write a cache with findings for two files."""
    cache_path = tmp_path / "cache.json"
    cache = LinterCache("0.4.0", configuration_hash=11)
    cache.cache_findings(sample_findings, "foo.swift")
    cache.cache_findings([], "bar.swift")
    cache.save(cache_path)
    return cache_path


def test_inspect_prints_summary(saved_cache: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["inspect", str(saved_cache)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Version: 0.4.0" in out
    assert "Configuration hash: 11" in out
    assert "Files: 2" in out
    assert "foo.swift: 2 finding(s)" in out
    assert "bar.swift: 0 finding(s)" in out


def test_inspect_prints_file_findings(saved_cache: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["inspect", str(saved_cache), "--file", "foo.swift"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "foo.swift:10:2: warning: Something is not right. (rule)" in out
    assert "foo.swift:5: error: Something is wrong. (rule)" in out


def test_inspect_reports_invalid_format(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cache_path = tmp_path / "cache.json"
    cache_path.write_text("[]", encoding="utf-8")

    exit_code = main(["inspect", str(cache_path)])

    assert exit_code == 1
    assert "invalid_format" in capsys.readouterr().err


def test_validate_accepts_matching_cache(saved_cache: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["validate", str(saved_cache), "--tool-version", "0.4.0", "--config-hash", "11"])

    assert exit_code == 0
    assert "Cache is valid: 2 file entries." in capsys.readouterr().out


@pytest.mark.parametrize(
    ("argv", "reason"),
    [
        (["--tool-version", "0.5.0", "--config-hash", "11"], "different_version"),
        (["--tool-version", "0.4.0"], "different_configuration"),
    ],
    ids=["version", "configuration"],
)
def test_validate_rejects_mismatched_cache(
    saved_cache: Path,
    capsys: pytest.CaptureFixture[str],
    argv: list[str],
    reason: str,
) -> None:
    exit_code = main(["validate", str(saved_cache), *argv])

    assert exit_code == 1
    assert reason in capsys.readouterr().err


def test_validate_reports_unreadable_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["validate", str(tmp_path / "missing.json"), "--tool-version", "0.4.0"])

    assert exit_code == 2
    assert "failed to read" in capsys.readouterr().err


def test_clear_removes_entries_and_saves(saved_cache: Path) -> None:
    exit_code = main(["clear", str(saved_cache), "--tool-version", "0.4.0", "--config-hash", "11", "foo.swift"])

    assert exit_code == 0
    payload = json.loads(saved_cache.read_text(encoding="utf-8"))
    assert payload["files"]["foo.swift"] == []
    reloaded = LinterCache.from_path(saved_cache, "0.4.0", configuration_hash=11)
    assert reloaded.findings("foo.swift") is None
    assert reloaded.findings("bar.swift") == []


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert "lintcache 0.4.0" in capsys.readouterr().out


def _write_config(path: Path, rules: list[str]) -> Path:
    path.write_text("rules:\n" + "".join(f"  - {rule}\n" for rule in rules), encoding="utf-8")
    return path


def test_validate_with_config_file_accepts_matching_cache(
    tmp_path: Path,
    sample_findings: list[Finding],
    capsys: pytest.CaptureFixture[str],
) -> None:
    config_path = _write_config(tmp_path / "lintcache.yaml", ["line_length"])
    cache_path = tmp_path / "cache.json"
    cache = LinterCache("0.4.0", configuration_hash=configuration_hash(load_config(tmp_path, config_path)))
    cache.cache_findings(sample_findings, "foo.swift")
    cache.save(cache_path)

    exit_code = main(["validate", str(cache_path), "--tool-version", "0.4.0", "--config", str(config_path)])

    assert exit_code == 0
    assert "Cache is valid: 1 file entries." in capsys.readouterr().out


def test_validate_with_config_file_rejects_other_configuration(
    tmp_path: Path,
    saved_cache: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    config_path = _write_config(tmp_path / "lintcache.yaml", ["line_length"])

    exit_code = main(["validate", str(saved_cache), "--tool-version", "0.4.0", "--config", str(config_path)])

    assert exit_code == 1
    assert "different_configuration" in capsys.readouterr().err


def test_validate_reports_invalid_config_file(
    tmp_path: Path,
    saved_cache: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    config_path = tmp_path / "lintcache.yaml"
    config_path.write_text("unknown_key: 1\n", encoding="utf-8")

    exit_code = main(["validate", str(saved_cache), "--tool-version", "0.4.0", "--config", str(config_path)])

    assert exit_code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_clear_with_config_file_saves(tmp_path: Path, sample_findings: list[Finding]) -> None:
    config_path = _write_config(tmp_path / "lintcache.yaml", ["line_length"])
    expected_hash = configuration_hash(load_config(tmp_path, config_path))
    cache_path = tmp_path / "cache.json"
    cache = LinterCache("0.4.0", configuration_hash=expected_hash)
    cache.cache_findings(sample_findings, "foo.swift")
    cache.save(cache_path)

    exit_code = main(["clear", str(cache_path), "--tool-version", "0.4.0", "--config", str(config_path), "foo.swift"])

    assert exit_code == 0
    assert LinterCache.from_path(cache_path, "0.4.0", configuration_hash=expected_hash).findings("foo.swift") is None


def test_config_and_config_hash_are_exclusive(saved_cache: Path, tmp_path: Path) -> None:
    config_path = _write_config(tmp_path / "lintcache.yaml", ["line_length"])

    with pytest.raises(SystemExit) as excinfo:
        main(
            [
                "validate",
                str(saved_cache),
                "--tool-version",
                "0.4.0",
                "--config",
                str(config_path),
                "--config-hash",
                "11",
            ]
        )

    assert excinfo.value.code == 2
