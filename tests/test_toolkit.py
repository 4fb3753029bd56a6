"""
toolkit（共通I/O部品）のテスト

lc から使う範囲（bool 解釈、.env、env の優先順位、logger、JSON 保存、端末幅）を押さえる。
"""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest

import toolkit


def test_parse_bool_truthy_and_falsey() -> None:
    for v in ["1", "true", "YES", "y", "on"]:
        assert toolkit.parse_bool(v) is True
    for v in ["0", "false", "No", "n", "off", ""]:
        assert toolkit.parse_bool(v) is False


def test_parse_provided_options_only_counts_long_options() -> None:
    provided = toolkit.parse_provided_options(["--width=80", "--json", "-d", "dir"])

    assert provided == {"--width", "--json"}


def test_load_env_file_parses_key_value_and_ignores_comments(tmp_path: Path) -> None:
    # テスト意図：空行/コメントは無視、export を許容、クォートを剥がす、= の無い行は読まない
    env_path = tmp_path / ".env"
    env_path.write_text(
        "\n".join(
            [
                "# comment",
                "",
                "export LCLS_WIDTH=120",
                'LCLS_EXT=".txt"',
                "LCLS_OUT='out.json'",
                "NO_EQUAL_SIGN",
            ]
        ),
        encoding="utf-8",
    )

    env = toolkit.load_env_file(env_path, toolkit.setup_logger("test", False))

    assert env == {"LCLS_WIDTH": "120", "LCLS_EXT": ".txt", "LCLS_OUT": "out.json"}


def test_load_env_file_missing_returns_empty(tmp_path: Path) -> None:
    assert toolkit.load_env_file(tmp_path / "nope.env", toolkit.setup_logger("test", False)) == {}


def test_get_env_prefers_env_file_over_os_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LCLS_WIDTH", "999")

    assert toolkit.get_env("LCLS_WIDTH", {"LCLS_WIDTH": "80"}) == "80"
    assert toolkit.get_env("LCLS_WIDTH", {}) == "999"
    assert toolkit.get_env("LCLS_UNSET_FOR_TEST", {}) is None


def test_load_json_object_rejects_non_objects(tmp_path: Path) -> None:
    logger = toolkit.setup_logger("test", False)
    good = tmp_path / "good.json"
    good.write_text('{"recurse": true}', encoding="utf-8")
    listy = tmp_path / "list.json"
    listy.write_text("[1, 2]", encoding="utf-8")
    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")

    assert toolkit.load_json_object(good, logger) == {"recurse": True}
    assert toolkit.load_json_object(listy, logger) == {}
    assert toolkit.load_json_object(broken, logger) == {}


def test_setup_logger_does_not_stack_handlers() -> None:
    toolkit.setup_logger("test-stack", False)
    logger = toolkit.setup_logger("test-stack", True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert logger.propagate is False


def test_write_json_file_round_trip_and_failure(tmp_path: Path) -> None:
    logger = toolkit.setup_logger("test", False)
    out = tmp_path / "report.json"

    assert toolkit.write_json_file(out, {"targets": []}, logger) is True
    assert json.loads(out.read_text(encoding="utf-8")) == {"targets": []}
    assert toolkit.write_json_file(tmp_path / "no" / "such" / "dir.json", {}, logger) is False


def test_terminal_width_honours_columns_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLUMNS", "123")

    assert toolkit.terminal_width() == 123


def test_write_json_file_keeps_undecodable_names_as_bytes(tmp_path: Path) -> None:
    # テスト意図：surrogateescape で読まれた名前は元のバイト列で書かれ、例外にならない
    logger = toolkit.setup_logger("test", False)
    out = tmp_path / "report.json"
    name = b"bad\xff.txt".decode("utf-8", errors="surrogateescape")

    assert toolkit.write_json_file(out, {"files": [name]}, logger) is True
    assert b'"bad\xff.txt"' in out.read_bytes()


def test_relax_output_errors_switches_to_backslashreplace() -> None:
    raw = io.BytesIO()
    stream = io.TextIOWrapper(raw, encoding="utf-8")
    toolkit.relax_output_errors(stream)
    stream.write("bad\udcff.txt")
    stream.flush()

    assert raw.getvalue() == b"bad\\udcff.txt"
    # reconfigure を持たないストリームは何もしない
    toolkit.relax_output_errors(io.StringIO())
