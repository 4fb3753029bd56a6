"""
lc 用の共通I/O部品集（toolkit）

狙い：
- lc 本体（lc.py）は「引数の解釈 / 走査 / 段組み表示」に集中させる
- logger構成、.env読み取り、bool変換、JSON保存、端末まわりの小物はここに寄せる

注意：
- ここに入れるのは「lc 固有の意味を持たないもの」だけ
- 環境変数名や config のキー名、payload の形は lc.py 側で持つ
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import sys
from pathlib import Path
from typing import Any

import colorama


def parse_provided_options(argv: list[str]) -> set[str]:
    """
    CLI で明示された --option の集合を返す（`--out=x` は `--out` として数える）。

    config/env は「CLI で指定されていない項目」だけを埋めるので、その判定に使う。
    """
    provided: set[str] = set()
    for token in argv:
        if token.startswith("--"):
            provided.add(token.split("=", 1)[0])
    return provided


def parse_bool(value: str) -> bool:
    """
    env 文字列の bool 解釈。

    true: 1, true, yes, y, on
    false: 0, false, no, n, off, 空文字
    """
    v = value.strip().lower()
    if v in {"1", "true", "yes", "y", "on"}:
        return True
    if v in {"0", "false", "no", "n", "off", ""}:
        return False
    return bool(v)


def load_env_file(path: Path, logger: logging.Logger) -> dict[str, str]:
    """
    KEY=VALUE 形式の .env を読む。

    - 空行と `#` コメントは読み飛ばす
    - `export KEY=VALUE` も受け付ける
    - 値を囲む ' / " は外す
    - 読めないファイルは ERROR ログを出して空 dict（落とさない）
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("env file load failed: %s (%s)", path, exc)
        return {}

    env: dict[str, str] = {}
    for row in text.splitlines():
        line = row.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].lstrip()
        if "=" not in line:
            continue
        key, val = line.split("=", 1)
        key = key.strip()
        val = val.strip()
        if len(val) >= 2 and val[0] == val[-1] and val[0] in "'\"":
            val = val[1:-1]
        if key:
            env[key] = val
    return env


def get_env(name: str, env_file: dict[str, str]) -> str | None:
    """
    環境変数を引く。`--env-file` の値が OS 環境変数より優先。空文字は未設定扱い。
    """
    v = env_file.get(name)
    if v:
        return v
    v = os.getenv(name)
    if v:
        return v
    return None


def load_json_object(path: Path, logger: logging.Logger) -> dict[str, Any]:
    """JSON オブジェクトのファイルを読む。壊れていたら ERROR ログを出して空 dict。"""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.error("config load failed: %s (%s)", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.error("config must be a JSON object: %s", path)
        return {}
    return data


def setup_logger(name: str, verbose: bool) -> logging.Logger:
    """
    stderr 向けの logger を組み立てる。

    stdout は一覧（または JSON）専用にしたいので、進捗や警告はすべて stderr へ。
    何度呼んでも handler が重複しないよう、毎回付け直す。
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False

    logger.handlers.clear()

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    return logger


def write_json_file(path: Path, payload: dict[str, Any], logger: logging.Logger) -> bool:
    """
    payload を JSON ファイルに書く。成功なら True、失敗は ERROR ログを出して False。

    UTF-8 として不正なファイル名（surrogateescape で読まれた str）は元のバイト列に戻して書く。
    エンコードはファイルを開く前に済ませる（失敗しても空のファイルを残さない）。
    """
    try:
        out_path = path.expanduser().resolve()
        text = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
        data = text.encode("utf-8", errors="surrogateescape")
        out_path.write_bytes(data)
    except (OSError, UnicodeError) as exc:
        logger.error("failed to write payload to %s: %s", path, exc)
        return False
    logger.info("payload written to %s", out_path)
    return True


def relax_output_errors(stream: Any) -> None:
    """
    出力ストリームのエンコードエラーを backslashreplace にする。

    エンコーディング（UTF-8 など）はそのままで、表せない文字だけ \\udcff のように書く。
    reconfigure を持たないストリーム（StringIO など）は何もしない。
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="backslashreplace")


def terminal_width() -> int:
    """
    端末の桁数を返す。取れない場合は 0（呼び出し側で「1列」に倒す）。

    COLUMNS 環境変数があればそれが優先される（shutil の仕様）。
    """
    return shutil.get_terminal_size(fallback=(0, 0)).columns


def enable_ansi() -> None:
    """
    ANSI エスケープを解釈できる状態にする（Windows の古いコンソール向け）。

    ANSI をそのまま解釈できる端末では何もしない。出力の前に1回だけ呼ぶ。
    """
    colorama.just_fix_windows_console()
