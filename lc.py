"""
lc: ディレクトリの中身を「ディレクトリ / ファイル / 読み取り専用ファイル」に分けて段組み表示するツール

このツールがやること（ざっくり）：
- 引数を解釈して ScanRequest を作る（短いフラグ -?defrR と対象ディレクトリ）
- 対象ディレクトリごとにエントリを走査して、名前を大文字小文字を無視して並べる
- 端末幅に収まる列数を計算して、列優先（上から下、次の列へ）で色付き表示する

設定の優先順位は CLI > env > config。
環境変数は LCLS_ で始まる名前を使う（ロケールの LC_* と混ざらないように）。
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import os
import stat
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, NoReturn, TextIO

from colorama import Fore, Style

import toolkit

LOGGER_NAME = "lc"

NONE_PLACEHOLDER = "(none)"
EXECUTABLE_SUFFIXES = (".exe", ".bat", ".cmd")

DIRECTORY_COLOR = Fore.BLUE
EXECUTABLE_COLOR = Fore.GREEN
HIDDEN_STYLE = Style.DIM
RESET = Style.RESET_ALL

USAGE = """\
Usage: lc [-?defrR] [dirs...]
    dirs          : zero or more target directories (default: current directory)
    Options:
       -?         : show help and exit, ignoring all other options
       -d         : show directories only
       -e "ext"   : suffix filter applied to file names, case-insensitive (e.g. -e ".png")
       -f         : show files only
       -r         : recurse into subdirectories
       -R         : additionally print a separate "Read-Only Files" section
    Extra options:
       --json             : print the listing as JSON instead of columns
       --out PATH         : also write the JSON payload to PATH
       --width N          : terminal width to lay out for (0 = single column)
       --padding N        : spaces added to the longest name (default: 4)
       --max-columns N    : upper bound on the number of columns (default: 4)
       --no-color         : do not emit ANSI color sequences
       --verbose          : log progress to stderr
       --config PATH      : JSON config file (CLI > env > config)
       --env-file PATH    : load LCLS_* variables from a .env file
    Exit status:
       0 : success
       1 : a target directory was missing (the others are still listed), or --out failed
       2 : usage error (nothing is scanned)"""

# 単独トークンのフラグ -> Namespace の属性名
_SWITCHES = {
    "-?": "show_help",
    "-d": "show_dirs",
    "-f": "show_files",
    "-r": "recurse",
    "-R": "show_readonly",
}

# argparse に渡す長いオプション（完全一致のときだけ）
_LONG_SWITCHES = {"--help", "--json", "--no-color", "--verbose"}
_LONG_VALUED = {"--out", "--width", "--padding", "--max-columns", "--config", "--env-file"}


# -------------------------
# エラー
# -------------------------


class LcError(Exception):
    """lc が利用者に報告するエラーの基底クラス。"""


class UsageError(LcError):
    """引数の指定ミス。実行全体を止める。"""


class DirectoryNotFound(LcError):
    """対象ディレクトリが存在しない（または一覧できない）。そのディレクトリだけ飛ばす。"""

    def __init__(self, directory: str, reason: str | None = None) -> None:
        self.directory = directory
        if reason is None:
            message = f"Directory '{directory}' does not exist."
        else:
            message = f"Directory '{directory}' cannot be listed: {reason}"
        super().__init__(message)


# -------------------------
# データモデル（DTO）
# -------------------------


@dataclass(frozen=True)
class ScanRequest:
    """
    引数解釈の結果。一度作ったら書き換えない。

    show_dirs / show_files は build_request の時点で正規化済み
    （どちらも指定されていなければ両方 True）。
    """

    show_help: bool = False
    show_dirs: bool = True
    show_files: bool = True
    recurse: bool = False
    show_readonly: bool = False
    extension_filter: str | None = None
    target_dirs: tuple[str, ...] = ()


@dataclass(frozen=True)
class RenderOptions:
    """段組み表示のパラメータ。width=None なら表示のたびに端末へ問い合わせる。"""

    width: int | None = None
    column_padding: int = 4
    max_columns: int = 4
    color: bool = True


@dataclass
class ScanResult:
    """1ディレクトリぶんの走査結果。3つとも大文字小文字を無視した順に並んでいる。"""

    directory_names: list[str] = field(default_factory=list)
    file_names: list[str] = field(default_factory=list)
    readonly_file_names: list[str] = field(default_factory=list)


# -------------------------
# CLIパース（I/O境界：入力）
# -------------------------


class _ArgumentParser(argparse.ArgumentParser):
    """argparse のエラーを SystemExit ではなく UsageError にする。"""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="lc", add_help=False, allow_abbrev=False)
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--out", type=Path, default=None)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--padding", type=int, default=4)
    parser.add_argument("--max-columns", type=int, default=4)
    parser.add_argument("--no-color", dest="color", action="store_false")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--config", type=Path, default=None)
    parser.add_argument("--env-file", type=Path, default=None)
    return parser


def interpret_tokens(tokens: list[str], args: argparse.Namespace) -> set[str]:
    """
    短いフラグと対象ディレクトリを args に書き込み、CLI で明示されたフラグの集合を返す。

    仕様として守りたいこと：
    - フラグは単独トークンのみ（-dr のようなまとめ書きは「ディレクトリ名」扱い）
    - -e は次のトークンを値として食う（前後の " は外す）。次が無ければ UsageError
    - それ以外のトークンは出現順のまま対象ディレクトリに積む
    """
    provided: set[str] = set()
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token in _SWITCHES:
            setattr(args, _SWITCHES[token], True)
            provided.add(token)
        elif token == "-e":
            if i + 1 >= len(tokens):
                raise UsageError("-e option requires an extension argument.")
            i += 1
            args.ext = tokens[i].strip('"')
            provided.add(token)
        else:
            args.dirs.append(token)
        i += 1
    return provided


def split_tokens(argv: list[str]) -> tuple[list[str], list[str]]:
    """
    argv を (argparse に渡す長いオプション, interpret_tokens に渡す残り) に分ける。

    仕様として守りたいこと：
    - -e の次のトークンは何であっても -e の値（`-e --json` の --json は拡張子）
    - 長いオプションは完全一致のものだけ。値は `--out=VALUE` の形にして渡す
      （`--out -d` でも -d が値になる）
    - それ以外は順番を保ったまま残りに入れる（`--outdir` はディレクトリ名）
    """
    long_tokens: list[str] = []
    rest: list[str] = []
    i = 0
    while i < len(argv):
        token = argv[i]
        name = token.split("=", 1)[0]
        if token == "-e":
            rest.append(token)
            if i + 1 < len(argv):
                i += 1
                rest.append(argv[i])
        elif token in _LONG_SWITCHES:
            long_tokens.append(token)
        elif token in _LONG_VALUED:
            if i + 1 < len(argv):
                i += 1
                long_tokens.append(f"{token}={argv[i]}")
            else:
                long_tokens.append(token)
        elif name in _LONG_VALUED and "=" in token:
            long_tokens.append(token)
        else:
            rest.append(token)
        i += 1
    return long_tokens, rest


def parse_args(argv: list[str]) -> argparse.Namespace:
    """
    CLI引数を解析して args を返す。

    先に split_tokens で短いフラグ・対象ディレクトリと長いオプションを分け、
    短いほうは interpret_tokens、長いほうは argparse で読む。
    -? / --help があれば長いオプションは読まない（--width abc でもヘルプを出す）。
    args.provided には CLI で明示されたオプション名（--xxx と -x の両方）が入る。
    """
    long_tokens, rest = split_tokens(argv)

    args = argparse.Namespace(
        show_help=False,
        show_dirs=False,
        show_files=False,
        recurse=False,
        show_readonly=False,
        ext=None,
        dirs=[],
    )
    provided = interpret_tokens(rest, args)

    parser = _build_parser()
    if args.show_help or "--help" in long_tokens:
        parser.parse_args([], namespace=args)
        args.show_help = True
    else:
        parser.parse_args(long_tokens, namespace=args)

    args.provided = provided | toolkit.parse_provided_options(long_tokens)
    return args


def _to_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise UsageError(f"{name} must be an integer: {value!r}") from exc


# -------------------------
# 設定ファイル / env（I/O境界：入力）
# -------------------------


def apply_config(args: argparse.Namespace, cfg: dict[str, Any], logger: logging.Logger) -> None:
    """
    config の値を、CLI で指定されていない項目にだけ反映する。

    期待する例：
      {"dirs": ["/tmp"], "ext": ".log", "recurse": true, "max_columns": 6, "color": false}
    """
    provided: set[str] = args.provided

    if not args.dirs and "dirs" in cfg:
        dirs = cfg["dirs"]
        args.dirs = [str(dirs)] if isinstance(dirs, str) else [str(d) for d in dirs]

    if "-e" not in provided and "ext" in cfg:
        args.ext = str(cfg["ext"]).strip('"')
    if "-r" not in provided and "recurse" in cfg:
        args.recurse = bool(cfg["recurse"])
    if "-R" not in provided and "readonly" in cfg:
        args.show_readonly = bool(cfg["readonly"])

    # -d / -f はどちらかが CLI にあれば、config 側の絞り込みは使わない
    if "-d" not in provided and "-f" not in provided:
        if "dirs_only" in cfg:
            args.show_dirs = bool(cfg["dirs_only"])
        if "files_only" in cfg:
            args.show_files = bool(cfg["files_only"])

    if "--width" not in provided and "width" in cfg:
        args.width = _to_int(cfg["width"], "width")
    if "--padding" not in provided and "padding" in cfg:
        args.padding = _to_int(cfg["padding"], "padding")
    if "--max-columns" not in provided and "max_columns" in cfg:
        args.max_columns = _to_int(cfg["max_columns"], "max_columns")
    if "--no-color" not in provided and "color" in cfg:
        args.color = bool(cfg["color"])
    if "--verbose" not in provided and "verbose" in cfg:
        args.verbose = bool(cfg["verbose"])
    if "--json" not in provided and "json" in cfg:
        args.json = bool(cfg["json"])
    if "--out" not in provided and "out" in cfg:
        args.out = Path(str(cfg["out"]))

    logger.info("config applied (CLI overrides config)")


def apply_env(args: argparse.Namespace, env_file: dict[str, str], dirs_from_cli: bool, logger: logging.Logger) -> None:
    """
    LCLS_* 環境変数を、CLI で指定されていない項目にだけ反映する（config より優先）。

    対応する環境変数：
      LCLS_DIRS (os.pathsep 区切り), LCLS_EXT, LCLS_RECURSE, LCLS_READONLY,
      LCLS_DIRS_ONLY, LCLS_FILES_ONLY, LCLS_WIDTH, LCLS_PADDING, LCLS_MAX_COLUMNS,
      LCLS_COLOR, LCLS_VERBOSE, LCLS_JSON, LCLS_OUT
    """
    provided: set[str] = args.provided

    def env(name: str) -> str | None:
        return toolkit.get_env("LCLS_" + name, env_file)

    if not dirs_from_cli:
        v = env("DIRS")
        if v:
            args.dirs = [d for d in v.split(os.pathsep) if d]

    if "-e" not in provided:
        v = env("EXT")
        if v is not None:
            args.ext = v.strip('"')
    if "-r" not in provided:
        v = env("RECURSE")
        if v is not None:
            args.recurse = toolkit.parse_bool(v)
    if "-R" not in provided:
        v = env("READONLY")
        if v is not None:
            args.show_readonly = toolkit.parse_bool(v)

    if "-d" not in provided and "-f" not in provided:
        v = env("DIRS_ONLY")
        if v is not None:
            args.show_dirs = toolkit.parse_bool(v)
        v = env("FILES_ONLY")
        if v is not None:
            args.show_files = toolkit.parse_bool(v)

    if "--width" not in provided:
        v = env("WIDTH")
        if v is not None:
            args.width = _to_int(v, "LCLS_WIDTH")
    if "--padding" not in provided:
        v = env("PADDING")
        if v is not None:
            args.padding = _to_int(v, "LCLS_PADDING")
    if "--max-columns" not in provided:
        v = env("MAX_COLUMNS")
        if v is not None:
            args.max_columns = _to_int(v, "LCLS_MAX_COLUMNS")
    if "--no-color" not in provided:
        v = env("COLOR")
        if v is not None:
            args.color = toolkit.parse_bool(v)
    if "--verbose" not in provided:
        v = env("VERBOSE")
        if v is not None:
            args.verbose = toolkit.parse_bool(v)
    if "--json" not in provided:
        v = env("JSON")
        if v is not None:
            args.json = toolkit.parse_bool(v)
    if "--out" not in provided:
        v = env("OUT")
        if v is not None:
            args.out = Path(v)

    logger.info("env applied (CLI overrides env)")


def resolve_effective_args(argv: list[str]) -> tuple[argparse.Namespace, logging.Logger]:
    """
    CLI / env / config を統合して、最終的に使う args を確定する。

    - 引数のミス（-e の値が無い、--width に数字以外など）は UsageError
    - env-file / config が読めないのはログを出すだけ（空として扱う）
    """
    args = parse_args(argv)
    dirs_from_cli = bool(args.dirs)

    logger = toolkit.setup_logger(LOGGER_NAME, args.verbose)

    # ヘルプは他の指定を全部無視するので、env/config も読まない
    if args.show_help:
        return args, logger

    env_file: dict[str, str] = {}
    if args.env_file is not None:
        env_file = toolkit.load_env_file(args.env_file, logger)

    if args.config is None:
        v = toolkit.get_env("LCLS_CONFIG", env_file)
        if v:
            args.config = Path(v)

    if args.config is not None:
        cfg = toolkit.load_json_object(args.config, logger)
        apply_config(args, cfg, logger)

    apply_env(args, env_file, dirs_from_cli, logger)

    # verbose が env/config で変わりうるので組み直す
    logger = toolkit.setup_logger(LOGGER_NAME, args.verbose)
    return args, logger


def build_request(args: argparse.Namespace) -> ScanRequest:
    """args を ScanRequest に固める。-d も -f も無ければ両方、対象が無ければカレント。"""
    show_dirs = args.show_dirs
    show_files = args.show_files
    if not show_dirs and not show_files:
        show_dirs = True
        show_files = True

    target_dirs = tuple(args.dirs) if args.dirs else (os.getcwd(),)

    return ScanRequest(
        show_help=args.show_help,
        show_dirs=show_dirs,
        show_files=show_files,
        recurse=args.recurse,
        show_readonly=args.show_readonly,
        extension_filter=args.ext,
        target_dirs=target_dirs,
    )


def build_render_options(args: argparse.Namespace) -> RenderOptions:
    return RenderOptions(
        width=args.width,
        column_padding=args.padding,
        max_columns=args.max_columns,
        color=args.color,
    )


def validate_args(args: argparse.Namespace) -> int:
    """入力検証。失敗したら終了コード 2 を返す。"""
    if args.width is not None and args.width < 0:
        print(f"Error: --width must be 0 or greater: {args.width}", file=sys.stderr)
        return 2
    if args.padding < 0:
        print(f"Error: --padding must be 0 or greater: {args.padding}", file=sys.stderr)
        return 2
    if args.max_columns < 1:
        print(f"Error: --max-columns must be 1 or greater: {args.max_columns}", file=sys.stderr)
        return 2
    return 0


# -------------------------
# 属性の判定（ホストのファイルシステム差を吸収する）
# -------------------------


def is_readonly(st: os.stat_result) -> bool:
    """
    読み取り専用か。

    Windows は FILE_ATTRIBUTE_READONLY、それ以外は「所有者の書き込みビットが無い」で判定する。
    """
    attrs = getattr(st, "st_file_attributes", None)
    if attrs is not None:
        return bool(attrs & stat.FILE_ATTRIBUTE_READONLY)
    return not st.st_mode & stat.S_IWUSR


def is_hidden(path: Path) -> bool:
    """
    隠しエントリか。

    Windows は FILE_ATTRIBUTE_HIDDEN、それ以外はドットで始まる名前。
    今そこに存在しないパスは隠し扱いにしない。
    """
    try:
        st = path.stat()
    except OSError:
        return False
    attrs = getattr(st, "st_file_attributes", None)
    if attrs is not None:
        return bool(attrs & stat.FILE_ATTRIBUTE_HIDDEN)
    return path.name.startswith(".")


def matches_filter(name: str, ext_filter: str | None) -> bool:
    """-e の判定。拡張子の比較ではなく、単純な後方一致（大文字小文字は無視）。"""
    if ext_filter is None:
        return True
    return name.lower().endswith(ext_filter.lower())


def name_key(name: str) -> tuple[str, str]:
    """大文字小文字を無視した並び順のキー（同じになる名前は元の文字列で順番を固定）。"""
    return name.upper(), name


# -------------------------
# 走査（コアロジック）
# -------------------------


def iter_entries(root: Path, recurse: bool) -> Iterator[Path]:
    """root 直下（recurse=True ならサブツリー全体）のエントリを順に返す。"""
    if recurse:
        yield from root.rglob("*")
    else:
        yield from root.iterdir()


def scan(
    root: str | Path,
    recurse: bool = False,
    ext_filter: str | None = None,
    logger: logging.Logger | None = None,
) -> ScanResult:
    """
    root を走査して ScanResult を返す。

    仕様として守りたいこと：
    - root が無ければ DirectoryNotFound（呼び出し側で報告して次へ進む）
    - ディレクトリは無条件に集める。ファイルは -e の後方一致を通ったものだけ
    - 読み取り専用ファイルは file_names に加えて readonly_file_names にも入れる
    - 1エントリの stat 失敗はそのエントリだけ飛ばす（ログは INFO）
    - 種別の判定は走査した時点のもの（その後の変化は追わない）
    """
    logger = logger or logging.getLogger(LOGGER_NAME)
    root_path = Path(root)
    if not root_path.is_dir():
        raise DirectoryNotFound(str(root))

    try:
        entries = list(iter_entries(root_path, recurse))
    except OSError as exc:
        raise DirectoryNotFound(str(root), reason=str(exc)) from exc

    result = ScanResult()
    for path in entries:
        name = path.name
        try:
            if path.is_dir():
                result.directory_names.append(name)
                continue
            if not path.is_file():
                logger.info("[skip] %s: not a regular file", path)
                continue
            if not matches_filter(name, ext_filter):
                continue
            st = path.stat()
        except OSError as exc:
            logger.info("[skip] %s: %s", path, exc)
            continue

        result.file_names.append(name)
        if is_readonly(st):
            result.readonly_file_names.append(name)

    result.directory_names.sort(key=name_key)
    result.file_names.sort(key=name_key)
    result.readonly_file_names.sort(key=name_key)
    return result


# -------------------------
# 段組み表示（I/O境界：stdout）
# -------------------------


def compute_layout(count: int, column_width: int, width: int, max_columns: int) -> tuple[int, int]:
    """
    (列数, 行数) を返す。

    列数 = 端末幅 // 列幅 を 1..max_columns に収めたもの。行数 = ceil(件数 / 列数)。
    """
    columns = min(max_columns, max(1, width // max(column_width, 1)))
    rows = math.ceil(count / columns)
    return columns, rows


def layout_rows(names: list[str], columns: int, rows: int) -> list[list[str]]:
    """
    列優先で並べた表を行ごとに返す。(r, c) には names[c * rows + r] が入る。

    最後のほうの列は短くなる（範囲外の位置は詰めずに飛ばす）。
    """
    grid: list[list[str]] = []
    for r in range(rows):
        row = []
        for c in range(columns):
            index = c * rows + r
            if index < len(names):
                row.append(names[index])
        grid.append(row)
    return grid


def entry_style(path: Path) -> str:
    """
    表示する時点のファイルシステムを見て色を決める（上から順に最初に当たったもの）。

    ディレクトリ -> 青、.exe/.bat/.cmd -> 緑、隠し -> 薄く、それ以外 -> リセット
    """
    if path.is_dir():
        return DIRECTORY_COLOR
    if path.name.lower().endswith(EXECUTABLE_SUFFIXES):
        return EXECUTABLE_COLOR
    if is_hidden(path):
        return HIDDEN_STYLE
    return RESET


def render(
    names: list[str],
    base_path: str | Path,
    column_padding: int = 4,
    max_columns: int = 4,
    *,
    width: int | None = None,
    color: bool = True,
    stream: TextIO | None = None,
) -> None:
    """
    names を端末幅に合わせて段組み表示する。空なら (none) だけ出す。

    - 列幅 = 一番長い名前 + column_padding
    - 端末幅は表示のたびに問い合わせる（width を渡せばそれを使う。0 なら1列）
    - 各セルは左寄せでパディングし、色の直後に必ずリセットを出す
    - 色はここで base_path / name を引き直して決める（走査時の判定は使い回さない）
    """
    out = stream if stream is not None else sys.stdout
    if not names:
        print(NONE_PLACEHOLDER, file=out)
        return

    column_width = max(len(name) for name in names) + column_padding
    if width is None:
        width = toolkit.terminal_width()
    columns, rows = compute_layout(len(names), column_width, width, max_columns)

    base = Path(base_path)
    for row in layout_rows(names, columns, rows):
        for name in row:
            cell = name.ljust(column_width)
            if color:
                out.write(f"{entry_style(base / name)}{cell}{RESET}")
            else:
                out.write(cell)
        out.write("\n")


def print_listing(directory: str, result: ScanResult, request: ScanRequest, options: RenderOptions) -> None:
    """1ディレクトリぶんの見出しと各セクションを出す。"""

    def show(names: list[str]) -> None:
        render(
            names,
            directory,
            options.column_padding,
            options.max_columns,
            width=options.width,
            color=options.color,
        )

    print(f"\nDirectory: {directory}")

    if request.show_dirs:
        print("Directories:")
        show(result.directory_names)

    if request.show_files:
        print("\nFiles:")
        show(result.file_names)

        if request.show_readonly:
            print("\nRead-Only Files:")
            show(result.readonly_file_names)


# -------------------------
# JSON 出力
# -------------------------


def build_json_payload(results: list[tuple[str, ScanResult]], missing: list[str], request: ScanRequest) -> dict[str, Any]:
    """
    JSON 用の辞書を組み立てる。含めるキーはテキスト表示と同じ条件で決める。
    """
    targets: list[dict[str, Any]] = []
    for directory, result in results:
        item: dict[str, Any] = {"directory": directory}
        if request.show_dirs:
            item["directories"] = result.directory_names
        if request.show_files:
            item["files"] = result.file_names
            if request.show_readonly:
                item["readonly_files"] = result.readonly_file_names
        targets.append(item)
    return {"targets": targets, "missing": missing}


# -------------------------
# 実行フロー組み立て（入口を薄くする）
# -------------------------


def main(argv: list[str] | None = None) -> int:
    """
    実行入口（テストからも呼べる形）。

    終了コード：
    - 0: 成功
    - 1: 存在しない対象ディレクトリがあった / --out の書き込みに失敗した
    - 2: 引数のミス（何も走査しない）
    """
    if argv is None:
        argv = sys.argv[1:]

    # UTF-8 として不正なファイル名（サロゲートを含む str）でも表示で落ちないように
    toolkit.relax_output_errors(sys.stdout)

    try:
        args, logger = resolve_effective_args(argv)
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    request = build_request(args)
    if request.show_help:
        print(USAGE)
        return 0

    rc = validate_args(args)
    if rc != 0:
        return rc

    options = build_render_options(args)
    as_json = args.json
    if options.color and not as_json:
        toolkit.enable_ansi()

    results: list[tuple[str, ScanResult]] = []
    missing: list[str] = []
    for directory in request.target_dirs:
        logger.info("scan start: root=%s recurse=%s ext=%s", directory, request.recurse, request.extension_filter)
        try:
            result = scan(directory, request.recurse, request.extension_filter, logger)
        except DirectoryNotFound as exc:
            print(f"Error: {exc}", file=sys.stderr)
            missing.append(directory)
            continue
        logger.info(
            "scan done: dirs=%d files=%d readonly=%d",
            len(result.directory_names),
            len(result.file_names),
            len(result.readonly_file_names),
        )

        if as_json:
            results.append((directory, result))
        else:
            print_listing(directory, result, request, options)
            if args.out is not None:
                results.append((directory, result))

    if as_json or args.out is not None:
        payload = build_json_payload(results, missing, request)
        if as_json:
            print(json.dumps(payload, ensure_ascii=False, indent=2))
        if args.out is not None and not toolkit.write_json_file(args.out, payload, logger):
            return 1

    return 1 if missing else 0
