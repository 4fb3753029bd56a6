"""
lc のエントリーポイント（薄いラッパー）

`python lc_main.py [-?defrR] [dirs...]` で実行する。テストは lc.py を直接 import する。
"""

from __future__ import annotations

import sys

if __name__ == "__main__":
    from lc import main

    raise SystemExit(main(sys.argv[1:]))
