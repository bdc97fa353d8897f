"""Minimal repo-local smoke test.

Safe by design:
- No subprocesses (nothing is opened)
- No filesystem writes (beyond normal Python __pycache__ behavior)
- No network calls

Run:
  python scripts/smoke_test.py
"""

from __future__ import annotations

import importlib
import sys


def main() -> int:
    print("[smoke_test.py] python:", sys.version)

    if sys.version_info < (3, 12):
        raise SystemExit("Python >= 3.12 is required")

    pkg = importlib.import_module("file_opener")
    version = getattr(pkg, "__version__", "<missing>")
    print("[smoke_test.py] file_opener.__version__ =", version)

    # Ensure key modules import without side effects.
    importlib.import_module("file_opener.cli.main")
    catalog = importlib.import_module("file_opener.lib.tools.catalog")
    print("[smoke_test.py] tools:", ", ".join(catalog.tool_names()))
    importlib.import_module("file_opener.server.mcp_server")

    print("[smoke_test.py] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
