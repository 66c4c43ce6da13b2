"""Same CLI as the `world-countries` script, runnable from inside `src/`."""

from __future__ import annotations

import sys

# Panels and chart bars use non-cp1252 glyphs on Windows terminals.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
