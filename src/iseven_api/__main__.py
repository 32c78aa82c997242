"""Script de ejecución.

Permite ejecutar la CLI con `python -m iseven_api` además del script
`iseven-api` instalado.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals/CI (cp1252 vs utf-8).
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from iseven_api.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
