"""Exportación JSON del reporte de consultas.

Por qué JSON:
- Interoperabilidad con scripts y pipelines que consumen la salida de la CLI.
- Los resultados usan los nombres del cable (`ad`, `iseven`).
"""

from __future__ import annotations

import json
from pathlib import Path

from iseven_api.core.domain.models import LookupReport


def export_report_json(*, report: LookupReport, output_path: Path) -> Path:
    """Exporta `LookupReport` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json", by_alias=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
