"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `check` y `doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from iseven_api.core.domain.language import Language
from iseven_api.core.domain.models import LookupEntry, LookupReport


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Solo se imprime con `--banner`; nunca en modo `--json`.
    """

    title = Text("isEven API", style="bold cyan")
    subtitle = Text("Parity as a Service • ads included", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def render_entry(entry: LookupEntry, *, console: Console, err_console: Console, language: Language) -> None:
    """Salida clásica por número: anuncio + frase, o `error:` en stderr."""

    if entry.result is None:
        err_console.print(
            Text.assemble(("error:", "bold red"), " ", entry.error_message or ""),
            soft_wrap=True,
        )
        return

    console.print(
        f"{language.advertisement_label()}: {entry.result.advertisement}",
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )
    console.print(
        language.parity_sentence(entry.subject, is_even=entry.result.is_even),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def build_results_table(report: LookupReport) -> Table:
    """Tabla resumen cuando se consultan varios números."""

    table = Table(title="Results")
    table.add_column("Number", style="cyan", no_wrap=True)
    table.add_column("Parity", style="green")
    table.add_column("HTTP", style="dim")
    table.add_column("Error", style="red")
    for entry in report.entries:
        parity = str(entry.result) if entry.result is not None else "-"
        status = str(entry.status_code) if entry.status_code is not None else ""
        table.add_row(entry.subject, parity, status, entry.error_message or "")
    return table
