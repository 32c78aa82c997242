"""CLI principal (Typer).

Comandos:
- `check NUMBER...`: consulta la paridad de uno o más números.
- `doctor ...`: diagnóstico y configuración.

Código de salida 1 si algún número terminó en error clasificado.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from iseven_api.adapters.iseven_client import ApiResponse, BlockingIsEvenClient, IsEvenClient
from iseven_api.adapters.json_exporter import export_report_json
from iseven_api.cli import doctor
from iseven_api.cli.ui_components import build_results_table, print_banner, render_entry
from iseven_api.core.config import AppSettings
from iseven_api.core.domain.errors import IsEvenError, NetworkError
from iseven_api.core.domain.language import Language
from iseven_api.core.domain.models import LookupEntry, LookupReport
from iseven_api.core.logging_setup import configure_logging
from iseven_api.core.services.lookup_pipeline import (
    PipelineHooks,
    entry_from_error,
    entry_from_result,
    lookup,
    lookup_blocking,
)

app = typer.Typer(
    no_args_is_help=True,
    help="Client for the isEven API: is your number even? (ads included)",
    pretty_exceptions_show_locals=False,
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _raw_entry(number: str, response: ApiResponse) -> LookupEntry:
    _console.print(response.text, markup=False, highlight=False, emoji=False, soft_wrap=True)
    outcome = response.interpret()
    if isinstance(outcome, IsEvenError):
        return entry_from_error(number, outcome)
    return entry_from_result(number, outcome)


def _network_entry(number: str, exc: NetworkError) -> LookupEntry:
    entry = entry_from_error(number, exc)
    render_entry(entry, console=_console, err_console=_err_console, language=Language.default())
    return entry


async def _collect_raw(numbers: list[str], settings: AppSettings) -> LookupReport:
    report = LookupReport()
    async with IsEvenClient(settings) as client:
        for number in numbers:
            try:
                entry = _raw_entry(number, await client.fetch(number))
            except NetworkError as exc:
                entry = _network_entry(number, exc)
            report.entries.append(entry)
    return report


def _collect_raw_blocking(numbers: list[str], settings: AppSettings) -> LookupReport:
    report = LookupReport()
    with BlockingIsEvenClient(settings) as client:
        for number in numbers:
            try:
                entry = _raw_entry(number, client.fetch(number))
            except NetworkError as exc:
                entry = _network_entry(number, exc)
            report.entries.append(entry)
    return report


async def _collect(numbers: list[str], settings: AppSettings, hooks: PipelineHooks) -> LookupReport:
    async with IsEvenClient(settings) as client:
        return await lookup(client, numbers, hooks=hooks)


def _collect_blocking(numbers: list[str], settings: AppSettings, hooks: PipelineHooks) -> LookupReport:
    with BlockingIsEvenClient(settings) as client:
        return lookup_blocking(client, numbers, hooks=hooks)


# Los negativos (`-1`) llegan como argumentos gracias a ignore_unknown_options.
@app.command(context_settings={"ignore_unknown_options": True})
def check(
    numbers: List[str] = typer.Argument(..., help="Numbers to check (integers, floats or any text)."),
    json_output: bool = typer.Option(False, "--json", help="Print the raw JSON response instead of a sentence."),
    table: bool = typer.Option(False, "--table", help="Print a summary table instead of one sentence per number."),
    blocking: bool = typer.Option(False, "--blocking", help="Use the blocking HTTP client."),
    spanish: bool = typer.Option(False, "--spanish", help="Print sentences in Spanish."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also export the results as JSON."),
    banner: bool = typer.Option(False, "--banner", help="Show the banner before the results."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Check whether each NUMBER is even or odd."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level, console=_err_console)
    language = Language.SPANISH if spanish else settings.default_language

    if banner and not json_output:
        print_banner(_console)

    if json_output:
        if blocking:
            report = _collect_raw_blocking(numbers, settings)
        else:
            report = asyncio.run(_collect_raw(numbers, settings))
    else:
        hooks = PipelineHooks()
        if not table:
            hooks.entry_done = lambda entry: render_entry(
                entry,
                console=_console,
                err_console=_err_console,
                language=language,
            )
        if blocking:
            report = _collect_blocking(numbers, settings, hooks)
        else:
            report = asyncio.run(_collect(numbers, settings, hooks))
        if table:
            _console.print(build_results_table(report))

    if output is not None:
        path = export_report_json(report=report, output_path=output)
        _err_console.print(f"[green]Saved report to:[/green] {path}")

    if report.failed:
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
