"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from iseven_api.adapters.iseven_client import BlockingIsEvenClient
from iseven_api.core.config import AppSettings, get_user_env_file, write_user_env_vars
from iseven_api.core.domain.errors import IsEvenError
from iseven_api.core.domain.language import Language

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """Consulta el número 2 y verifica que la API responda `even`."""

    with BlockingIsEvenClient(settings) as client:
        outcome = client.check_outcome(2)
    if isinstance(outcome, IsEvenError):
        return False, str(outcome)
    if not outcome.is_even:
        return False, "API answered that 2 is odd"
    return True, outcome.advertisement


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="isEven API Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base URL", "OK", settings.api_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Language", "OK", settings.default_language.label())
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    # Connectivity (best-effort)
    ok_api, detail_api = _check_api(settings)
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print(
            "\n[yellow]Note:[/yellow] Check your network or override the endpoint with "
            "`ISEVEN_API_API_BASE_URL`."
        )
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()

    base_url = typer.prompt("API base URL", default=settings.api_base_url, show_default=True).strip()
    timeout = typer.prompt(
        "HTTP timeout (seconds)",
        default=settings.http_timeout_seconds,
        type=float,
        show_default=True,
    )
    language = typer.prompt(
        "Output language (en/es)",
        default=settings.default_language.value,
        show_default=True,
    ).strip().lower()

    if not base_url:
        raise typer.BadParameter("base URL is required")
    if timeout <= 0:
        raise typer.BadParameter("timeout must be positive")
    try:
        Language(language)
    except ValueError:
        raise typer.BadParameter(f"unsupported language: {language}") from None

    env_path = write_user_env_vars(
        {
            "ISEVEN_API_API_BASE_URL": base_url,
            "ISEVEN_API_HTTP_TIMEOUT_SECONDS": f"{timeout:g}",
            "ISEVEN_API_DEFAULT_LANGUAGE": language,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
