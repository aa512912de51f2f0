"""
CLI tool for the Cash App receipt verifier

Verifies a web receipt link from the command line and prints the result.
"""

import json
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from . import __version__
from .errors import ConfigurationError
from .logging_config import configure_logging
from .settings import get_settings
from .verifier import verify_web_receipt


app = typer.Typer(help="Cash App web receipt verifier")
console = Console()


@app.command()
def verify(
    receipt_url: str = typer.Argument(..., help="Cash App web receipt URL"),
    username: str = typer.Option(..., "--username", "-u", help="Cash App username expected as payer"),
    reference: str = typer.Option(..., "--reference", "-r", help="Payment reference expected in the note"),
    json_output: bool = typer.Option(False, "--json", "-j", help="JSON output"),
    timeout: Optional[float] = typer.Option(None, "--timeout", "-t", help="HTTP timeout in seconds"),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Log level"),
):
    """Verify a Cash App web receipt"""
    overrides = {}
    if timeout is not None:
        overrides["http_timeout"] = timeout
    if log_level is not None:
        overrides["log_level"] = log_level

    try:
        settings = get_settings(**overrides)
    except ConfigurationError as e:
        console.print(f"❌ {e.message}", style="red")
        for err in e.details.get("errors", []):
            console.print(f"   {err['field']}: {err['error']}", style="red")
        raise typer.Exit(code=2)

    configure_logging(settings.log_level, settings.log_json)

    result = verify_web_receipt(username, reference, receipt_url, settings=settings)

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    elif result.ok:
        data = result.data or {}
        console.print(Panel(
            f"[green]{result.message}[/green]\n"
            f"Payer: {username}\n"
            f"Note: {data.get('notes', '')}",
            title="Receipt Verified",
            border_style="green"
        ))
    else:
        console.print(Panel(
            f"[red]{result.message}[/red]",
            title="Receipt Rejected",
            border_style="red"
        ))

    if not result.ok:
        raise typer.Exit(code=1)


@app.command()
def version():
    """Show version"""
    console.print(f"cashapp-receipt-verifier v{__version__}")


def main():
    """CLI entry point."""
    app()


if __name__ == "__main__":
    sys.exit(main())
