from __future__ import annotations

import json
import sys
from typing import Optional

import typer

from qualifier.config import get_settings
from qualifier.domain.errors import QualifierError
from qualifier.orchestrator import run_flow
from qualifier.selector import choose_location, extract_digits, parity_number
from qualifier.utils.logging import configure_logging

app = typer.Typer(help="Qualifier flow runner CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"generate={settings.generate_url} | fallback={settings.submit_fallback_url} | "
        f"candidate={settings.candidate_name} <{settings.candidate_email}> "
        f"regNo={settings.candidate_reg_no} | q1={settings.sql_q1} q2={settings.sql_q2} | "
        f"output={settings.output_store_file} timeout={settings.request_timeout_seconds}s"
    )


@app.command()
def select(
    reg_no: str = typer.Argument(..., help="Registration number to classify."),
) -> None:
    """
    Show which artifact a registration number selects, without any network call.
    """
    settings = get_settings()
    try:
        number = parity_number(reg_no)
        name, location = choose_location(reg_no, settings.sql_q1, settings.sql_q2)
    except QualifierError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(
        json.dumps(
            {
                "reg_no": reg_no,
                "digits": extract_digits(reg_no),
                "parity_number": number,
                "odd": number % 2 == 1,
                "artifact": name,
                "location": location,
            },
            indent=2,
        )
    )


@app.command()
def run(
    reg_no: Optional[str] = typer.Option(
        None,
        "--reg-no",
        "-r",
        help="Override the configured registration number.",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Override the output file for the selected query.",
    ),
) -> None:
    """
    Register, select and store the query, then submit it.

    Exits 0 even if the final submission failed; exits 1 if registration,
    selection or storing failed.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    if reg_no:
        settings = settings.model_copy(update={"candidate_reg_no": reg_no})

    try:
        result = run_flow(settings=settings, output_path=output)
    except QualifierError as exc:
        typer.echo(f"Flow failed: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(result, indent=2))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
