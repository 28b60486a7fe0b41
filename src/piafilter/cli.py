"\"\"\"Typer CLI entrypoint for record filtering.\"\"\""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigManager
from .container import create_container
from .core import FilterConfigurationError
from .logging import configure_logging
from .schemas.config import AppConfig

app = typer.Typer(help="Filter PSM, peptide and protein report records.")


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


@app.command()
def run(
    records: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Records JSONL path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    filter_specs: Optional[List[str]] = typer.Option(
        None,
        "--filter",
        "-f",
        help="Filter as '<name> [not] <comparator> <value>'. Repeat to combine with AND.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    scope: Optional[int] = typer.Option(None, help="Input file id for per-file values (0 = all files)."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
    log_format: LogFormat = typer.Option(LogFormat.JSON, help="Log output format."),
) -> None:
    """Filter records and write the accepted ones."""
    app_config = AppConfig()
    if config:
        try:
            app_config = ConfigManager.for_file(config).load_app_config(config.name)
        except (ValidationError, yaml.YAMLError) as exc:
            raise typer.BadParameter(str(exc), param_name="config") from exc

    configure_logging(log_level or app_config.log_level, log_format.value)

    container = create_container(settings=app_config.to_settings())
    builder = container.builder()
    specs = [*app_config.filter_specs(), *(filter_specs or [])]
    try:
        filters = builder.build_all(specs)
    except FilterConfigurationError as exc:
        typer.echo(f"Invalid filter: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    pipeline = container.pipeline()
    report = pipeline.run(
        records_path=records,
        output_path=output,
        filters=filters,
        scope_id=scope if scope is not None else app_config.scope_id,
    )
    typer.echo(
        f"Accepted {report.accepted_count} records "
        f"({report.rejected_count} rejected, {report.error_count} errors). Results saved to {output}."
    )


@app.command("filters")
def list_filters(
    kind: Optional[str] = typer.Option(None, help="Only list filters for psm, peptide or protein records."),
) -> None:
    """List the available filters."""
    registry = create_container().registry()
    descriptors = registry.for_kind(kind) if kind else list(registry)
    for descriptor in descriptors:
        line = f"{descriptor.short_name}\t{descriptor.filter_type}\t{descriptor.display_name}"
        hint = getattr(descriptor, "help_text", "")
        typer.echo(f"{line}\t{hint}" if hint else line)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
