"""Main CLI entry point for app-role-mapper.

This module provides a command-line interface using Typer around the
reconciler:
1.  Loading configuration (environment / `.env`).
2.  Reading the service-provider and role-configuration JSON documents
    (app_role_mapper.loader).
3.  Applying the role configurations (app_role_mapper.reconciler).
4.  Writing the updated service provider to stdout or a file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import find_dotenv, load_dotenv

from .config import Settings, get_settings
from .loader import (
    DocumentLoadError,
    dump_service_provider,
    load_app_role_configs,
    load_service_provider,
)
from .reconciler import resolve_attribute_step, update_app_role_configurations

app = typer.Typer(help="Application role-mapping reconciliation CLI")

logger = logging.getLogger(__name__)


def _load_env() -> None:
    # Must run before the first get_settings() call.
    env_file = find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file)
        logger.debug("Loaded environment from %s", env_file)


def _configure_logging(settings: Settings, debug: Optional[bool]) -> None:
    if debug is None:
        level = settings.effective_log_level()
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.LOG_LEVEL)
    logging.basicConfig(level=level)


@app.callback()
def main() -> None:  # pragma: no cover - simple callback
    """app-role-mapper CLI.

    Use a subcommand like 'reconcile' to update a service provider.
    """
    pass


@app.command(help="Apply role configurations to a service-provider JSON document.")
def reconcile(
    service_provider: Path = typer.Argument(..., help="Path to the service-provider JSON document"),
    app_roles: Optional[Path] = typer.Option(
        None,
        "--app-roles",
        help=(
            "Path to a JSON array of {idp, useAppRoleMappings} objects. When omitted (or the "
            "file holds null) the service provider is written back unchanged."
        ),
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the updated document here instead of stdout"
    ),
    indent: Optional[int] = typer.Option(
        None, min=0, help="JSON indent (0 = compact). Overrides OUTPUT_INDENT env setting."
    ),
    debug: Optional[bool] = typer.Option(
        None,
        "--debug/--no-debug",
        help="Enable verbose debug logging. If not specified, uses DEBUG from config/env.",
    ),
) -> None:
    """Reconcile role configurations against the attribute step's providers."""
    _load_env()
    settings = get_settings()
    _configure_logging(settings, debug)

    try:
        sp = load_service_provider(service_provider)
        configs = load_app_role_configs(app_roles) if app_roles is not None else None
    except DocumentLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    updated = update_app_role_configurations(
        sp, configs, warn_unmatched=settings.WARN_UNMATCHED_ROLE_CONFIGS
    )
    effective_indent = settings.OUTPUT_INDENT if indent is None else indent
    rendered = dump_service_provider(updated, indent=effective_indent)

    if output is None:
        typer.echo(rendered)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered + "\n", encoding="utf-8")
        logger.info(
            "Wrote %s with %d role mapping record(s) to %s",
            updated.applicationName,
            len(updated.applicationRoleMappingConfig),
            output,
        )


@app.command("attribute-idps", help="List federated identity providers of the attribute step.")
def attribute_idps(
    service_provider: Path = typer.Argument(..., help="Path to the service-provider JSON document"),
) -> None:
    _load_env()
    settings = get_settings()
    _configure_logging(settings, None)

    try:
        sp = load_service_provider(service_provider)
    except DocumentLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    step, source = resolve_attribute_step(sp.localAndOutBoundAuthenticationConfig)
    if step is None:
        typer.echo("No attribute step.")
        return
    typer.echo(f"Attribute step {step.stepOrder} ({source}):")
    for idp in step.federatedIdentityProviders or []:
        typer.echo(idp.identityProviderName)


if __name__ == "__main__":  # pragma: no cover
    app()
