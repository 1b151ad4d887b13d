# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Decision Node CLI Commands.

Inspect node configurations and run a one-off decision against a live
PingAuthorize endpoint.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pingauthz.enums import EnumCredentialSource
from pingauthz.errors import AuthorizeNodeError
from pingauthz.handlers import HandlerDecisionHttp
from pingauthz.models import (
    DECISION_KEY,
    EXCEPTION_KEY,
    ModelNodeConfig,
    ModelNodeResult,
    NodeState,
)
from pingauthz.nodes import NodeAuthorizeDecision, declare_inputs
from pingauthz.runtime import load_node_config

console = Console()


def _load_or_exit(config_path: str) -> ModelNodeConfig:
    try:
        return load_node_config(config_path)
    except AuthorizeNodeError as e:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(e))}")
        raise SystemExit(2) from e


@click.group()
def cli() -> None:
    """PingAuthorize decision node CLI."""


@cli.command("outcomes")
@click.argument("config_path", type=click.Path(dir_okay=False))
def outcomes_cmd(config_path: str) -> None:
    """Show the outcomes a node declares."""
    from pingauthz.services import declare_outcomes

    config = _load_or_exit(config_path)
    declarations = declare_outcomes(config.use_continue, config.statement_codes)

    table = Table(title="Declared Outcomes")
    table.add_column("Outcome ID", style="cyan")
    table.add_column("Label", style="bold")
    for declaration in declarations:
        table.add_row(
            escape(declaration.outcome_id), escape(declaration.display_label)
        )
    console.print(table)


@cli.command("inputs")
@click.argument("config_path", type=click.Path(dir_okay=False))
def inputs_cmd(config_path: str) -> None:
    """Show the session attributes a node reads and the keys it writes."""
    config = _load_or_exit(config_path)

    table = Table(title="Declared Inputs")
    table.add_column("Attribute", style="cyan")
    table.add_column("Required", style="bold")
    for declaration in declare_inputs(config):
        required = "[green]yes[/green]" if declaration.required else "[dim]no[/dim]"
        table.add_row(escape(declaration.name), required)
    console.print(table)
    console.print(f"[bold]Outputs:[/bold] {DECISION_KEY}")


@cli.command("evaluate")
@click.argument("config_path", type=click.Path(dir_okay=False))
@click.option(
    "--state",
    "state_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file with the shared session state",
)
@click.option("--timeout", default=30.0, show_default=True, help="Request timeout (s)")
def evaluate_cmd(config_path: str, state_path: str, timeout: float) -> None:
    """Run one decision with a static-credential node configuration."""
    config = _load_or_exit(config_path)
    if config.credential_source is not EnumCredentialSource.STATIC:
        console.print(
            "[bold red]Only the static credential source can be evaluated from the CLI[/bold red]"
        )
        raise SystemExit(2)

    try:
        shared = json.loads(Path(state_path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[bold red]Invalid JSON in state file:[/bold red] {escape(str(e))}")
        raise SystemExit(2) from e
    if not isinstance(shared, dict):
        console.print("[bold red]State file must contain a JSON object[/bold red]")
        raise SystemExit(2)

    state = NodeState(shared=shared)
    result = asyncio.run(_evaluate(config, state, timeout))

    colour = "red" if result.outcome.is_client_error else "green"
    outcome_id = escape(result.outcome.outcome_id)
    console.print(f"[bold {colour}]Outcome: {outcome_id}[/bold {colour}]")
    console.print(f"[bold]Edge:[/bold] {escape(result.edge)}")
    if EXCEPTION_KEY in state.transient:
        console.print(f"  [red]{escape(str(state.transient[EXCEPTION_KEY]))}[/red]")
    raise SystemExit(1 if result.outcome.is_client_error else 0)


async def _evaluate(
    config: ModelNodeConfig, state: NodeState, timeout: float
) -> ModelNodeResult:
    handler = HandlerDecisionHttp()
    await handler.initialize({"timeout_seconds": timeout})
    try:
        node = NodeAuthorizeDecision(config, handler)
        return await node.process(state)
    finally:
        await handler.shutdown()


if __name__ == "__main__":
    cli()
