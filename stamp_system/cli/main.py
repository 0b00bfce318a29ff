"""Command-line interface for stamp verification using Typer and Rich."""

import asyncio
import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from stamp_system.config.logging import get_logger
from stamp_system.config.platforms import PLATFORMS
from stamp_system.config.settings import settings
from stamp_system.data_management.schemas import (
    CheckResponse,
    Passport,
    RequestPayload,
    Stamp,
    VerifiedPayload,
)
from stamp_system.pipeline import fetch_possible_evm_stamps
from stamp_system.providers import ProviderExternalVerificationError, ProviderRegistry

app = typer.Typer(
    help="Stamp verification CLI - run identity stamp providers against an address",
    add_completion=False,
)

console = Console()

logger = get_logger("cli")


async def _verify_one(provider: str, payload: RequestPayload) -> VerifiedPayload:
    async with ProviderRegistry() as registry:
        return await registry.verify(provider, payload)


async def _verify_all(registry: ProviderRegistry, payload: RequestPayload) -> List[CheckResponse]:
    async with registry:
        return await registry.verify_bulk(payload)



@app.command()
def status() -> None:
    """
    Display configured endpoints and logging settings.
    """
    logger.info("Displaying system status")

    table = Table(title="Stamp System Status", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="cyan", width=20)
    table.add_column("Details", style="yellow")

    python_version = f"Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
    table.add_row("Environment", python_version)
    table.add_row("RPC", settings.rpc_url)
    table.add_row("Staking subgraph", f"{settings.staking_subgraph_url} (round {settings.staking_round})")
    table.add_row("IAM", f"{settings.iam_url} (v{settings.iam_version})")
    table.add_row("Logging", f"Level: {settings.log_level}, Format: {settings.log_format}")
    table.add_row("Platforms", ", ".join(platform.name for platform in PLATFORMS.values()))

    console.print(table)


@app.command()
def verify(
    provider: str = typer.Option(..., help="Provider type, e.g. SelfStakingBronze"),
    address: str = typer.Option(..., help="Address to verify"),
    rpc_url: Optional[str] = typer.Option(None, help="RPC endpoint override"),
) -> None:
    """
    Run a single provider against an address.
    """
    logger.info(f"Verify command invoked: {provider} for {address}")
    payload = RequestPayload(address=address, type=provider, rpc_url=rpc_url)

    try:
        verdict = asyncio.run(_verify_one(provider, payload))
    except ProviderExternalVerificationError as e:
        console.print(f"\n[red]✗[/red] Error: {e}")
        raise typer.Exit(1)

    if verdict.valid:
        console.print(Panel(
            "\n".join(f"{key}: {value}" for key, value in (verdict.record or {}).items()),
            title=f"{provider}: valid",
            border_style="green",
        ))
    else:
        console.print(Panel(
            "\n".join(verdict.errors),
            title=f"{provider}: invalid",
            border_style="red",
        ))


@app.command()
def check(
    address: str = typer.Option(..., help="Address to verify"),
    provider: Optional[List[str]] = typer.Option(
        None, help="Provider type to check (repeatable, default: all)"
    ),
) -> None:
    """
    Run several providers concurrently against an address.
    """
    registry = ProviderRegistry()
    types = provider or registry.provider_types
    payload = RequestPayload(address=address, type="bulk", types=types)

    results = asyncio.run(_verify_all(registry, payload))

    table = Table(title=f"Checks for {address}", show_header=True, header_style="bold magenta")
    table.add_column("Provider", style="cyan")
    table.add_column("Valid")
    table.add_column("Error", style="yellow")
    for result in results:
        table.add_row(
            result.type,
            "[green]✓[/green]" if result.valid else "[red]✗[/red]",
            result.error or "",
        )
    console.print(table)


@app.command()
def stamps(
    address: str = typer.Option(..., help="Address to look up"),
    held: Optional[List[str]] = typer.Option(
        None, help="Provider type already held (repeatable)"
    ),
) -> None:
    """
    List EVM platforms with stamps currently available to an address.
    """
    passport = Passport(stamps=[Stamp(provider=p) for p in held]) if held else None
    platforms = asyncio.run(fetch_possible_evm_stamps(address, PLATFORMS, passport))

    if not platforms:
        console.print("[dim]No EVM stamps available.[/dim]")
        return

    table = Table(title=f"Available stamps for {address}", show_header=True, header_style="bold magenta")
    table.add_column("Platform", style="cyan")
    table.add_column("Group", style="green")
    table.add_column("Providers", style="yellow")
    for validated in platforms:
        for group in validated.groups:
            table.add_row(
                validated.platform.name,
                group.name,
                ", ".join(p.title for p in group.providers),
            )
    console.print(table)


@app.command()
def version() -> None:
    """Display version information."""
    console.print("[bold]Stamp System[/bold]")
    console.print("Version: 0.1.0")


if __name__ == "__main__":
    app()
