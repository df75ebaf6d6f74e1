"""Zervos CLI - serve the API, manage the database and run sync batches."""

from __future__ import annotations

import asyncio
import json
import uuid
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .config import configure_logging, settings
from .database import build_engine
from .models import (
    Appointment,
    Base,
    CustomLabel,
    Customer,
    Service,
    TeamMember,
)
from .schemas.sync import SyncPayload
from .services.appointment_svc import refresh_customer_bookings
from .services.organization_svc import ensure_organization
from .sync.engine import run_sync
from .sync.outcomes import SyncSummary

app = typer.Typer(
    name="zervos",
    help="Zervos admin API and sync tooling",
    no_args_is_help=True,
)
console = Console()

DATABASE_URL_OPTION = typer.Option(None, "--database-url", help="Override ZERVOS_DATABASE_URL")
ORGANIZATION_OPTION = typer.Option(None, "--organization-id", help="Tenant UUID (default organization if omitted)")


def _print_summary(summary: SyncSummary, title: str = "Sync Summary") -> None:
    table = Table(title=title)
    table.add_column("Entity", style="cyan")
    table.add_column("Inserted", style="green", justify="right")
    table.add_column("Updated", style="yellow", justify="right")
    table.add_column("Skipped", style="red", justify="right")

    for kind, tally in summary.kinds.items():
        table.add_row(kind, str(tally.inserted), str(tally.updated), str(sum(tally.skipped.values())))

    console.print(table)
    if summary.customers_created_by_appointments:
        console.print(
            f"[dim]{summary.customers_created_by_appointments} customer(s) created from appointments[/dim]"
        )


def _organization_uuid(raw: str | None) -> uuid.UUID:
    try:
        return uuid.UUID(raw) if raw else settings.default_org_uuid
    except ValueError:
        console.print(f"[red]Invalid organization id: {raw}[/red]")
        raise typer.Exit(1)


async def _with_session(database_url: str | None, fn):
    """Create tables, ensure the default organization, and run ``fn(db)``."""
    engine = build_engine(database_url or settings.database_url, echo=settings.echo_sql)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        async with factory() as db:
            await ensure_organization(db, settings.default_org_uuid, settings.default_org_name)
            return await fn(db)
    finally:
        await engine.dispose()


@app.command("serve")
def serve(
    port: int = typer.Option(8000, "--port", "-p", help="Port to run on"),
    host: str = typer.Option("127.0.0.1", "--host", help="Host to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Launch the Zervos admin API."""
    import uvicorn

    console.print(f"[bold cyan]Starting Zervos API at http://{host}:{port}[/bold cyan]")
    uvicorn.run("zervos.app:app", host=host, port=port, reload=reload)


@app.command("init-db")
def init_db(database_url: str = DATABASE_URL_OPTION):
    """Create tables and the default organization."""
    configure_logging()

    async def _noop(db):
        return None

    asyncio.run(_with_session(database_url, _noop))
    console.print("[green]Database initialized.[/green]")


async def _reset_tenant(db: AsyncSession, organization_id: uuid.UUID) -> None:
    for model in (Appointment, Customer, Service, TeamMember, CustomLabel):
        await db.execute(delete(model).where(model.organization_id == organization_id))
    await db.commit()


async def _seed(db: AsyncSession, organization_id: uuid.UUID, reset: bool) -> SyncSummary:
    from . import seed_data

    await ensure_organization(db, organization_id, settings.default_org_name)
    if reset:
        await _reset_tenant(db, organization_id)

    summary = await run_sync(
        db,
        organization_id,
        SyncPayload.model_validate(seed_data.catalog_payload()),
        merge_mode=settings.sync_merge_mode,
    )

    rows = await db.execute(
        select(Service.name, Service.id).where(Service.organization_id == organization_id)
    )
    service_ids = {name: service_id for name, service_id in rows.all()}
    appointments = await run_sync(
        db,
        organization_id,
        SyncPayload.model_validate(seed_data.appointments_payload(service_ids)),
        merge_mode=settings.sync_merge_mode,
    )
    summary.kinds["appointments"] = appointments.kinds["appointments"]
    summary.customers_created_by_appointments = appointments.customers_created_by_appointments

    customer_ids = await db.execute(
        select(Customer.id).where(Customer.organization_id == organization_id)
    )
    for customer_id in customer_ids.scalars().all():
        await refresh_customer_bookings(db, organization_id, customer_id)
    await db.commit()
    return summary


@app.command("seed")
def seed(
    database_url: str = DATABASE_URL_OPTION,
    organization_id: str = ORGANIZATION_OPTION,
    reset: bool = typer.Option(False, "--reset", help="Delete the tenant's existing data first"),
):
    """Load the demo dataset through the sync engine."""
    configure_logging()
    org_uuid = _organization_uuid(organization_id)
    summary = asyncio.run(_with_session(database_url, lambda db: _seed(db, org_uuid, reset)))
    _print_summary(summary, title="Seed Summary")


@app.command("sync")
def sync_file(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON batch file"),
    database_url: str = DATABASE_URL_OPTION,
    organization_id: str = ORGANIZATION_OPTION,
):
    """Reconcile a JSON batch file into the database."""
    configure_logging()
    try:
        raw = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON in {path}: {e}[/red]")
        raise typer.Exit(1)
    if not isinstance(raw, dict):
        console.print("[red]Batch file must contain a JSON object[/red]")
        raise typer.Exit(1)

    org_uuid = _organization_uuid(organization_id)

    async def _run(db: AsyncSession):
        return await run_sync(
            db,
            org_uuid,
            SyncPayload.model_validate(raw),
            atomic=settings.sync_atomic_batches,
            merge_mode=settings.sync_merge_mode,
        )

    try:
        summary = asyncio.run(_with_session(database_url, _run))
    except Exception as e:
        console.print(f"[red]Sync failed: {e}[/red]")
        raise typer.Exit(1)
    _print_summary(summary)


if __name__ == "__main__":
    app()
