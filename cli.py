"""CLI commands for wedding party management."""

import asyncio
from datetime import date
from uuid import UUID

import typer

from src.auth.identity import Identity
from src.auth.security import create_access_token
from src.config.settings import settings
from src.email_service import get_email_service
from src.events.dtos import EventCreateDTO
from src.events.features.manage_events.write_model import SqlEventWriteModel
from src.guests.dtos import (
    GuestCreateDTO,
    GuestNotFoundError,
    GuestUpdateDTO,
    InvalidGuestDataError,
    InvalidInviteCodeError,
    PlusOneReconciliationError,
)
from src.guests.features.create_guest.write_model import SqlGuestCreateWriteModel
from src.guests.features.update_guest.write_model import SqlGuestUpdateWriteModel
from src.guests.invite_code import parse_invite_code
from src.guests.repository.read_models import SqlGuestReadModel

app = typer.Typer(help="CLI commands for wedding party management")


def _print_party(party) -> None:
    guest = party.guest
    typer.secho(f"  Name: {guest.full_name}", fg=typer.colors.BLUE)
    typer.secho(f"  Guest ID: {guest.id}", fg=typer.colors.CYAN)
    typer.secho(f"  Invite code: {guest.invite_code}", fg=typer.colors.CYAN)
    typer.secho(f"  RSVP: {guest.rsvp_status.value}", fg=typer.colors.MAGENTA)
    if party.plus_one:
        typer.secho(
            f"  Plus-one: {party.plus_one.full_name} ({party.plus_one.rsvp_status.value})",
            fg=typer.colors.BLUE,
        )
    elif guest.plus_one_allowed:
        typer.secho("  Plus-one allowed but not created", fg=typer.colors.YELLOW)


@app.command()
def create_guest(
    first_name: str = typer.Argument(..., help="First name of the primary guest"),
    last_name: str = typer.Option(None, "--last-name", "-l", help="Last name"),
    email: str = typer.Option(None, "--email", "-e", help="Email for the invitation"),
    plus_one: bool = typer.Option(False, "--plus-one", help="Allow a plus-one"),
    send_email: bool = typer.Option(False, "--send-email", help="Email the invitation now"),
):
    """Create a primary guest with a fresh invite code."""
    write_model = SqlGuestCreateWriteModel(
        email_service=get_email_service(), frontend_url=settings.frontend_url
    )
    data = GuestCreateDTO(
        first_name=first_name,
        last_name=last_name,
        email=email,
        plus_one_allowed=plus_one,
    )
    try:
        party = asyncio.run(write_model.create_guest(data, send_email=send_email))
    except InvalidGuestDataError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Guest created!", fg=typer.colors.GREEN)
    _print_party(party)


@app.command()
def set_plus_one(
    guest_id: str = typer.Argument(..., help="Primary guest UUID"),
    allowed: bool = typer.Option(True, "--allowed/--not-allowed", help="Whether a plus-one is allowed"),
    first_name: str = typer.Option(None, "--first-name", "-f", help="Plus-one first name"),
    last_name: str = typer.Option(None, "--last-name", "-l", help="Plus-one last name"),
):
    """Allow or revoke a guest's plus-one and keep the plus-one row in sync."""
    update = GuestUpdateDTO(
        plus_one_allowed=allowed,
        plus_one_first_name=first_name,
        plus_one_last_name=last_name,
    )
    try:
        party = asyncio.run(SqlGuestUpdateWriteModel().update_guest(UUID(guest_id), update))
    except (GuestNotFoundError, InvalidGuestDataError, PlusOneReconciliationError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Plus-one updated!", fg=typer.colors.GREEN)
    _print_party(party)


@app.command()
def show_party(
    code: str = typer.Argument(..., help="Invite code, e.g. ABCD-2345"),
):
    """Show the party behind an invite code."""
    try:
        invite_code = parse_invite_code(code)
    except InvalidInviteCodeError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    party = asyncio.run(SqlGuestReadModel().get_party_by_code(invite_code))
    if party is None:
        typer.secho(f"No party found for {invite_code}", fg=typer.colors.YELLOW)
        raise typer.Exit(1)

    typer.secho(f"Party {invite_code}", fg=typer.colors.GREEN)
    _print_party(party)


@app.command()
def create_event(
    name: str = typer.Argument(..., help="Event name"),
    event_date: str = typer.Option(None, "--date", "-d", help="Date as YYYY-MM-DD"),
    location: str = typer.Option(None, "--location", help="Location name"),
    default: bool = typer.Option(False, "--default", help="Invite every guest automatically"),
):
    """Create an event. Default events are extended to every existing guest."""
    data = EventCreateDTO(
        name=name,
        event_date=date.fromisoformat(event_date) if event_date else None,
        location_name=location,
        is_default=default,
    )
    event = asyncio.run(SqlEventWriteModel().create_event(data))

    typer.secho("Event created!", fg=typer.colors.GREEN)
    typer.secho(f"  Event ID: {event.id}", fg=typer.colors.CYAN)
    typer.secho(f"  Display order: {event.display_order}", fg=typer.colors.BLUE)
    if event.is_default:
        typer.secho("  Every guest has been invited", fg=typer.colors.MAGENTA)


@app.command()
def issue_token(
    email: str = typer.Argument(..., help="Email of the identity"),
    user_id: str = typer.Option(None, "--user-id", "-u", help="Identity id, defaults to the email"),
):
    """Issue a bearer token for local testing of authenticated endpoints."""
    token = create_access_token(Identity(user_id=user_id or email, email=email))
    typer.echo(token)


if __name__ == "__main__":
    app()
