import logging

from ticket_cli.client import TicketServiceClient
from ticket_cli.console import Console, error_line
from ticket_cli.constants import MENU_LABELS, MenuOption, TicketStatus
from ticket_cli.errors import TicketServiceError
from ticket_cli.models import TicketCreate, TicketUpdate

logger = logging.getLogger(__name__)

STATUS_HINT = "/".join(TicketStatus)


def create_ticket(client: TicketServiceClient, console: Console, token: str) -> None:
    """Ask for a title and a description and create the ticket."""
    title = console.prompt("Title")
    description = console.prompt("Description")
    try:
        ticket = client.create_ticket(token, TicketCreate(title=title, description=description))
    except TicketServiceError as err:
        console.error(error_line(err))
        return
    logger.info("Created ticket %s.", ticket.id)
    console.success(f"Ticket created: {ticket.title} ({ticket.id})")


def list_tickets(client: TicketServiceClient, console: Console, token: str) -> None:
    """Print every ticket in the order the service returns them."""
    try:
        tickets = client.list_tickets(token)
    except TicketServiceError as err:
        console.error(error_line(err))
        return
    logger.info("Listed %d tickets.", len(tickets))
    for ticket in tickets:
        console.info(str(ticket))


def update_ticket(client: TicketServiceClient, console: Console, token: str) -> None:
    """Ask for a ticket ID and the fields to change, blank meaning unchanged."""
    ticket_id = console.prompt("Ticket ID to update")
    title = console.prompt("New Title (leave blank to skip)")
    description = console.prompt("New Description (leave blank to skip)")
    status = console.prompt(f"New Status ({STATUS_HINT}, leave blank to skip)")
    if not ticket_id:
        console.warning("Ticket ID is required.")
        return

    update = TicketUpdate.from_prompt_values(title, description, status)
    try:
        client.update_ticket(token, ticket_id, update)
    except TicketServiceError as err:
        console.error(error_line(err))
        return
    logger.info("Updated ticket %s with fields %s.", ticket_id, sorted(update.to_api_dict()))
    console.success("Ticket updated.")


def delete_ticket(client: TicketServiceClient, console: Console, token: str) -> None:
    """Ask for a ticket ID and delete it."""
    ticket_id = console.prompt("Ticket ID to delete")
    if not ticket_id:
        console.warning("Ticket ID is required.")
        return

    try:
        client.delete_ticket(token, ticket_id)
    except TicketServiceError as err:
        console.error(error_line(err))
        return
    logger.info("Deleted ticket %s.", ticket_id)
    console.success("Ticket deleted.")


TICKET_ACTIONS = {
    MenuOption.CREATE: create_ticket,
    MenuOption.LIST: list_tickets,
    MenuOption.UPDATE: update_ticket,
    MenuOption.DELETE: delete_ticket,
}


def show_menu(console: Console) -> None:
    console.info("\nTicket Menu:")
    for option, label in MENU_LABELS.items():
        console.info(f"{option}. {label}")


def run_ticket_menu(client: TicketServiceClient, console: Console, token: str) -> None:
    """Serve menu choices until the user picks Exit.

    Service errors are reported and the menu is shown again.
    """
    while True:
        show_menu(console)
        choice = console.prompt("", suffix="> ")
        try:
            option = MenuOption(choice)
        except ValueError:
            console.warning("Invalid option.")
            continue
        if option == MenuOption.EXIT:
            logger.debug("Leaving the ticket menu.")
            return
        TICKET_ACTIONS[option](client, console, token)
