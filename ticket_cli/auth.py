import logging

from ticket_cli.client import TicketServiceClient
from ticket_cli.console import Console, error_line
from ticket_cli.constants import AuthMode
from ticket_cli.errors import TicketServiceError
from ticket_cli.models import Credentials, Session

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Authentication could not complete. The message is meant for the user."""


def prompt_credentials(console: Console) -> tuple[str, Credentials]:
    """Ask for the mode, the email and the password, in that order."""
    console.info("Welcome to the Ticket CLI")
    console.info("Type `login` to log in or `register` to create an account:")
    mode = console.prompt("", suffix="> ")
    email = console.prompt("Email")
    password = console.prompt("Password", hide_input=True)
    return mode, Credentials(email=email, password=password)


def authenticate(client: TicketServiceClient, console: Console) -> Session | None:
    """Run the login or register exchange.

    Returns the session after a login and None after a registration, which
    does not sign the user in. Raises AuthenticationError on any failure.
    """
    mode, credentials = prompt_credentials(console)
    try:
        auth_mode = AuthMode(mode)
    except ValueError:
        logger.info("Unknown authentication mode %r.", mode)
        raise AuthenticationError("Invalid command.") from None

    try:
        if auth_mode == AuthMode.REGISTER:
            registered = client.register(credentials)
        else:
            session = client.login(credentials)
    except TicketServiceError as err:
        raise AuthenticationError(error_line(err, http_prefix="Failed")) from err

    if auth_mode == AuthMode.REGISTER:
        logger.info("Registered user %s.", registered.id)
        console.success(f"Registered as {registered.email}\n")
        return None

    logger.info("Signed in user %s with role %s.", session.user.id, session.user.role)
    console.success(f"Signed in as {session.user.email}\n")
    return session
