import logging
from urllib.parse import quote, urljoin

import requests

from ticket_cli import __version__
from ticket_cli.config import TicketCLIConfig
from ticket_cli.constants import LOGIN_PATH, REGISTER_PATH, TICKETS_PATH
from ticket_cli.errors import TicketServiceError, wrap_http_error
from ticket_cli.models import (
    Credentials,
    RegisteredUser,
    Session,
    Ticket,
    TicketCreate,
    TicketUpdate,
)

logger = logging.getLogger(__name__)


class TicketServiceClient(requests.Session):
    """Client to interact with the ticket service.

    The session headers are fixed at construction. The bearer token travels
    with each call instead, so one client can serve any session.
    """

    def __init__(self, config: TicketCLIConfig):
        super().__init__()
        self.base_url = config.base_url
        self.headers.update(
            {
                "User-Agent": f"ticket-cli/{__version__}",
                "Accept": "application/json",
            },
        )

    def request(self, method: str, url: str, *args, **kwargs):
        """Makes HTTP request relative to the service base URL."""
        if url and url[0] == "/":
            url = url[1:]
        url = urljoin(self.base_url, url)
        logger.debug("%s %s", method, url)
        return super().request(method, url, *args, **kwargs)

    @wrap_http_error
    def login(self, credentials: Credentials) -> Session:
        """
        Log in with email and password.

        Args:
            credentials: User credentials

        Returns:
            Session with the bearer token and the signed in user
        """
        response = self.post(url=LOGIN_PATH, json=credentials.to_api_dict())
        response.raise_for_status()
        return Session.from_api_dict(response.json())

    @wrap_http_error
    def register(self, credentials: Credentials) -> RegisteredUser:
        """
        Create a new account. No session is opened.

        Args:
            credentials: User credentials

        Returns:
            The created user
        """
        response = self.post(url=REGISTER_PATH, json=credentials.to_api_dict())
        response.raise_for_status()
        return RegisteredUser.from_api_dict(response.json())

    @wrap_http_error
    def create_ticket(self, token: str, ticket: TicketCreate) -> Ticket:
        """Create a ticket and return it as stored by the service."""
        response = self.post(
            url=TICKETS_PATH,
            json=ticket.to_api_dict(),
            headers=self._auth_headers(token),
        )
        response.raise_for_status()
        return Ticket.from_api_dict(response.json())

    @wrap_http_error
    def list_tickets(self, token: str) -> list[Ticket]:
        """List the tickets visible to the session, in service order."""
        response = self.get(url=TICKETS_PATH, headers=self._auth_headers(token))
        response.raise_for_status()
        return Ticket.list_from_api(response.json())

    @wrap_http_error
    def update_ticket(self, token: str, ticket_id: str, update: TicketUpdate) -> None:
        """Apply a partial update. The response body is ignored."""
        response = self.put(
            url=self._ticket_path(ticket_id),
            json=update.to_api_dict(),
            headers=self._auth_headers(token),
        )
        response.raise_for_status()

    @wrap_http_error
    def delete_ticket(self, token: str, ticket_id: str) -> None:
        """Delete the ticket by ID."""
        response = self.delete(url=self._ticket_path(ticket_id), headers=self._auth_headers(token))
        response.raise_for_status()

    def _auth_headers(self, token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}

    def _ticket_path(self, ticket_id: str) -> str:
        # dot segments would resolve to the collection or the service root
        if ticket_id in {".", ".."}:
            raise TicketServiceError(f"Invalid ticket ID '{ticket_id}'")
        return f"{TICKETS_PATH}/{quote(ticket_id, safe='')}"
