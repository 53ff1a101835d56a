from enum import StrEnum

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_LOG_LEVEL = "WARNING"

BASE_URL_ENV_VAR = "TICKET_CLI_BASE_URL"
LOG_LEVEL_ENV_VAR = "TICKET_CLI_LOG_LEVEL"

LOGIN_PATH = "auth/login"
REGISTER_PATH = "auth/register"
TICKETS_PATH = "tickets"


class AuthMode(StrEnum):
    """Authentication modes offered at startup."""

    LOGIN = "login"
    REGISTER = "register"


class MenuOption(StrEnum):
    """Ticket menu choices."""

    CREATE = "1"
    LIST = "2"
    UPDATE = "3"
    DELETE = "4"
    EXIT = "5"


class TicketStatus(StrEnum):
    """Ticket statuses known to the service."""

    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    CLOSED = "Closed"


MENU_LABELS = {
    MenuOption.CREATE: "Create Ticket",
    MenuOption.LIST: "List Tickets",
    MenuOption.UPDATE: "Update Ticket",
    MenuOption.DELETE: "Delete Ticket",
    MenuOption.EXIT: "Exit",
}
