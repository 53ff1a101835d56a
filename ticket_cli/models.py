from dataclasses import dataclass, field
from typing import Any, Self

from ticket_cli.errors import TicketServiceDecodeError


def _require_mapping(api_data: Any, entity: str) -> dict:
    if not isinstance(api_data, dict):
        raise TicketServiceDecodeError(f"{entity}: expected an object, got {type(api_data).__name__}")
    return api_data


def _require_str(api_data: dict, key: str, entity: str) -> str:
    field_value = api_data.get(key)
    if field_value is None:
        raise TicketServiceDecodeError(f"{entity}: missing field '{key}'")
    if not isinstance(field_value, str):
        raise TicketServiceDecodeError(
            f"{entity}: field '{key}' must be a string, got {type(field_value).__name__}"
        )
    return field_value


@dataclass(frozen=True)
class Credentials:
    """Email and password typed by the user."""

    email: str
    password: str = field(repr=False)

    def to_api_dict(self) -> dict:
        """Converts to dict for the auth endpoints."""
        return {"email": self.email, "password": self.password}


@dataclass(frozen=True)
class User:
    """Authenticated user as returned by the service."""

    id: str
    email: str
    role: str

    @classmethod
    def from_api_dict(cls, api_data: Any) -> Self:
        """Creates an instance from a raw API object."""
        api_data = _require_mapping(api_data, "user")
        return cls(
            id=_require_str(api_data, "id", "user"),
            email=_require_str(api_data, "email", "user"),
            role=_require_str(api_data, "role", "user"),
        )


@dataclass(frozen=True)
class RegisteredUser(User):
    """Confirmation returned by the register endpoint."""


@dataclass(frozen=True)
class Session:
    """Bearer token and the user it was issued to."""

    token: str = field(repr=False)
    user: User

    @classmethod
    def from_api_dict(cls, api_data: Any) -> Self:
        """Creates an instance from a login response."""
        api_data = _require_mapping(api_data, "login response")
        return cls(
            token=_require_str(api_data, "token", "login response"),
            user=User.from_api_dict(api_data.get("user")),
        )


@dataclass(frozen=True)
class Ticket:
    """Ticket as last returned by the service."""

    id: str
    title: str
    description: str
    status: str

    @classmethod
    def from_api_dict(cls, api_data: Any) -> Self:
        """Creates an instance from a raw API object."""
        api_data = _require_mapping(api_data, "ticket")
        return cls(
            id=_require_str(api_data, "id", "ticket"),
            title=_require_str(api_data, "title", "ticket"),
            description=_require_str(api_data, "description", "ticket"),
            status=_require_str(api_data, "status", "ticket"),
        )

    @classmethod
    def list_from_api(cls, api_data: Any) -> list[Self]:
        """Creates instances from a list response, keeping the service order."""
        if not isinstance(api_data, list):
            raise TicketServiceDecodeError(
                f"ticket list: expected an array, got {type(api_data).__name__}"
            )
        return [cls.from_api_dict(ticket_data) for ticket_data in api_data]

    def __str__(self) -> str:
        return f"- [{self.status}] {self.title} ({self.id})\n  {self.description}"


@dataclass(frozen=True)
class TicketCreate:
    """Body of a create ticket request."""

    title: str
    description: str

    def to_api_dict(self) -> dict:
        """Converts to dict for the tickets API."""
        return {"title": self.title, "description": self.description}


@dataclass(frozen=True)
class TicketUpdate:
    """Partial update of a ticket.

    A field set to None is absent and is left out of the request body, so the
    service keeps its current value. An empty string is a real value.
    """

    title: str | None = None
    description: str | None = None
    status: str | None = None

    @classmethod
    def from_prompt_values(cls, title: str, description: str, status: str) -> Self:
        """Builds an update from console answers, blank answers meaning no change."""
        return cls(
            title=title or None,
            description=description or None,
            status=status or None,
        )

    def to_api_dict(self) -> dict:
        """Converts to dict for the tickets API, without the absent fields."""
        field_mapping = {
            "title": self.title,
            "description": self.description,
            "status": self.status,
        }
        return {key: field_value for key, field_value in field_mapping.items() if field_value is not None}
