import pytest

from ticket_cli.errors import TicketServiceDecodeError
from ticket_cli.models import (
    Credentials,
    RegisteredUser,
    Session,
    Ticket,
    TicketCreate,
    TicketUpdate,
)


def test_credentials_to_api_dict():
    credentials = Credentials(email="a@x.com", password="pw")

    result = credentials.to_api_dict()

    assert result == {"email": "a@x.com", "password": "pw"}


def test_credentials_repr_hides_password():
    result = repr(Credentials(email="a@x.com", password="s3cret"))

    assert "s3cret" not in result


def test_session_from_api_dict(login_response):
    result = Session.from_api_dict(login_response)

    assert result.token == "t1"
    assert result.user.email == "a@x.com"
    assert result.user.role == "user"
    assert "t1" not in repr(result)


@pytest.mark.parametrize(
    "api_data",
    [
        None,
        [],
        {"user": {"id": "u1", "email": "a@x.com", "role": "user"}},
        {"token": "t1"},
        {"token": "t1", "user": "a@x.com"},
        {"token": 42, "user": {"id": "u1", "email": "a@x.com", "role": "user"}},
    ],
)
def test_session_from_malformed_api_dict(api_data):
    with pytest.raises(TicketServiceDecodeError):
        Session.from_api_dict(api_data)


def test_registered_user_from_api_dict(user_data):
    result = RegisteredUser.from_api_dict(user_data)

    assert result == RegisteredUser(id="u1", email="a@x.com", role="user")


def test_ticket_from_api_dict(ticket_factory):
    result = Ticket.from_api_dict(ticket_factory(status="In Progress"))

    assert result.status == "In Progress"
    assert result.title == "Printer on fire"


def test_ticket_missing_field(ticket_factory):
    api_data = ticket_factory()
    del api_data["status"]

    with pytest.raises(TicketServiceDecodeError) as exc_info:
        Ticket.from_api_dict(api_data)

    assert "status" in exc_info.value.message


def test_ticket_list_keeps_service_order(ticket_factory):
    api_data = [ticket_factory(ticket_id="b"), ticket_factory(ticket_id="a")]

    result = Ticket.list_from_api(api_data)

    assert [ticket.id for ticket in result] == ["b", "a"]


def test_ticket_list_empty():
    result = Ticket.list_from_api([])

    assert result == []


def test_ticket_list_not_an_array(ticket_factory):
    with pytest.raises(TicketServiceDecodeError):
        Ticket.list_from_api(ticket_factory())


def test_ticket_str():
    ticket = Ticket(id="T-1", title="Login broken", description="500 on submit", status="Open")

    result = str(ticket)

    assert result == "- [Open] Login broken (T-1)\n  500 on submit"


def test_ticket_create_to_api_dict():
    result = TicketCreate(title="Title", description="").to_api_dict()

    assert result == {"title": "Title", "description": ""}


def test_ticket_update_from_prompt_values_skips_blanks():
    update = TicketUpdate.from_prompt_values("", "New description", "")

    result = update.to_api_dict()

    assert result == {"description": "New description"}


def test_ticket_update_all_fields():
    update = TicketUpdate.from_prompt_values("Title", "Description", "Closed")

    result = update.to_api_dict()

    assert result == {"title": "Title", "description": "Description", "status": "Closed"}


def test_ticket_update_empty_string_is_a_value():
    update = TicketUpdate(description="")

    result = update.to_api_dict()

    assert result == {"description": ""}

