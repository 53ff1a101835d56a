import pytest
import responses

from ticket_cli.client import TicketServiceClient
from ticket_cli.config import TicketCLIConfig
from ticket_cli.console import Console

BASE_URL = "http://tickets.test.com/"
TOKEN = "t1"  # noqa: S105
USER_EMAIL = "a@x.com"
TICKET_ID = "0b6f2b8e-9c6e-4c1e-8d55-3f0f0a3b9a11"


@pytest.fixture
def requests_mocker():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def config():
    return TicketCLIConfig(base_url=BASE_URL)


@pytest.fixture
def ticket_client(config):
    with TicketServiceClient(config) as client:
        yield client


@pytest.fixture
def console():
    return Console()


@pytest.fixture
def user_data():
    return {"id": "u1", "email": USER_EMAIL, "role": "user"}


@pytest.fixture
def login_response(user_data):
    return {"token": TOKEN, "user": user_data}


@pytest.fixture
def ticket_factory():
    def _ticket(
        ticket_id=TICKET_ID,
        title="Printer on fire",
        description="Third floor printer is smoking",
        status="Open",
    ):
        return {
            "id": ticket_id,
            "title": title,
            "description": description,
            "status": status,
        }

    return _ticket


@pytest.fixture
def prompt_answers(mocker):
    """Feeds scripted answers to Console.prompt, one per call."""

    def _answers(*answers):
        return mocker.patch.object(Console, "prompt", side_effect=list(answers))

    return _answers
