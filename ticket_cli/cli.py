import logging

import click

from ticket_cli import __version__
from ticket_cli.auth import AuthenticationError, authenticate
from ticket_cli.client import TicketServiceClient
from ticket_cli.config import LOG_LEVELS, ConfigError, TicketCLIConfig
from ticket_cli.console import Console
from ticket_cli.constants import BASE_URL_ENV_VAR, LOG_LEVEL_ENV_VAR
from ticket_cli.log_config import configure_logging
from ticket_cli.tickets import run_ticket_menu

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--base-url",
    envvar=BASE_URL_ENV_VAR,
    help="Ticket service address. Defaults to http://localhost:3000.",
)
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV_VAR,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Diagnostics written to stderr. Defaults to WARNING.",
)
@click.version_option(__version__, prog_name="ticket-cli")
@click.pass_context
def main(ctx, base_url, log_level):
    """Log in to the ticket service and manage tickets from the terminal."""
    try:
        config = TicketCLIConfig.from_env(base_url=base_url, log_level=log_level)
    except ConfigError as err:
        raise click.BadParameter(str(err)) from err
    configure_logging(config.log_level)
    logger.debug("Using ticket service at %s.", config.base_url)

    console = Console()
    with TicketServiceClient(config) as client:
        try:
            session = authenticate(client, console)
        except AuthenticationError as err:
            console.error(str(err))
            ctx.exit(1)
        if session is None:
            return
        run_ticket_menu(client, console, session.token)
