import click

from ticket_cli.errors import (
    TicketServiceDecodeError,
    TicketServiceError,
    TicketServiceHttpError,
    TicketServiceNetworkError,
)


class Console:
    """Styled terminal output and line prompts."""

    def success(self, message):
        click.secho(message, fg="green")

    def info(self, message):
        click.echo(message)

    def warning(self, message):
        click.secho(message, fg="yellow")

    def error(self, message):
        click.secho(message, fg="red")

    def prompt(self, text: str, *, hide_input: bool = False, suffix: str = ": ") -> str:
        """Read one line, trimmed. A blank answer is returned as an empty string."""
        answer = click.prompt(
            text,
            default="",
            show_default=False,
            hide_input=hide_input,
            prompt_suffix=suffix,
        )
        return answer.strip()


def error_line(error: TicketServiceError, http_prefix: str = "Error") -> str:
    """One line describing a failed exchange with the ticket service."""
    if isinstance(error, TicketServiceHttpError):
        return f"{http_prefix}: {error.response_content}"
    if isinstance(error, TicketServiceNetworkError):
        return f"Network error: {error.message}"
    if isinstance(error, TicketServiceDecodeError):
        return f"Invalid response: {error.message}"
    return f"{http_prefix}: {error.message}"
