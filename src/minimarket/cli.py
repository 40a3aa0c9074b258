"""
Command Line Interface for minimarket
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .checkout import run_checkout
from .config import Settings
from .exceptions import ApplicationError
from .formatter import CheckoutFormatter
from .sink import ConsoleSink

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("minimarket")

app = typer.Typer(
    name="minimarket",
    help="Run the retail checkout demonstration",
    no_args_is_help=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        from . import __version__
        console.print(f"minimarket version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    currency: Optional[str] = typer.Option(
        None,
        "--currency",
        help="Currency unit printed after amounts [env: MINIMARKET_CURRENCY]"
    ),
    discount: Optional[str] = typer.Option(
        None,
        "--discount",
        "-d",
        help="Discount kind: percentage or fixed [env: MINIMARKET_DISCOUNT_KIND]"
    ),
    discount_value: Optional[str] = typer.Option(
        None,
        "--discount-value",
        help="Percent or fixed amount for the discount [env: MINIMARKET_DISCOUNT_VALUE]"
    ),
    payment: Optional[str] = typer.Option(
        None,
        "--payment",
        "-p",
        help="Payment method: card, cash or transfer [env: MINIMARKET_PAYMENT_METHOD]"
    ),
    status_label: Optional[str] = typer.Option(
        None,
        "--status",
        help="Status label set on the confirmed order [env: MINIMARKET_CONFIRMED_LABEL]"
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with code 1 when the checkout fails"
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Skip the summary table after the checkout"
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print the summary as plain text lines instead of a table"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information"
    ),
) -> None:

    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled")

    settings = Settings.from_env().override(
        currency=currency,
        discount_kind=discount,
        discount_value=discount_value,
        payment_method=payment,
        confirmed_label=status_label,
    )
    logger.debug(f"Settings: {settings}")

    sink = ConsoleSink(console)
    result = run_checkout(sink, settings)

    if not result.ok:
        sink.write(f"Error: {result.error}")
        if verbose and result.error.__cause__ is not None:
            logger.debug("Cause:", exc_info=result.error.__cause__)

    if not quiet:
        formatter = CheckoutFormatter(console, currency=settings.currency)
        try:
            if plain:
                for line in formatter.format_plain_summary(result).splitlines():
                    sink.write(line)
            else:
                formatter.print_result(result)
        except ApplicationError as e:
            logger.error(f"minimarket error: {e}")

    if not result.ok and strict:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
