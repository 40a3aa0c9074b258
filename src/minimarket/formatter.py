"""
Rich text formatter for checkout summaries
"""

from typing import List, Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .cart import Cart
from .checkout import CheckoutResult
from .exceptions import ApplicationError
from .money import DEFAULT_CURRENCY, format_amount
from .order import OrderStatus
from .payment import PaymentKind


class CheckoutFormatter:
    """
    Formatter for checkout results with rich text features
    """

    def __init__(self, console: Optional[Console] = None, currency: str = DEFAULT_CURRENCY):
        """
        Initialize the formatter
        """
        self.console = console or Console()
        self.currency = currency

        # Color scheme for well-known status labels
        self.status_colors = {
            OrderStatus.PREPARING.value: "yellow",
            OrderStatus.CONFIRMED.value: "green",
            OrderStatus.DELIVERED.value: "cyan",
        }

        self.method_names = {
            PaymentKind.CARD: "Credit card",
            PaymentKind.CASH: "Cash",
            PaymentKind.TRANSFER: "Bank transfer",
        }

    def format_result(self, result: CheckoutResult) -> Group:
        """
        Format a checkout result as cart table and summary panel
        Returns Rich Group object containing the formatted summary
        """
        try:
            parts = []
            if result.order is not None:
                parts.append(self._create_cart_table(result.order.cart))
            parts.append(self._create_summary_panel(result))
            return Group(*parts)

        except Exception as e:
            raise ApplicationError(f"Failed to format checkout summary: {e}") from e

    def print_result(self, result: CheckoutResult) -> None:
        """Render a checkout result on the formatter's console"""
        self.console.print(self.format_result(result))

    def _create_cart_table(self, cart: Cart) -> Table:
        """
        Create a table listing the cart items
        Returns a Rich Table
        """
        table = Table(title="Cart", show_header=True, header_style="bold")
        table.add_column("ID", justify="right", style="dim")
        table.add_column("Product")
        table.add_column("Price", justify="right")

        for product in cart:
            table.add_row(
                str(product.id),
                Text(product.name),
                format_amount(product.price, self.currency)
            )

        return table

    def _create_summary_panel(self, result: CheckoutResult) -> Panel:
        """
        Create a panel with totals, payment and order status
        Returns a Rich Panel
        """
        grid = Table.grid(padding=(0, 2))
        grid.add_column(style="bold")
        grid.add_column()

        for label, value in self._summary_rows(result):
            grid.add_row(label, value)

        if result.ok:
            title = "[bold]Checkout Summary[/bold]"
            border = "blue"
        else:
            title = "[bold red]Checkout Failed[/bold red]"
            border = "red"

        return Panel(grid, title=title, border_style=border)

    def _summary_rows(self, result: CheckoutResult) -> List[tuple]:
        rows = []
        if result.cart_total is not None:
            rows.append(("Cart total:", format_amount(result.cart_total, self.currency)))
        if result.discounted_total is not None:
            style = "red" if result.discounted_total < 0 else "green"
            rows.append((
                "Discounted total:",
                Text(format_amount(result.discounted_total, self.currency), style=style)
            ))
        if result.receipt is not None:
            rows.append(("Payment:", self.method_names[result.receipt.method]))
        if result.order is not None:
            status = result.order.status
            rows.append((
                f"Order #{result.order.order_id}:",
                Text(status, style=self.status_colors.get(status, "white"))
            ))
        return rows

    def format_plain_summary(self, result: CheckoutResult) -> str:
        """
        Format a checkout result as plain text lines

        The error itself is not repeated; callers report it once on their own.
        """
        lines = ["Checkout summary:" if result.ok else "Checkout failed:"]

        if result.order is not None:
            for product in result.order.cart:
                lines.append(f"{product.id}. {product.name} - {format_amount(product.price, self.currency)}")

        for label, value in self._summary_rows(result):
            plain = value.plain if isinstance(value, Text) else value
            lines.append(f"{label} {plain}")

        return "\n".join(lines)
