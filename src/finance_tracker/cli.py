import typer
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from finance_tracker.config.settings import ConfigLoader
from finance_tracker.database.connection import DatabaseConfig, DatabaseManager
from finance_tracker.domain.categories import categories_for
from finance_tracker.domain.enums import StatsPeriod, TransactionType, TypeFilter
from finance_tracker.domain.models import Transaction
from finance_tracker.logging_setup import configure_logging
from finance_tracker.repositories.sqlite_transaction_repository import SQLiteTransactionRepository
from finance_tracker.services.transaction_service import TransactionService

app = typer.Typer(
    name="finance-tracker",
    help="Record income and expenses and see where your money goes",
    add_completion=False,
)

console = Console()

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M:%S"]
BAR_WIDTH = 24

class Period(str, Enum):
    week = "week"
    month = "month"
    year = "year"
    all = "all"

    def to_stats_period(self) -> StatsPeriod:
        return {
            Period.week: StatsPeriod.THIS_WEEK,
            Period.month: StatsPeriod.THIS_MONTH,
            Period.year: StatsPeriod.THIS_YEAR,
            Period.all: StatsPeriod.ALL,
        }[self]


class State:
    verbose: bool = False
    db: Optional[DatabaseManager] = None
    service: Optional[TransactionService] = None


state = State()

@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose output",
    )
):
    """
    Finance Tracker - Record, search, and analyze your income and expenses.
    """
    configure_logging("DEBUG" if verbose else None)
    state.verbose = verbose


def _database() -> DatabaseManager:
    # Opened on first use so commands that never touch storage leave no file
    if state.db is None:
        state.db = DatabaseManager(DatabaseConfig(ConfigLoader.database_path()))
        state.db.initialize()
    return state.db


def _service() -> TransactionService:
    if state.service is None:
        state.service = TransactionService(SQLiteTransactionRepository(_database()))
    return state.service


def _fail(e: Exception) -> None:
    console.print(f"[bold red]Error:[/bold red] {e}")
    if state.verbose:
        console.print_exception()
    raise typer.Exit(code=1)


def _money(amount: Decimal) -> str:
    return f"{amount:,}"


def _signed(txn: Transaction) -> str:
    color = "green" if txn.type == TransactionType.INCOME else "red"
    return f"[{color}]{txn.signed_amount:+,}[/{color}]"


def _print_transaction(txn: Transaction, title: str) -> None:
    lines = [
        f"[bold]{txn.title}[/bold]  {_signed(txn)}",
        f"Category: {txn.category}",
        f"Date: {txn.date:%Y-%m-%d %H:%M}",
        f"ID: [dim]{txn.id}[/dim]",
    ]
    if txn.notes:
        lines.append(f"Notes: {txn.notes}")
    console.print(Panel.fit("\n".join(lines), title=title, border_style="cyan"))


@app.command(name="init")
def init():
    """
    Create the database schema.
    """
    try:
        db = _database()
        db.initialize()
        row = db.get_connection().execute(
            "SELECT version, description FROM schema_version ORDER BY version DESC LIMIT 1"
        ).fetchone()
        console.print(f"[green]✓[/green] Database ready at {db.config.db_path}")
        if row:
            console.print(f"  Schema version: {row['version']} ({row['description']})")
    except Exception as e:
        _fail(e)


@app.command(name="add")
def add(
    title: str = typer.Argument(..., help="What the transaction was"),
    amount: str = typer.Argument(..., help="Amount, greater than 0"),
    type: TransactionType = typer.Option(
        TransactionType.EXPENSE,
        "--type", "-t",
        case_sensitive=False,
        help="Income or Expense",
    ),
    category: str = typer.Option(
        ...,
        "--category", "-c",
        help="Category (see `finance-tracker categories`)",
    ),
    date: Optional[datetime] = typer.Option(
        None,
        "--date", "-d",
        formats=DATE_FORMATS,
        help="When it happened (defaults to now)",
    ),
    notes: Optional[str] = typer.Option(
        None,
        "--notes", "-n",
        help="Optional notes",
    ),
):
    """
    Record a new transaction.

    Examples:
        finance-tracker add "Lunch" 50000 -c "Food & Dining"
        finance-tracker add "August salary" 2000000 -t income -c Salary -d 2025-08-01
    """
    try:
        txn = _service().add_transaction(
            title=title,
            amount=amount,
            type=type,
            category=category,
            date=date,
            notes=notes,
        )
        _print_transaction(txn, "Transaction added")
    except Exception as e:
        _fail(e)


@app.command(name="edit")
def edit(
    transaction_id: str = typer.Argument(..., help="ID of the transaction"),
    title: Optional[str] = typer.Option(None, "--title", help="New title"),
    amount: Optional[str] = typer.Option(None, "--amount", "-a", help="New amount"),
    type: Optional[TransactionType] = typer.Option(
        None, "--type", "-t", case_sensitive=False, help="New type",
    ),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="New category"),
    date: Optional[datetime] = typer.Option(
        None, "--date", "-d", formats=DATE_FORMATS, help="New date",
    ),
    notes: Optional[str] = typer.Option(
        None, "--notes", "-n", help="New notes (empty string clears them)",
    ),
):
    """
    Edit a transaction. Fields not given keep their current value.
    """
    try:
        current = _service().get_transaction(transaction_id)
        if current is None:
            raise LookupError(f"Transaction with ID {transaction_id} not found")

        txn = _service().edit_transaction(
            transaction_id,
            title=title if title is not None else current.title,
            amount=amount if amount is not None else current.amount,
            type=type or current.type,
            category=category if category is not None else current.category,
            date=date or current.date,
            notes=notes if notes is not None else current.notes,
        )
        _print_transaction(txn, "Transaction updated")
    except Exception as e:
        _fail(e)


@app.command(name="delete")
def delete(
    transaction_id: str = typer.Argument(..., help="ID of the transaction"),
):
    """
    Delete a transaction.
    """
    try:
        if _service().delete_transaction(transaction_id):
            console.print(f"[green]✓[/green] Deleted {transaction_id}")
        else:
            console.print(f"[yellow]No transaction with ID {transaction_id}[/yellow]")
            raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        _fail(e)


@app.command(name="list")
def list_transactions(
    search: str = typer.Option(
        "",
        "--search", "-s",
        help="Match title or category (case-insensitive)",
    ),
    type_filter: TypeFilter = typer.Option(
        TypeFilter.ALL,
        "--type", "-t",
        case_sensitive=False,
        help="All, Income or Expense",
    ),
):
    """
    List transactions, newest first.

    Examples:
        finance-tracker list
        finance-tracker list --search food --type expense
    """
    try:
        listing = _service().list_transactions(search, type_filter)
        totals = listing.totals

        balance_color = "green" if totals.balance >= 0 else "red"
        console.print(Panel(
            f"[green]Income:[/green]  {_money(totals.total_income):>16}\n"
            f"[red]Expense:[/red] {_money(totals.total_expense):>16}\n"
            f"{'─' * 26}\n"
            f"[bold {balance_color}]Balance:[/bold {balance_color}] {_money(totals.balance):>16}",
            title="[bold]Totals[/bold]",
            border_style="cyan",
            padding=(1, 2),
        ))

        if listing.is_empty:
            console.print(Panel(
                "[yellow]No transactions found[/yellow]",
                border_style="yellow",
            ))
            return

        txn_table = Table(show_header=True, padding=(0, 1))
        txn_table.add_column("Date", style="cyan", width=12)
        txn_table.add_column("Title", style="white", max_width=40)
        txn_table.add_column("Category", style="magenta")
        txn_table.add_column("Amount", justify="right")
        txn_table.add_column("ID", style="dim", no_wrap=True)

        for txn in listing.transactions:
            txn_table.add_row(
                f"{txn.date:%Y-%m-%d}",
                txn.title,
                txn.category,
                _signed(txn),
                txn.id,
            )

        console.print(txn_table)
        console.print(f"\n[dim]{len(listing)} transactions[/dim]")
    except Exception as e:
        _fail(e)


@app.command(name="stats")
def stats(
    period: Period = typer.Option(
        Period.month,
        "--period", "-p",
        case_sensitive=False,
        help="week, month, year or all",
    ),
):
    """
    Show statistics for a period.

    Examples:
        finance-tracker stats
        finance-tracker stats --period year
    """
    try:
        report = _service().get_statistics(period.to_stats_period())
        totals = report.totals

        console.print(f"\n[bold cyan]Statistics: {report.period.value}[/bold cyan]")

        net_color = "blue" if totals.balance >= 0 else "dark_orange"
        console.print(Panel(
            f"[bold]Transactions:[/bold] {report.transaction_count}\n\n"
            f"[green]Total Income:[/green]  {_money(totals.total_income):>16}\n"
            f"[red]Total Expense:[/red] {_money(totals.total_expense):>16}\n"
            f"{'─' * 32}\n"
            f"[bold {net_color}]Net Income:[/bold {net_color}]    {_money(totals.balance):>16}",
            title="[bold]Overview[/bold]",
            border_style="cyan",
            padding=(1, 2),
        ))

        if report.transaction_count == 0:
            console.print(Panel(
                "[yellow]No transactions in this period[/yellow]",
                title="Empty Report",
                border_style="yellow",
            ))
            return

        console.print("\n[bold]Category Breakdown[/bold]")
        category_table = Table(show_header=True, box=None, padding=(0, 2))
        category_table.add_column("Category", style="cyan", no_wrap=True)
        category_table.add_column("Count", justify="right", style="dim")
        category_table.add_column("Amount", justify="right")
        category_table.add_column("", no_wrap=True)

        scale = report.max_category_total
        for stat in report.category_stats:
            color = "green" if stat.type == TransactionType.INCOME else "red"
            bar = "█" * int(stat.share_of(scale) * BAR_WIDTH)
            category_table.add_row(
                stat.category,
                str(stat.count),
                f"[{color}]{_money(stat.total)}[/{color}]",
                f"[{color}]{bar}[/{color}]",
            )
        console.print(category_table)

        if report.expense_stats:
            total_expense = totals.total_expense
            console.print("\n[bold]Expense Share[/bold]")
            share_table = Table(show_header=False, box=None, padding=(0, 2))
            share_table.add_column("Category", style="cyan")
            share_table.add_column("%", justify="right", style="dim")
            for stat in report.expense_stats:
                percentage = (stat.total / total_expense * 100) if total_expense > 0 else 0
                share_table.add_row(stat.category, f"{percentage:.1f}%")
            console.print(share_table)

        console.print("\n[bold]Monthly Trend[/bold]")
        month_table = Table(show_header=True, padding=(0, 1))
        month_table.add_column("Month", style="cyan")
        month_table.add_column("Income", justify="right", style="green")
        month_table.add_column("Expense", justify="right", style="red")
        month_table.add_column("Net", justify="right")
        for month in report.monthly_data:
            month_table.add_row(
                f"{month.month:%b %Y}",
                _money(month.income),
                _money(month.expense),
                _money(month.net),
            )
        console.print(month_table)

        insights = report.insights
        lines = [f"📅 Average Daily Spending: {_money(insights.average_daily_spend.quantize(Decimal('1')))}"]
        if insights.largest_expense:
            largest = insights.largest_expense
            lines.append(f"⚠️  Largest Expense: {largest.title} - {_money(largest.amount)}")
        if insights.most_common_category:
            lines.append(f"📊 Most Common Category: {insights.most_common_category}")
        console.print(Panel("\n".join(lines), title="[bold]Quick Insights[/bold]", border_style="green"))

        if state.verbose:
            console.print("\n[dim]→ Report generated successfully[/dim]")
    except Exception as e:
        _fail(e)


@app.command(name="categories")
def categories(
    type: Optional[TransactionType] = typer.Option(
        None, "--type", "-t", case_sensitive=False, help="Only this type",
    ),
):
    """
    Show the suggested categories.
    """
    for txn_type in [type] if type else list(TransactionType):
        console.print(f"[bold]{txn_type.value}[/bold]")
        for name in categories_for(txn_type):
            console.print(f"  • {name}")


def cli_main():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    cli_main()
