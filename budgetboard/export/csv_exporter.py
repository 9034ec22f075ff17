"""Mini README: Flatten a budget into CSV rows and write them out.

Structure:
    * EXPORT_HEADER - the fixed first row.
    * build_export_rows - recurring, pending, cards, checking, then extras.
    * render_csv - comma-join the rows without quoting.
    * export_filename - ``budget_YYYY-MM.csv`` for the given day.
    * CsvExporter - writes the rendered file into a directory.

Fields are joined as-is. A description containing a comma shifts the columns
of its row; the browser dashboard behaved the same way and downstream
spreadsheets already expect that shape.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from ..budget.state import BudgetState
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

ExportRow = Tuple[str, str, Union[str, float]]

EXPORT_HEADER: ExportRow = ("Date", "Description", "Amount")


def build_export_rows(state: BudgetState, today: Optional[date] = None) -> List[ExportRow]:
    """Return the header followed by one row per budget item.

    ``today`` is accepted so callers can pass the export day alongside the
    state; the rows themselves only carry the dates stored on each entry.
    """

    rows: List[ExportRow] = [EXPORT_HEADER]
    rows.extend(("Monthly", label, amount) for label, amount in state.recurring.items())
    rows.extend(("Pending", label, amount) for label, amount in state.pending.items())
    rows.extend(
        ("CreditCard", f"{name} (due {card.due_date.isoformat()})", card.balance)
        for name, card in state.credit_cards.items()
    )
    rows.append(("Bank", "Checking Balance", state.checking_balance))
    rows.extend((entry.date.isoformat(), entry.description, entry.amount) for entry in state.extras)
    return rows


def _format_field(value: Union[str, float]) -> str:
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def render_csv(rows: Sequence[Sequence[Union[str, float]]]) -> str:
    return "\n".join(",".join(_format_field(value) for value in row) for row in rows)


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"budget_{today:%Y-%m}.csv"


class CsvExporter:
    """Write the budget CSV the dashboard offers as a download."""

    def export(self, state: BudgetState, output_directory: Path, today: Optional[date] = None) -> Path:
        """Render the state and write it to ``output_directory``."""

        today = today or date.today()
        rows = build_export_rows(state, today)
        destination = Path(output_directory) / export_filename(today)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(render_csv(rows), encoding="utf-8")
        LOGGER.info("Exported %s rows to %s", len(rows) - 1, destination)
        return destination
