"""Mini README: FastAPI-powered budget dashboard.

Structure:
    * create_application - application factory wiring routes and templates.
    * _state_payload - JSON view of the budget plus its summary.

The page at ``/`` renders the whole budget. Edits are form posts that
answer with the updated budget as JSON; the page script reloads after each
one. Rejected input answers 400 and an unknown card 404, with the stored
budget left as it was. Handlers are plain functions so the blocking storage
writes run in the threadpool.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Dict, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates

from ..budget import BudgetState, InvalidInputError, UnknownCardError, summarise
from ..configuration import get_settings
from ..export import build_export_rows, export_filename, render_csv
from ..logging_utils import get_logger, set_log_level
from ..storage import BudgetStore, JsonFileBackend

LOGGER = get_logger(__name__)


def _state_payload(state: BudgetState) -> Dict[str, object]:
    payload = state.as_dict()
    payload["summary"] = summarise(state).as_dict()
    return payload


def _default_store() -> BudgetStore:
    settings = get_settings()
    set_log_level(settings.log_level)
    LOGGER.info("Using budget storage at %s", settings.storage_path)
    return BudgetStore(JsonFileBackend(settings.storage_path), key=settings.storage_key)


def create_application(store: Optional[BudgetStore] = None) -> FastAPI:
    """Create the FastAPI application bound to ``store``."""

    app = FastAPI(title="Budget Board", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    budget_store = store or _default_store()
    budget_store.initialize()

    def _apply(operation, *args: object) -> JSONResponse:
        try:
            state = operation(*args)
        except InvalidInputError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        except UnknownCardError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse(_state_payload(state))

    @app.get("/", response_class=HTMLResponse)
    def dashboard(request: Request) -> HTMLResponse:
        """Render the dashboard with every section and the summary."""

        state = budget_store.state
        summary = summarise(state)
        LOGGER.debug(
            "Rendering dashboard -> recurring: %.2f pending: %.2f extras: %.2f remaining: %.2f",
            summary.total_recurring,
            summary.total_pending,
            summary.total_extras,
            summary.discretionary_remaining,
        )
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "state": state,
                "summary": summary,
                "today": date.today().isoformat(),
            },
        )

    @app.get("/state")
    def read_state() -> JSONResponse:
        return JSONResponse(_state_payload(budget_store.state))

    @app.get("/summary")
    def read_summary() -> JSONResponse:
        return JSONResponse(budget_store.summary().as_dict())

    @app.post("/income")
    def update_income(amount: str = Form("")) -> JSONResponse:
        return _apply(budget_store.set_income, amount)

    @app.post("/checking-balance")
    def update_checking_balance(amount: str = Form("")) -> JSONResponse:
        return _apply(budget_store.set_checking_balance, amount)

    @app.post("/credit-cards")
    def update_card_balance(name: str = Form(""), amount: str = Form("")) -> JSONResponse:
        """Replace a card balance; the due date is kept."""

        return _apply(budget_store.set_card_balance, name, amount)

    @app.post("/recurring")
    def upsert_recurring(label: str = Form(""), amount: str = Form("")) -> JSONResponse:
        return _apply(budget_store.add_or_update_recurring, label, amount)

    @app.post("/recurring/delete")
    def delete_recurring(label: str = Form("")) -> JSONResponse:
        return _apply(budget_store.remove_recurring, label)

    @app.post("/pending")
    def upsert_pending(label: str = Form(""), amount: str = Form("")) -> JSONResponse:
        return _apply(budget_store.add_or_update_pending, label, amount)

    @app.post("/pending/delete")
    def delete_pending(label: str = Form("")) -> JSONResponse:
        return _apply(budget_store.remove_pending, label)

    @app.post("/extras")
    def add_extra(
        description: str = Form(""),
        amount: str = Form(""),
        spent_on: Optional[str] = Form(None, alias="date"),
    ) -> JSONResponse:
        """Record discretionary spending, dated today unless a date is given."""

        return _apply(budget_store.append_extra, description, amount, spent_on)

    @app.get("/export.csv")
    def export_csv() -> Response:
        """Return the budget as a CSV attachment named after the current month."""

        today = date.today()
        rows = build_export_rows(budget_store.state, today)
        filename = export_filename(today)
        LOGGER.info("Serving export %s with %s rows", filename, len(rows) - 1)
        return Response(
            content=render_csv(rows),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app
