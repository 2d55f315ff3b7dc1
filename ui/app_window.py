import logging

import customtkinter as ctk

from models.transaction import Transaction
from services.ledger_service import LedgerService, LedgerSnapshot
from ui.components.alert_banner import AlertBanner
from ui.components.confirm_dialog import ConfirmDialog
from ui.components.entry_form import EntryForm
from ui.components.history_panel import HistoryPanel
from utils.constants import (
    APP_NAME, APP_WIDTH, APP_HEIGHT, BANNER_TIMEOUT_MS, RECENT_LIMIT,
    INCOME_COLOR, EXPENSE_COLOR, BALANCE_COLOR, balance_color, banner_replaces,
)
from utils.currency import format_currency

logger = logging.getLogger(__name__)


class AppWindow(ctk.CTk):
    def __init__(
        self,
        ledger_service: LedgerService,
        refresh_interval_ms: int = 60_000,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._svc = ledger_service
        self._refresh_interval_ms = refresh_interval_ms
        self._snapshot = LedgerSnapshot()
        self._refresh_job = None

        self.title(APP_NAME)
        self.minsize(1000, 700)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)

        self._build_header()
        self._build_banner_area()
        self._build_summary_cards()
        self._build_content()

        if not self._svc.is_available():
            self.show_banner(
                "Failed to connect to database! Check the database location in ~/.ledger/config.json.",
                severity="error", timeout_ms=None,
            )

        self.refresh()
        self._schedule_refresh()

    # ── Layout ──────────────────────────────────────────────────────────────
    def _build_header(self):
        ctk.CTkLabel(
            self, text=APP_NAME,
            font=ctk.CTkFont(size=28, weight="bold"),
        ).grid(row=0, column=0, pady=(24, 8))

    def _build_banner_area(self):
        self._banner_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._banner_frame.grid(row=1, column=0, sticky="ew", padx=24)

    def _build_summary_cards(self):
        frame = ctk.CTkFrame(self, fg_color="transparent")
        frame.grid(row=2, column=0, sticky="ew", padx=18, pady=12)
        frame.grid_columnconfigure((0, 1, 2), weight=1)
        self._balance_label = self._make_card(frame, 0, "Current Balance", "Available funds", BALANCE_COLOR)
        self._income_label = self._make_card(frame, 1, "Total Income", "Money earned", INCOME_COLOR)
        self._expense_label = self._make_card(frame, 2, "Total Expenses", "Money spent", EXPENSE_COLOR)

    def _make_card(self, parent, col, title, subtitle, color) -> ctk.CTkLabel:
        card = ctk.CTkFrame(parent, fg_color=("gray90", "gray20"), corner_radius=10)
        card.grid(row=0, column=col, padx=6, sticky="ew")
        card.grid_columnconfigure(0, weight=1)
        ctk.CTkLabel(
            card, text=title, font=ctk.CTkFont(size=12), text_color="gray60",
        ).grid(row=0, column=0, pady=(12, 0), padx=16)
        value = ctk.CTkLabel(
            card, text=format_currency(0),
            font=ctk.CTkFont(size=22, weight="bold"), text_color=color,
        )
        value.grid(row=1, column=0, pady=4, padx=16)
        ctk.CTkLabel(
            card, text=subtitle, font=ctk.CTkFont(size=11), text_color="gray60",
        ).grid(row=2, column=0, pady=(0, 12), padx=16)
        return value

    def _build_content(self):
        content = ctk.CTkFrame(self, fg_color="transparent")
        content.grid(row=3, column=0, sticky="nsew", padx=24, pady=(0, 24))
        content.grid_columnconfigure((0, 1), weight=1)
        content.grid_rowconfigure(0, weight=1)

        self._form = EntryForm(
            content, self._svc,
            on_saved=self._on_saved,
            on_failed=lambda reason: self.show_banner(reason, severity="error"),
        )
        self._form.grid(row=0, column=0, sticky="new", padx=(0, 12))

        self._history = HistoryPanel(content, on_delete=self._on_delete)
        self._history.grid(row=0, column=1, sticky="nsew", padx=(12, 0))

    # ── Data ────────────────────────────────────────────────────────────────
    def refresh(self):
        """Reload totals and history from the store and redraw."""
        self._snapshot = self._svc.load()
        snap = self._snapshot
        self._balance_label.configure(
            text=format_currency(snap.balance),
            text_color=balance_color(snap.balance),
        )
        self._income_label.configure(text=format_currency(snap.total_income))
        self._expense_label.configure(text=format_currency(snap.total_expenses))
        self._history.show(snap.recent(RECENT_LIMIT))
        if not snap.ok:
            self.show_banner(snap.error, severity="error", timeout_ms=None)

    def _schedule_refresh(self):
        self._refresh_job = self.after(self._refresh_interval_ms, self._on_refresh_tick)

    def _on_refresh_tick(self):
        logger.debug("Periodic ledger refresh")
        self.refresh()
        self._schedule_refresh()

    def _on_saved(self, tx: Transaction):
        self.refresh()
        if tx.is_income:
            message = f"Added income of {format_currency(tx.amount)}"
        else:
            message = f"Recorded expense of {format_currency(tx.amount)}"
        self.show_banner(message, severity="success")

    def _on_delete(self, tx: Transaction):
        if not ConfirmDialog.for_delete(self, tx):
            return
        result = self._svc.delete(tx.id)
        if not result.ok:
            self.show_banner(result.reason, severity="error")
        self.refresh()

    # ── Banners ─────────────────────────────────────────────────────────────
    def show_banner(self, message: str, severity: str = "info",
                    timeout_ms: int | None = BANNER_TIMEOUT_MS):
        """Show a banner above the cards without hiding a more severe one."""
        for w in self._banner_frame.winfo_children():
            if not isinstance(w, AlertBanner):
                continue
            if w.message == message or banner_replaces(severity, w.severity):
                w.destroy()
        AlertBanner(
            self._banner_frame, message, severity=severity, timeout_ms=timeout_ms,
        ).pack(fill="x", pady=(0, 4))

    def destroy(self):
        if self._refresh_job is not None:
            self.after_cancel(self._refresh_job)
            self._refresh_job = None
        super().destroy()
