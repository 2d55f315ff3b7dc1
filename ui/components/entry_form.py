import customtkinter as ctk

from models.transaction import Transaction
from services.ledger_service import LedgerService, can_submit, sanitize_amount_input
from utils.constants import CATEGORIES, INCOME_COLOR, EXPENSE_COLOR


class EntryForm(ctk.CTkFrame):
    """Inline form for recording a new income or expense.

    on_saved(tx) is called after a successful insert; on_failed(message)
    when the store reports a storage failure.
    """

    def __init__(self, master, ledger_service: LedgerService,
                 on_saved=None, on_failed=None, **kwargs):
        super().__init__(master, **kwargs)
        self._svc = ledger_service
        self._on_saved = on_saved or (lambda tx: None)
        self._on_failed = on_failed or (lambda message: None)
        self._label_to_key = {label: key for key, label in CATEGORIES.items()}
        self._cat_labels = list(CATEGORIES.values())

        self.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            self, text="New Transaction",
            font=ctk.CTkFont(size=16, weight="bold"), anchor="w",
        ).grid(row=0, column=0, columnspan=2, padx=16, pady=(16, 8), sticky="ew")

        r = 1
        self._label("Amount (KSh):", r)
        self._amount_var = ctk.StringVar()
        self._amount_entry = ctk.CTkEntry(
            self, textvariable=self._amount_var
        )
        self._amount_entry.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="ew")
        r += 1

        self._label("Description:", r)
        self._desc_var = ctk.StringVar()
        self._desc_entry = ctk.CTkEntry(
            self, textvariable=self._desc_var
        )
        self._desc_entry.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="ew")
        r += 1

        self._label("Category:", r)
        self._cat_var = ctk.StringVar(value=self._cat_labels[0])
        ctk.CTkComboBox(
            self, values=self._cat_labels,
            variable=self._cat_var, state="readonly"
        ).grid(row=r, column=1, padx=(0, 16), pady=4, sticky="ew")
        r += 1

        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color=EXPENSE_COLOR, wraplength=320, anchor="w"
        ).grid(row=r, column=0, columnspan=2, padx=16, pady=(0, 4), sticky="ew")
        r += 1

        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=r, column=0, columnspan=2, padx=16, pady=(4, 16), sticky="ew")
        btn_frame.grid_columnconfigure((0, 1), weight=1)
        self._income_btn = ctk.CTkButton(
            btn_frame, text="Add Income",
            fg_color=INCOME_COLOR, hover_color="#388E3C",
            command=lambda: self._submit(is_income=True),
        )
        self._income_btn.grid(row=0, column=0, padx=(0, 4), sticky="ew")
        self._expense_btn = ctk.CTkButton(
            btn_frame, text="Add Expense",
            fg_color=EXPENSE_COLOR, hover_color="#D32F2F",
            command=lambda: self._submit(is_income=False),
        )
        self._expense_btn.grid(row=0, column=1, padx=(4, 0), sticky="ew")
        ctk.CTkButton(
            btn_frame, text="Clear",
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self.clear,
        ).grid(row=1, column=0, columnspan=2, pady=(8, 0), sticky="ew")

        self._amount_var.trace_add("write", self._on_amount_changed)
        self._desc_var.trace_add("write", lambda *_: self._update_button_states())
        self._update_button_states()

    def _label(self, text, row):
        ctk.CTkLabel(self, text=text).grid(
            row=row, column=0, padx=(16, 8), pady=4, sticky="e"
        )

    def _on_amount_changed(self, *_):
        text = self._amount_var.get()
        cleaned = sanitize_amount_input(text)
        if cleaned != text:
            self._amount_var.set(cleaned)  # re-enters this trace once with clean text
            return
        self._update_button_states()

    def _update_button_states(self):
        state = "normal" if can_submit(self._amount_var.get(), self._desc_var.get()) else "disabled"
        self._income_btn.configure(state=state)
        self._expense_btn.configure(state=state)

    def clear(self):
        self._amount_var.set("")
        self._desc_var.set("")
        self._cat_var.set(self._cat_labels[0])
        self._error_var.set("")
        self._amount_entry.focus_set()

    def _submit(self, is_income: bool):
        self._error_var.set("")
        category = self._label_to_key.get(self._cat_var.get(), "other")
        try:
            result = self._svc.add_transaction(
                self._amount_var.get(), self._desc_var.get(), category, is_income
            )
        except ValueError as e:
            self._error_var.set(str(e))
            if "description" in str(e):
                self._desc_entry.focus_set()
            else:
                self._amount_entry.focus_set()
            return

        if not result.ok:
            self._on_failed(result.reason)
            return
        tx: Transaction = result.value
        self.clear()
        self._on_saved(tx)
