import customtkinter as ctk

from models.transaction import Transaction
from utils.constants import INCOME_COLOR, EXPENSE_COLOR, category_label
from utils.currency import format_signed


class HistoryPanel(ctk.CTkScrollableFrame):
    """Most recent transactions, newest first, each with a delete button.

    on_delete(tx) is called when a row's delete button is pressed; the
    owner confirms and performs the delete.
    """

    def __init__(self, master, on_delete=None, **kwargs):
        super().__init__(master, label_text="Recent Transactions", **kwargs)
        self._on_delete = on_delete or (lambda tx: None)
        self.grid_columnconfigure(0, weight=1)

    def show(self, transactions: list[Transaction]):
        for w in self.winfo_children():
            w.destroy()

        if not transactions:
            ctk.CTkLabel(
                self,
                text="No transactions yet!\nStart by adding some income or expenses.",
                text_color="gray60",
            ).pack(pady=20)
            return

        for idx, tx in enumerate(transactions):
            bg = ("gray90", "gray20") if idx % 2 == 0 else ("gray86", "gray24")
            self._make_row(tx, bg)

    def _make_row(self, tx: Transaction, bg):
        f = ctk.CTkFrame(self, fg_color=bg, corner_radius=4)
        f.pack(fill="x", pady=1)
        f.grid_columnconfigure(1, weight=1)

        color = INCOME_COLOR if tx.is_income else EXPENSE_COLOR

        ctk.CTkLabel(
            f, text=tx.type.upper(), text_color=color, width=70, anchor="w",
            font=ctk.CTkFont(size=11, weight="bold"),
        ).grid(row=0, column=0, padx=6, pady=(3, 0), sticky="w")
        ctk.CTkLabel(f, text=category_label(tx.category), anchor="w").grid(
            row=0, column=1, padx=4, pady=(3, 0), sticky="ew"
        )
        ctk.CTkLabel(
            f, text=format_signed(tx.signed_amount),
            text_color=color, anchor="e", width=120,
        ).grid(row=0, column=2, padx=6, pady=(3, 0))

        when = tx.date_created.strftime("%Y-%m-%d %H:%M") if tx.date_created else ""
        ctk.CTkLabel(
            f, text=tx.description, anchor="w", text_color=("gray20", "gray80"),
        ).grid(row=1, column=0, columnspan=2, padx=6, sticky="ew")
        ctk.CTkLabel(f, text=when, anchor="e", text_color="gray60").grid(
            row=1, column=2, padx=6, pady=(0, 3)
        )

        ctk.CTkButton(
            f, text="✕", width=28, height=24,
            fg_color="transparent", hover_color=("gray75", "gray30"),
            text_color=EXPENSE_COLOR,
            command=lambda t=tx: self._on_delete(t),
        ).grid(row=0, column=3, rowspan=2, padx=(0, 6))
