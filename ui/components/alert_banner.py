import customtkinter as ctk

from utils.constants import SEVERITY_COLORS


class AlertBanner(ctk.CTkFrame):
    """A dismissible colored banner for non-blocking notifications.

    Pass timeout_ms to have it remove itself, as the save confirmations do.
    """

    def __init__(self, master, message: str, severity: str = "info",
                 timeout_ms: int | None = None, **kwargs):
        color = SEVERITY_COLORS.get(severity, SEVERITY_COLORS["info"])
        super().__init__(master, fg_color=color, corner_radius=6, **kwargs)
        self.severity = severity
        self.message = message
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self, text=message, text_color="white",
            anchor="w", padx=10, pady=6
        ).grid(row=0, column=0, sticky="ew")

        ctk.CTkButton(
            self, text="✕", width=28, height=24,
            fg_color="transparent",
            hover_color="#ffffff",
            text_color="white",
            command=self.destroy,
        ).grid(row=0, column=1, padx=(0, 4))

        if timeout_ms:
            self.after(timeout_ms, self._expire)

    def _expire(self):
        if self.winfo_exists():
            self.destroy()
