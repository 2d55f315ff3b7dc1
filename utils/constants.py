APP_NAME = "Personal Ledger"
APP_WIDTH = 1200
APP_HEIGHT = 800
CURRENCY_SYMBOL = "KSh "
RECENT_LIMIT = 10
BANNER_TIMEOUT_MS = 2_000

INCOME_COLOR = "#4CAF50"
EXPENSE_COLOR = "#F44336"
BALANCE_COLOR = "#2196F3"

# key -> display label; the key is what gets stored
CATEGORIES = {
    "food":          "Food & Dining",
    "transport":     "Transportation",
    "housing":       "Housing & Rent",
    "healthcare":    "Healthcare",
    "entertainment": "Entertainment",
    "shopping":      "Shopping",
    "business":      "Business",
    "other":         "Other",
}

SEVERITY_COLORS = {
    "error":   "#F44336",
    "warning": "#FF9800",
    "info":    "#2196F3",
    "success": "#4CAF50",
}

# higher wins: a banner never replaces one that outranks it
SEVERITY_RANK = {
    "info":    0,
    "success": 1,
    "warning": 2,
    "error":   3,
}


def category_label(key: str) -> str:
    """Display label for a stored category key; unknown keys pass through."""
    return CATEGORIES.get(key, key)


def balance_color(balance) -> str:
    if balance > 0:
        return INCOME_COLOR
    if balance < 0:
        return EXPENSE_COLOR
    return BALANCE_COLOR


def banner_replaces(new_severity: str, old_severity: str) -> bool:
    """Whether a new banner clears an existing one.

    Errors stack with each other; everything else replaces banners of equal
    or lower rank.
    """
    new_rank = SEVERITY_RANK.get(new_severity, 0)
    old_rank = SEVERITY_RANK.get(old_severity, 0)
    if new_rank == old_rank:
        return new_severity != "error"
    return new_rank > old_rank
