"""Status color map."""

STATUS_COLORS: dict[str, str] = {
    "DEPLOYED": "green",
    "FAILED": "red bold",
    "SUPERSEDED": "dim",
    "DELETED": "dim",
    "DELETING": "magenta",
    "PENDING_INSTALL": "yellow",
    "PENDING_UPGRADE": "yellow",
    "PENDING_ROLLBACK": "yellow",
    "UNKNOWN": "red",
}


def styled_status(status: str) -> str:
    color = STATUS_COLORS.get(status, "white")
    return f"[{color}]{status}[/{color}]"
