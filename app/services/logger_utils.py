from datetime import datetime

# ANSI colour per component
LOG_COLORS = {
    "api_server": "\033[96m",    # cyan
    "deck_service": "\033[38;5;208m",  # orange
    "deck_store": "\033[93m",    # yellow
}
ERROR_COLOR = "\033[91m"
RESET_COLOR = "\033[0m"


def make_logger(component: str, error: bool = False):
    """
    Build a print-based log function for one component.

    Example:
        logger = make_logger("deck_service")
        logger("deck created:", deck_id)
    """
    prefix = f"[{component}]"
    color = ERROR_COLOR if error else LOG_COLORS.get(component, "")

    def log(*args):
        now = datetime.now().strftime("%H:%M:%S")
        print(f"{color}[{now}] {prefix}", *args, RESET_COLOR, flush=True)

    return log
