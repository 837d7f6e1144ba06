ESC = "\033"

RESET = f"{ESC}[0m"
HEADER = f"{ESC}[1;36m"  # bold cyan
HUNK = f"{ESC}[36m"  # cyan
ADD_FG = f"{ESC}[32m"
DEL_FG = f"{ESC}[31m"
LINE_NUM = f"{ESC}[90m"  # gray
SEPARATOR = f"{ESC}[90m"
EMPTY_BG = f"{ESC}[100m"  # dark gray background


def paint(text: str, color: str, enabled: bool = True) -> str:
    if not enabled or not color:
        return text
    return f"{color}{text}{RESET}"
