# -*- coding: utf-8 -*-
"""Terminal rendering: colours, banner, boxes and status lines."""

from typing import List, Optional


class Colors:
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"

    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    CYAN = "\x1b[36m"


def banner() -> str:
    return (
        f"{Colors.CYAN}╔══════════════════════════════════════════════╗\n"
        f"{Colors.CYAN}║        {Colors.BOLD}W E A K R S A{Colors.RESET}{Colors.CYAN}                         ║\n"
        f"{Colors.CYAN}║  {Colors.RESET}{Colors.YELLOW}Fermat & cycling plaintext recovery{Colors.RESET}{Colors.CYAN}         ║\n"
        f"{Colors.CYAN}╚══════════════════════════════════════════════╝{Colors.RESET}\n"
    )


def box(title: str, lines: List[str], max_width: int = 100) -> str:
    """Frame title and rows; rows wider than max_width are cut with trim()."""
    rows = [trim(l, max_width - 7) if len(l) > max_width - 4 else l for l in (lines or [""])]
    inner = max(len(title) + 2, *(len(r) for r in rows))
    rule = "═" * (inner + 2)
    out = ["╔" + rule + "╗", "║ " + title.center(inner) + " ║", "╠" + rule + "╣"]
    out.extend("║ " + r.ljust(inner) + " ║" for r in rows)
    out.append("╚" + rule + "╝")
    return "\n".join(out)


def one_line(status_ok: Optional[bool], name: str, dt: float, note: str = "") -> str:
    # status_ok: True/False/None (None = SKIP)
    if status_ok is True:
        status = f"{Colors.GREEN}✓ OK{Colors.RESET}"
    elif status_ok is False:
        status = f"{Colors.RED}✗ FAIL{Colors.RESET}"
    else:
        status = f"{Colors.YELLOW}↷ SKIP{Colors.RESET}"
    tail = f" {Colors.DIM}{note}{Colors.RESET}" if note and status_ok is not True else ""
    return f"{Colors.CYAN}→ {Colors.BOLD}{name:<12}{Colors.RESET} {status} {Colors.DIM}[{dt:.2f}s]{Colors.RESET}{tail}"


def trim(text: str, limit: int = 45) -> str:
    text = " ".join(text.split())
    return text if len(text) <= limit else text[:limit] + "..."
