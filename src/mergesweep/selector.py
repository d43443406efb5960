"""Interactive multi-select prompt for branches."""

import logging
import re
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.text import Text

logger = logging.getLogger(__name__)

PROMPT = "Numbers/ranges to toggle (all, none), Enter to confirm"

_RANGE = re.compile(r"^(\d+)-(\d+)$")


class SelectionError(ValueError):
    """Unusable answer at the selection prompt."""


def parse_toggles(answer: str, count: int) -> list[int]:
    """Parse a prompt answer into zero-based indices to toggle.

    Accepts numbers and ``a-b`` ranges separated by spaces or commas,
    numbered from 1.

    Raises:
        SelectionError: If a token is not a number or range, or is out of range
    """
    indices = []
    for token in answer.replace(",", " ").split():
        match = _RANGE.match(token)
        if match:
            start, end = int(match.group(1)), int(match.group(2))
            if start > end:
                start, end = end, start
        elif token.isdecimal():
            start = end = int(token)
        else:
            raise SelectionError(f"Not a number or range: {token}")
        if start < 1 or end > count:
            raise SelectionError(f"Out of range: {token} (1-{count})")
        indices.extend(range(start - 1, end))
    return indices


def render(branches: Sequence[str], selected: Sequence[bool], console: Console) -> None:
    """Print the numbered checklist."""
    width = len(str(len(branches)))
    for number, (branch, checked) in enumerate(zip(branches, selected), start=1):
        line = Text("  ")
        line.append("[x]" if checked else "[ ]", style="green" if checked else "dim")
        line.append(f" {number:>{width}}. ")
        line.append(branch, style="cyan" if checked else "dim")
        console.print(line)


def select_branches(branches: Sequence[str], console: Console) -> list[int]:
    """Let the user pick which branches to delete.

    Every branch starts selected. Each answer toggles the given items and
    redraws the list; an empty answer confirms. End of input cancels.

    Args:
        branches: Candidate branch names
        console: Console to draw on and read answers from

    Returns:
        Indices of the confirmed branches in ascending order
    """
    selected = [True] * len(branches)
    while True:
        render(branches, selected, console)
        try:
            answer = Prompt.ask(PROMPT, console=console, default="", show_default=False)
        except EOFError:
            logger.debug("Input closed at selection prompt")
            return []
        answer = answer.strip().lower()
        if not answer:
            break
        if answer == "all":
            selected = [True] * len(branches)
            continue
        if answer == "none":
            selected = [False] * len(branches)
            continue
        try:
            toggles = parse_toggles(answer, len(branches))
        except SelectionError as err:
            console.print(f"[red]{escape(str(err))}[/red]")
            continue
        for index in toggles:
            selected[index] = not selected[index]
        console.print()
    return [index for index, checked in enumerate(selected) if checked]
