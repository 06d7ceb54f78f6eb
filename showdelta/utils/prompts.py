"""Interactive operator prompts."""

from typing import Callable, Optional

NEGATIVE_ANSWERS = {"n", "no"}


def confirm(question: str, ask: Optional[Callable[[str], str]] = None) -> bool:
    """
    Ask a yes/no question that defaults to yes.

    Only an explicit "n" or "no" (any case) declines. An empty answer, any
    other text, or end of input accepts.

    Args:
        question: Question shown to the operator (" [Y/n] " is appended)
        ask: Function reading one answer (default: builtin input)

    Returns:
        True unless the operator declined
    """
    if ask is None:
        ask = input

    try:
        response = ask(f"{question} [Y/n] ")
    except EOFError:
        return True

    return response.strip().lower() not in NEGATIVE_ANSWERS
