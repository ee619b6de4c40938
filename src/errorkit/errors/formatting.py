"""Text renderings of an AppError for logs and the console."""

import json
from typing import Any

from errorkit.errors.app_error import AppError
from errorkit.errors.messages import get_user_friendly_message
from errorkit.errors.policy import is_retryable_error
from errorkit.ui.theme import Symbols

STACK_LINES = 3


def _render_context(context: Any) -> str:
    if context is None:
        return "null"
    try:
        return json.dumps(context, indent=2, default=str, ensure_ascii=False)
    except Exception:
        # Circular references, non-string keys, broken __str__, deep nesting
        try:
            return repr(context)
        except Exception:
            return f"<{type(context).__name__}>"


def _render_stack(trace: Any) -> str:
    if not trace:
        return "none"
    return "\n".join(str(trace).splitlines()[:STACK_LINES])


def format_error_for_logging(error: AppError) -> str:
    """Format an error as a labelled multi-line block for log output.

    Lines appear in a fixed order: timestamp and kind, Message, Status,
    Operational, Context, Stack.
    """
    timestamp = error.timestamp.isoformat()
    kind = getattr(error.kind, "value", error.kind)
    operational = "true" if error.is_operational else "false"

    block = "\n".join(
        [
            f"[{timestamp}] {kind}",
            f"Message: {error.message}",
            f"Status: {error.status_code}",
            f"Operational: {operational}",
            f"Context: {_render_context(error.context)}",
            f"Stack: {_render_stack(error.trace)}",
        ]
    )
    return block.strip()


def format_error_for_display(error: AppError) -> str:
    """Format an error for Rich console display."""
    lines = [f"[error]{Symbols.CROSS} {get_user_friendly_message(error)}[/error]"]

    if is_retryable_error(error):
        lines.append("[muted]Safe to retry in a moment[/muted]")

    kind = getattr(error.kind, "value", error.kind)
    lines.append(f"[muted]Code: {kind}[/muted]")
    return "\n".join(lines)
