"""Tab-stop syntax helpers.

Stops use the ``${n:default}`` form. Inside a default, ``\\``, ``$`` and
``}`` are escaped with a backslash so any value survives the round trip.
"""

import re
from collections.abc import Mapping, Sequence

from env_creator.interfaces.template import PlaceholderMarker

TAB_STOP_PATTERN = re.compile(r"\$\{(?P<index>\d+):(?P<default>(?:\\.|[^\\}])*)\}")

_ESCAPE_PATTERN = re.compile(r"([\\$}])")
_UNESCAPE_PATTERN = re.compile(r"\\([\\$}])")


def escape_default(text: str) -> str:
    """Escape characters that would end or nest a stop."""
    return _ESCAPE_PATTERN.sub(r"\\\1", text)


def unescape_default(text: str) -> str:
    """Undo ``escape_default``."""
    return _UNESCAPE_PATTERN.sub(r"\1", text)


def format_tab_stop(index: int, default: str) -> str:
    """Return the stop annotation for ``default`` (e.g., ``${1:change-me}``)."""
    return f"${{{index}:{escape_default(default)}}}"


def render_snippet(
    snippet: str,
    stops: Sequence[PlaceholderMarker],
    values: Mapping[int, str],
) -> str:
    """Replace every stop of ``snippet`` with its filled value.

    Only the lines the stops were created on are touched, so text that
    merely looks like a stop elsewhere in the template is left alone.

    Args:
        snippet: Annotated template text.
        stops: The stops to replace.
        values: Entered text by stop index. Missing stops keep the default
            written in the stop, unescaped.

    Returns:
        The filled text.
    """
    lines = snippet.split("\n")

    for stop in stops:
        value = values.get(stop.index)

        def _fill(match: re.Match, index: int = stop.index, value: str | None = value) -> str:
            if int(match.group("index")) != index:
                return match.group(0)
            if value is None:
                return unescape_default(match.group("default"))
            return value

        lines[stop.line_number] = TAB_STOP_PATTERN.sub(_fill, lines[stop.line_number])

    return "\n".join(lines)
