"""Template processor strategy.

Scans environment templates line by line, detects placeholder values with
substring heuristics and turns them into numbered tab stops.
"""

import logging
import re
from collections.abc import Iterable

from env_creator.interfaces.template import (
    Assignment,
    BaseTemplateProcessor,
    ParsedLine,
    Passthrough,
    PlaceholderMarker,
    ProcessedTemplate,
)
from env_creator.strategies.template_engine.snippet import format_tab_stop

logger = logging.getLogger(__name__)

ASSIGNMENT_PATTERN = re.compile(r"^(?P<key>[A-Za-z_][A-Za-z0-9_]*)\s*=\s*(?P<value>.*)$")

EMPTY_QUOTED_VALUES = frozenset({'""', "''"})

DEFAULT_PLACEHOLDER_TOKENS: tuple[str, ...] = (
    "your-",
    "YOUR_",
    "example",
    "EXAMPLE",
    "placeholder",
    "PLACEHOLDER",
    "change-me",
    "CHANGE_ME",
    "xxx",
    "XXX",
)


class TemplateProcessor(BaseTemplateProcessor):
    """Marks placeholder values of a ``KEY=VALUE`` template as tab stops.

    A value is a placeholder when it is empty, an empty quoted string, or
    contains one of the configured tokens. Token checks are case-sensitive
    unless ``case_insensitive`` is set.
    """

    def __init__(
        self,
        placeholder_tokens: Iterable[str] = DEFAULT_PLACEHOLDER_TOKENS,
        case_insensitive: bool = False,
    ) -> None:
        """Initialize the processor.

        Args:
            placeholder_tokens: Substrings that mark a value as a placeholder.
            case_insensitive: Compare tokens and values in lower case.
        """
        self._case_insensitive = case_insensitive
        tokens = tuple(placeholder_tokens)
        if case_insensitive:
            tokens = tuple(dict.fromkeys(token.lower() for token in tokens))
        self._tokens = tokens

    def parse_line(self, line: str) -> ParsedLine:
        """Classify one line as an assignment or passthrough text.

        Args:
            line: A single line without its line terminator.

        Returns:
            Assignment when the line is ``KEY=VALUE``, otherwise Passthrough.
        """
        match = ASSIGNMENT_PATTERN.match(line)
        if match is None:
            return Passthrough(raw=line)
        return Assignment(key=match.group("key"), value=match.group("value"), raw=line)

    def is_placeholder(self, value: str) -> bool:
        """Check whether a value needs to be filled in by the user."""
        if not value or value in EMPTY_QUOTED_VALUES:
            return True
        if self._case_insensitive:
            value = value.lower()
        return any(token in value for token in self._tokens)

    def process(self, content: str) -> ProcessedTemplate:
        """Annotate every placeholder value with a numbered tab stop.

        Stops are numbered from 1 in line order. Lines that are not
        placeholder assignments are copied unchanged.

        Args:
            content: Full template text.

        Returns:
            ProcessedTemplate with the plain copy, the annotated text, the
            stops and the offset just after the first placeholder's ``=``.
        """
        snippet_lines: list[str] = []
        placeholders: list[PlaceholderMarker] = []
        first_value_position: int | None = None
        current_position = 0

        for line_number, line in enumerate(content.split("\n")):
            # CRLF templates: the carriage return is not part of the value
            body, cr = (line[:-1], "\r") if line.endswith("\r") else (line, "")
            parsed = self.parse_line(body)

            if isinstance(parsed, Assignment) and self.is_placeholder(parsed.value):
                index = len(placeholders) + 1
                placeholders.append(
                    PlaceholderMarker(
                        index=index,
                        key=parsed.key,
                        default=parsed.value,
                        line_number=line_number,
                    )
                )
                snippet_lines.append(f"{parsed.key}={format_tab_stop(index, parsed.value)}{cr}")

                if first_value_position is None:
                    equals_end = body.index("=", len(parsed.key)) + 1
                    first_value_position = current_position + equals_end
            else:
                snippet_lines.append(line)

            current_position += len(line) + 1

        logger.info(f"Processed template: {len(placeholders)} placeholder(s)")

        return ProcessedTemplate(
            content=content,
            snippet_content="\n".join(snippet_lines),
            has_placeholder=bool(placeholders),
            first_value_position=first_value_position,
            placeholders=tuple(placeholders),
        )
