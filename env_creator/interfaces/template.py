"""Template processing interfaces.

Defines the line model produced while scanning an environment template and
the abstract base class for template processors.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Assignment:
    """A ``KEY=VALUE`` line.

    Attributes:
        key: The variable name, with its original casing.
        value: Everything after the ``=`` and any whitespace following it.
        raw: The full line text.
    """

    key: str
    value: str
    raw: str


@dataclass(frozen=True)
class Passthrough:
    """Any line that is not an assignment (comments, blanks, exports...)."""

    raw: str


ParsedLine = Assignment | Passthrough


@dataclass(frozen=True)
class PlaceholderMarker:
    """A tab stop created for a placeholder value.

    Attributes:
        index: 1-based stop number, contiguous and increasing in file order.
        key: Variable name the stop belongs to.
        default: The original value, pre-filled as the stop's default text.
        line_number: Zero-based line of the stop in the template.
    """

    index: int
    key: str
    default: str
    line_number: int


@dataclass(frozen=True)
class ProcessedTemplate:
    """Result of processing a template.

    Attributes:
        content: The template text, unmodified. This is what gets written.
        snippet_content: The text with ``${n:default}`` stops inserted.
        has_placeholder: Whether at least one placeholder was found.
        first_value_position: Offset in ``content`` just after the first
            placeholder's ``KEY=``, or None when there is no placeholder.
        placeholders: The stops in index order.
    """

    content: str
    snippet_content: str
    has_placeholder: bool
    first_value_position: int | None = None
    placeholders: tuple[PlaceholderMarker, ...] = ()


class BaseTemplateProcessor(ABC):
    """Abstract base class for template processing strategies.

    Classifies template lines and marks placeholder values as tab stops.
    """

    @abstractmethod
    def parse_line(self, line: str) -> ParsedLine:
        """Classify a single template line.

        Args:
            line: One line without its ``\\n`` terminator.

        Returns:
            An Assignment or a Passthrough.
        """

    @abstractmethod
    def is_placeholder(self, value: str) -> bool:
        """Return True if ``value`` looks like a stand-in the user must replace."""

    @abstractmethod
    def process(self, content: str) -> ProcessedTemplate:
        """Process a full template.

        Args:
            content: Raw template text.

        Returns:
            The ProcessedTemplate for ``content``.
        """
