"""Structured error collection shared by validators, interactors and results."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Final, Protocol

from interactor.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

BASE: Final[str] = "base"


class ErrorKey(StrEnum):
    """Keys of the default message catalog."""

    INVALID = "invalid"
    BLANK = "blank"
    PRESENT = "present"
    INCLUSION = "inclusion"
    EXCLUSION = "exclusion"
    TOO_LONG = "too_long"
    TOO_SHORT = "too_short"
    WRONG_LENGTH = "wrong_length"
    NOT_A_NUMBER = "not_a_number"
    NOT_AN_INTEGER = "not_an_integer"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL_TO = "greater_than_or_equal_to"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL_TO = "less_than_or_equal_to"
    EQUAL_TO = "equal_to"


DEFAULT_MESSAGES: Final[dict[ErrorKey, str]] = {
    ErrorKey.INVALID: "is invalid",
    ErrorKey.BLANK: "can't be blank",
    ErrorKey.PRESENT: "must be blank",
    ErrorKey.INCLUSION: "is not included in the list",
    ErrorKey.EXCLUSION: "is reserved",
    ErrorKey.TOO_LONG: "is too long (maximum is {count} characters)",
    ErrorKey.TOO_SHORT: "is too short (minimum is {count} characters)",
    ErrorKey.WRONG_LENGTH: "is the wrong length (should be {count} characters)",
    ErrorKey.NOT_A_NUMBER: "is not a number",
    ErrorKey.NOT_AN_INTEGER: "must be an integer",
    ErrorKey.GREATER_THAN: "must be greater than {count}",
    ErrorKey.GREATER_THAN_OR_EQUAL_TO: "must be greater than or equal to {count}",
    ErrorKey.LESS_THAN: "must be less than {count}",
    ErrorKey.LESS_THAN_OR_EQUAL_TO: "must be less than or equal to {count}",
    ErrorKey.EQUAL_TO: "must be equal to {count}",
}


class HasFullMessages(Protocol):
    """Anything that can report flattened, human readable messages."""

    @property
    def full_messages(self) -> list[str]: ...


def humanize(attribute: str) -> str:
    """``target_user`` -> ``Target user``; ``owner_id`` -> ``Owner``."""

    text = attribute.removesuffix("_id").replace("_", " ").strip()
    return text[:1].upper() + text[1:]


def resolve_message(message: ErrorKey | str, **options: object) -> str:
    """Catalog keys become their text; plain strings are kept verbatim."""

    template = DEFAULT_MESSAGES[message] if isinstance(message, ErrorKey) else str(message)
    if not options:
        return template
    try:
        return template.format(**options)
    except (KeyError, IndexError, ValueError):
        return template


class Errors:
    """Ordered mapping of attribute name to the messages recorded against it.

    Object-level messages live under :data:`BASE`. The collection is mutable and
    persists until :meth:`clear` is called.
    """

    BASE = BASE

    __slots__ = ("_messages",)

    def __init__(self, messages: Mapping[str, Iterable[str]] | None = None) -> None:
        self._messages: dict[str, list[str]] = {}
        if messages:
            for attribute, values in messages.items():
                for value in values:
                    self.add(attribute, value)

    def add(
        self,
        attribute: str,
        message: ErrorKey | str = ErrorKey.INVALID,
        **options: object,
    ) -> str:
        """Record ``message`` against ``attribute`` and return the resolved text.

        An :class:`ErrorKey` is looked up in :data:`DEFAULT_MESSAGES` and formatted with
        ``options``; any other string is kept verbatim.
        """

        text = resolve_message(message, **options)
        self._messages.setdefault(attribute, []).append(text)
        return text

    def merge(self, other: Errors) -> None:
        for attribute, message in other:
            self._messages.setdefault(attribute, []).append(message)

    def clear(self) -> None:
        self._messages.clear()

    def copy(self) -> Errors:
        duplicate = Errors()
        duplicate.merge(self)
        return duplicate

    def is_empty(self) -> bool:
        return not self._messages

    @property
    def attributes(self) -> tuple[str, ...]:
        return tuple(self._messages)

    @property
    def messages(self) -> dict[str, list[str]]:
        return {attribute: list(values) for attribute, values in self._messages.items()}

    @property
    def full_messages(self) -> list[str]:
        return [self.full_message(attribute, message) for attribute, message in self]

    def full_messages_for(self, attribute: str) -> list[str]:
        return [self.full_message(attribute, message) for message in self[attribute]]

    def full_message(self, attribute: str, message: str) -> str:
        if attribute == BASE:
            return message
        return get_settings().format_full_message(humanize(attribute), message)

    def to_dict(self) -> dict[str, list[str]]:
        return self.messages

    def __getitem__(self, attribute: str) -> list[str]:
        return list(self._messages.get(attribute, ()))

    def __contains__(self, attribute: object) -> bool:
        return attribute in self._messages

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for attribute, values in self._messages.items():
            for message in values:
                yield attribute, message

    def __len__(self) -> int:
        return sum(len(values) for values in self._messages.values())

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Errors):
            return NotImplemented
        return self._messages == other._messages

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Errors({self._messages!r})"
