"""Attribute rules applied by validators.

A rule is any callable taking the validator instance. It reads the validator's
fields (and ``validator.interactor`` for rules that need the owning interactor)
and records problems through ``validator.errors.add``::

    def must_not_follow_twice(validator):
        if validator.interactor.user.follows(validator.target_user):
            validator.errors.add("target_user", "is already followed")

:func:`validates` builds the common per-attribute rules.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Collection, Mapping, Sized
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Any, Protocol

from pydantic import TypeAdapter, ValidationError

from interactor.errors import DeclarationError
from interactor.validation.errors import ErrorKey

if TYPE_CHECKING:
    from interactor.validation.validator import Validator

log = getLogger(__name__)

type Rule = Callable[[Validator], None]

_INTEGER_PATTERN = re.compile(r"\A[+-]?\d+\Z")
_FLOAT_ADAPTER: TypeAdapter[float] = TypeAdapter(float)


class Check(Protocol):
    """A single check on one attribute value."""

    def check(self, validator: Validator, attribute: str, value: object) -> None: ...


def is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return value is False


@dataclass(frozen=True, slots=True)
class Presence:
    message: ErrorKey | str = ErrorKey.BLANK

    def check(self, validator: Validator, attribute: str, value: object) -> None:
        if is_blank(value):
            validator.errors.add(attribute, self.message)


@dataclass(frozen=True, slots=True)
class Absence:
    message: ErrorKey | str = ErrorKey.PRESENT

    def check(self, validator: Validator, attribute: str, value: object) -> None:
        if not is_blank(value):
            validator.errors.add(attribute, self.message)


@dataclass(frozen=True, slots=True)
class Length:
    minimum: int | None = None
    maximum: int | None = None
    is_: int | None = None
    message: ErrorKey | str | None = None

    def __post_init__(self) -> None:
        if self.minimum is None and self.maximum is None and self.is_ is None:
            raise DeclarationError("Length needs at least one of minimum, maximum or is_")

    def check(self, validator: Validator, attribute: str, value: object) -> None:
        size = _length_of(value)
        if self.is_ is not None and size != self.is_:
            validator.errors.add(attribute, self.message or ErrorKey.WRONG_LENGTH, count=self.is_)
        if self.minimum is not None and size < self.minimum:
            validator.errors.add(attribute, self.message or ErrorKey.TOO_SHORT, count=self.minimum)
        if self.maximum is not None and size > self.maximum:
            validator.errors.add(attribute, self.message or ErrorKey.TOO_LONG, count=self.maximum)


def _length_of(value: object) -> int:
    if value is None:
        return 0
    if isinstance(value, Sized):
        return len(value)
    return len(str(value))


_COMPARISONS: dict[str, Callable[[float, float], bool]] = {
    "greater_than": lambda number, bound: number > bound,
    "greater_than_or_equal_to": lambda number, bound: number >= bound,
    "less_than": lambda number, bound: number < bound,
    "less_than_or_equal_to": lambda number, bound: number <= bound,
    "equal_to": lambda number, bound: number == bound,
}


@dataclass(frozen=True, slots=True)
class Numericality:
    only_integer: bool = False
    greater_than: float | None = None
    greater_than_or_equal_to: float | None = None
    less_than: float | None = None
    less_than_or_equal_to: float | None = None
    equal_to: float | None = None
    message: ErrorKey | str | None = None

    def check(self, validator: Validator, attribute: str, value: object) -> None:
        number = _parse_number(value)
        if number is None:
            validator.errors.add(attribute, self.message or ErrorKey.NOT_A_NUMBER)
            return
        if self.only_integer and not _is_integer(value):
            validator.errors.add(attribute, self.message or ErrorKey.NOT_AN_INTEGER)
            return
        for option, compare in _COMPARISONS.items():
            bound = getattr(self, option)
            if bound is not None and not compare(number, bound):
                validator.errors.add(attribute, self.message or ErrorKey(option), count=bound)


def _parse_number(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return _FLOAT_ADAPTER.validate_python(value)
    except ValidationError:
        return None


def _is_integer(value: object) -> bool:
    if isinstance(value, str):
        return _INTEGER_PATTERN.match(value.strip()) is not None
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Format:
    pattern: re.Pattern[str] | str
    message: ErrorKey | str = ErrorKey.INVALID

    def check(self, validator: Validator, attribute: str, value: object) -> None:
        text = "" if value is None else str(value)
        if re.search(self.pattern, text) is None:
            validator.errors.add(attribute, self.message)


@dataclass(frozen=True, slots=True)
class Inclusion:
    choices: Collection[object]
    message: ErrorKey | str = ErrorKey.INCLUSION

    def check(self, validator: Validator, attribute: str, value: object) -> None:
        if value not in self.choices:
            validator.errors.add(attribute, self.message)


@dataclass(frozen=True, slots=True)
class Exclusion:
    choices: Collection[object]
    message: ErrorKey | str = ErrorKey.EXCLUSION

    def check(self, validator: Validator, attribute: str, value: object) -> None:
        if value in self.choices:
            validator.errors.add(attribute, self.message)


@dataclass(frozen=True)
class TypeCheck:
    """Accept values that pydantic can validate against ``annotation``."""

    annotation: Any
    strict: bool = False
    message: ErrorKey | str = ErrorKey.INVALID
    _adapter: TypeAdapter[Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_adapter", TypeAdapter(self.annotation))

    def check(self, validator: Validator, attribute: str, value: object) -> None:
        try:
            self._adapter.validate_python(value, strict=self.strict)
        except ValidationError as exc:
            log.debug("%s failed type check: %s", attribute, exc.errors(include_url=False))
            validator.errors.add(attribute, self.message)


@dataclass(frozen=True, slots=True)
class AttributeRule:
    """Runs ``checks`` against each of ``attributes`` in declaration order."""

    attributes: tuple[str, ...]
    checks: tuple[Check, ...]
    allow_none: bool = False

    def __call__(self, validator: Validator) -> None:
        for attribute in self.attributes:
            value = getattr(validator, attribute, None)
            if value is None and self.allow_none:
                continue
            for check in self.checks:
                check.check(validator, attribute, value)


def validates(  # noqa: PLR0913
    *attributes: str,
    presence: bool = False,
    absence: bool = False,
    length: Length | Mapping[str, Any] | None = None,
    numericality: Numericality | Mapping[str, Any] | bool | None = None,
    format: Format | re.Pattern[str] | str | None = None,  # noqa: A002
    inclusion: Inclusion | Collection[object] | None = None,
    exclusion: Exclusion | Collection[object] | None = None,
    type: TypeCheck | Any = None,  # noqa: A002
    allow_none: bool = False,
    message: ErrorKey | str | None = None,
) -> AttributeRule:
    """Build a rule applying the requested checks to every named attribute.

    Each failing check records its own message, so ``presence=True`` together with
    ``numericality=True`` reports both "can't be blank" and "is not a number" for a
    missing value. ``message`` replaces the default text of every check.
    """

    if not attributes:
        raise DeclarationError("validates() needs at least one attribute name")

    overrides: dict[str, Any] = {} if message is None else {"message": message}
    checks: list[Check] = []
    if presence:
        checks.append(Presence(**overrides))
    if absence:
        checks.append(Absence(**overrides))
    if length is not None:
        checks.append(_coerce(Length, length, overrides))
    if numericality is not None and numericality is not False:
        options = {} if numericality is True else numericality
        checks.append(_coerce(Numericality, options, overrides))
    if format is not None:
        checks.append(
            format if isinstance(format, Format) else Format(pattern=format, **overrides)
        )
    if inclusion is not None:
        checks.append(
            inclusion
            if isinstance(inclusion, Inclusion)
            else Inclusion(choices=inclusion, **overrides)
        )
    if exclusion is not None:
        checks.append(
            exclusion
            if isinstance(exclusion, Exclusion)
            else Exclusion(choices=exclusion, **overrides)
        )
    if type is not None:
        checks.append(type if isinstance(type, TypeCheck) else TypeCheck(type, **overrides))

    if not checks:
        raise DeclarationError(f"validates({', '.join(attributes)}) declares no checks")

    return AttributeRule(attributes=attributes, checks=tuple(checks), allow_none=allow_none)


def _coerce[TCheck: Check](
    check_type: type[TCheck],
    options: TCheck | Mapping[str, Any],
    overrides: Mapping[str, Any],
) -> TCheck:
    if isinstance(options, check_type):
        return options
    return check_type(**{**overrides, **dict(options)})  # type: ignore[arg-type]
