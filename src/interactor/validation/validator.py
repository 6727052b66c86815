"""Validator blueprints attached to interactor types.

Every interactor type that declares validations owns a validator class: a pydantic
model with one optional field per declared attribute and a tuple of rules. An
interactor instance lazily creates one validator, which keeps a reference to the
interactor for rules that need to look at its state.
"""

from __future__ import annotations

import warnings
from logging import getLogger
from typing import TYPE_CHECKING, Any, ClassVar, Final

from pydantic import BaseModel, ConfigDict, PrivateAttr, create_model

from interactor.errors import DeclarationError
from interactor.validation.errors import Errors

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from interactor.validation.rules import Rule

log = getLogger(__name__)

DEFAULT_VALIDATOR_NAME: Final[str] = "InteractorValidator"


class Validator(BaseModel):
    """Holds declared attribute values and evaluates rules against them."""

    model_config = ConfigDict(
        extra="ignore",
        arbitrary_types_allowed=True,
        validate_assignment=False,
        revalidate_instances="never",
    )

    rules: ClassVar[tuple[Rule, ...]] = ()

    _interactor: Any = PrivateAttr(default=None)
    _errors: Errors = PrivateAttr(default_factory=Errors)

    def __init__(self, interactor: object, /, **data: Any) -> None:
        super().__init__(**data)
        self._interactor = interactor

    @property
    def interactor(self) -> Any:
        """The interactor instance this validator was created for."""

        return self._interactor

    @property
    def errors(self) -> Errors:
        return self._errors

    @classmethod
    def attribute_names(cls) -> tuple[str, ...]:
        return tuple(cls.model_fields)

    def assign_attributes(self, attributes: Mapping[str, Any]) -> None:
        """Set every declared attribute from ``attributes``; missing keys become None."""

        for name in type(self).model_fields:
            setattr(self, name, attributes.get(name))

    def is_valid(self) -> bool:
        self._errors.clear()
        for rule in type(self).rules:
            rule(self)
        if self._errors:
            log.debug(
                "%s found %d error(s) on %s",
                type(self).__name__,
                len(self._errors),
                ", ".join(self._errors.attributes),
            )
        return self._errors.is_empty()


# pydantic's legacy methods (``copy``, ``schema``, ``json``...) may be shadowed by
# fields: field values live in the instance ``__dict__`` and win over methods.
RESERVED_ATTRIBUTE_NAMES: Final[frozenset[str]] = frozenset(
    {"errors", "interactor", "is_valid", "assign_attributes", "attribute_names", "rules"}
)


def check_attribute_names(names: Iterable[str]) -> tuple[str, ...]:
    checked: list[str] = []
    for name in names:
        if not isinstance(name, str) or not name.isidentifier():
            raise DeclarationError(f"Attribute names must be identifiers: {name!r}")
        if name.startswith(("_", "model_")) or name in RESERVED_ATTRIBUTE_NAMES:
            raise DeclarationError(f"Attribute name {name!r} is reserved by the validator")
        if name not in checked:
            checked.append(name)
    return tuple(checked)


def build_validator_class(
    owner_name: str | None,
    *,
    base: type[Validator] = Validator,
    attribute_names: Iterable[str] = (),
    rules: Iterable[Rule] = (),
) -> type[Validator]:
    """Derive a validator class from ``base`` adding fields and rules.

    Fields and rules accumulate across successive derivations.
    """

    names = check_attribute_names(attribute_names)
    fields: dict[str, Any] = {name: (Any, None) for name in names if name not in base.model_fields}
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*shadows an attribute", category=UserWarning)
        klass = create_model(
            f"{owner_name}Validator" if owner_name else DEFAULT_VALIDATOR_NAME,
            __base__=base,
            __module__=base.__module__,
            **fields,
        )
    klass.rules = (*base.rules, *rules)
    return klass
