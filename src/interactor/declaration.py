"""Per-type interactor configuration.

Each interactor class carries one :class:`InteractorConfig`. Declarations never
mutate a config; they build a new one and attach it to the class, so a subclass
can extend its parent's declarations without touching the parent.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING

from interactor.errors import DeclarationError
from interactor.result import Result, build_result_class, check_exposure_names
from interactor.validation.validator import Validator, build_validator_class

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from interactor.validation.rules import Rule


@dataclass(frozen=True, slots=True, kw_only=True)
class InteractorConfig:
    """Declarations of one interactor type.

    ``exposures`` maps exposed name to the instance attribute it is read from.
    ``attribute_names`` are the parameters accepted by ``call``; an empty tuple
    means the type declares no validations.
    """

    owner_name: str | None = None
    module: str | None = None
    exposures: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    attribute_names: tuple[str, ...] = ()
    validator_class: type[Validator] = Validator
    result_class: type[Result] = Result

    @classmethod
    def for_type(cls, owner_name: str | None, module: str | None = None) -> InteractorConfig:
        return cls().derive(owner_name, module)

    @property
    def validation_required(self) -> bool:
        return bool(self.attribute_names)

    def derive(self, owner_name: str | None, module: str | None = None) -> InteractorConfig:
        """Copy of this config owned by a new type with its own validator and result classes."""

        return replace(
            self,
            owner_name=owner_name,
            module=module,
            validator_class=build_validator_class(owner_name, base=self.validator_class),
            result_class=build_result_class(owner_name, tuple(self.exposures), module=module),
        )

    def with_exposures(self, *names: str, **aliases: str) -> InteractorConfig:
        additions = {name: name for name in names} | aliases
        if not additions:
            raise DeclarationError("expose() needs at least one name")
        check_exposure_names(additions)
        exposures = MappingProxyType({**self.exposures, **additions})
        return replace(
            self,
            exposures=exposures,
            result_class=build_result_class(self.owner_name, tuple(exposures), module=self.module),
        )

    def with_validations(self, *names: str, rules: Iterable[Rule] = ()) -> InteractorConfig:
        validator_class = build_validator_class(
            self.owner_name,
            base=self.validator_class,
            attribute_names=names,
            rules=rules,
        )
        return replace(
            self,
            attribute_names=tuple(dict.fromkeys(names)),
            validator_class=validator_class,
        )
