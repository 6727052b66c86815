"""Immutable results returned by :meth:`Interactor.call`."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, make_dataclass
from typing import TYPE_CHECKING, Any, Final

from interactor.errors import DeclarationError
from interactor.validation.errors import Errors

if TYPE_CHECKING:
    from collections.abc import Mapping

RESERVED_EXPOSURE_NAMES: Final[frozenset[str]] = frozenset(
    {"errors", "success", "failure", "to_dict"}
)
DEFAULT_RESULT_NAME: Final[str] = "InteractorResult"


@dataclass(frozen=True, slots=True, kw_only=True, repr=False)
class Result:
    """Outcome of one call: exposed values plus the errors collected on the way.

    Concrete result types are generated per interactor type by
    :func:`build_result_class`, adding one field per exposed name.
    """

    errors: Errors = field(default_factory=Errors)

    @property
    def success(self) -> bool:
        return not self.failure

    @property
    def failure(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> dict[str, Any]:
        """Exposed values keyed by exposed name."""

        return {
            item.name: getattr(self, item.name) for item in fields(self) if item.name != "errors"
        }

    def __repr__(self) -> str:
        status = "success" if self.success else "failure"
        payload = ", ".join(f"{name}={value!r}" for name, value in self.to_dict().items())
        return f"{type(self).__name__}({status}{', ' if payload else ''}{payload})"


def check_exposure_names(names: Mapping[str, str]) -> None:
    for exposed, storage_key in names.items():
        if not exposed.isidentifier() or not storage_key.isidentifier():
            raise DeclarationError(f"Exposure names must be identifiers: {exposed!r}")
        if exposed.startswith("_") or exposed in RESERVED_EXPOSURE_NAMES:
            raise DeclarationError(f"Cannot expose {exposed!r}: the name is reserved on results")


def build_result_class(
    owner_name: str | None,
    exposed_names: tuple[str, ...],
    *,
    module: str | None = None,
) -> type[Result]:
    """Generate a frozen result type with a ``None``-defaulted field per exposed name."""

    return make_dataclass(
        f"{owner_name}Result" if owner_name else DEFAULT_RESULT_NAME,
        [(name, Any, field(default=None)) for name in exposed_names],
        bases=(Result,),
        frozen=True,
        slots=True,
        kw_only=True,
        repr=False,
        module=module,
    )
