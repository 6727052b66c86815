"""The interactor base class and its call pipeline.

Example::

    @validations(
        "name",
        "price",
        rules=[
            validates("name", presence=True, length={"maximum": 50}),
            validates("price", presence=True, numericality={"only_integer": True}),
        ],
    )
    @expose("product")
    class CreateProduct(Interactor):
        def __init__(self, repository):
            self.repository = repository

        def execute(self, **attributes):
            self.product = self.repository.create(**attributes)

    result = CreateProduct(repository).call({"name": "Qiitan", "price": 100})
    assert result.success
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import cached_property
from logging import getLogger
from typing import TYPE_CHECKING, Any, ClassVar, Self

from interactor.declaration import InteractorConfig
from interactor.errors import DeclarationError, InteractorUsageError
from interactor.sanitizer import sanitize
from interactor.validation.errors import BASE

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from interactor.result import Result
    from interactor.validation.errors import Errors, HasFullMessages
    from interactor.validation.rules import Rule
    from interactor.validation.validator import Validator

log = getLogger(__name__)


class Interactor:
    """One business operation behind a uniform ``call`` contract.

    Subclasses implement :meth:`execute`. :meth:`call` filters and validates the
    parameters, runs ``execute`` only when validation passed, and returns a
    :class:`~interactor.result.Result` exposing the declared attributes.

    One instance must not be called concurrently: its validator and error
    collection are shared between calls.
    """

    __interactor_config__: ClassVar[InteractorConfig] = InteractorConfig.for_type(
        "Interactor", __name__
    )

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__interactor_config__ = cls.__interactor_config__.derive(
            cls.__name__ or None, cls.__module__
        )

    # declarations

    @classmethod
    def expose(cls, *names: str, **aliases: str) -> type[Self]:
        """Expose instance attributes on the result of :meth:`call`.

        ``expose("product")`` reads ``self.product``; ``expose(total="_total")``
        exposes ``self._total`` as ``result.total``. Re-exposing a name replaces it.
        """

        for key in (*names, *aliases.values()):
            if hasattr(Interactor, key):
                raise DeclarationError(f"Cannot expose {key!r}: it is an Interactor member")
        cls.__interactor_config__ = cls.__interactor_config__.with_exposures(*names, **aliases)
        return cls

    @classmethod
    def validations(cls, *names: str, rules: Iterable[Rule] = ()) -> type[Self]:
        """Declare the accepted parameters and the rules checked before :meth:`execute`.

        A later declaration replaces the accepted parameter list; rules accumulate.
        """

        cls.__interactor_config__ = cls.__interactor_config__.with_validations(
            *names, rules=tuple(rules)
        )
        return cls

    @classmethod
    def validation_required(cls) -> bool:
        return cls.__interactor_config__.validation_required

    @classmethod
    def validation_attribute_names(cls) -> tuple[str, ...]:
        return cls.__interactor_config__.attribute_names

    @classmethod
    def exposures(cls) -> Mapping[str, str]:
        return cls.__interactor_config__.exposures

    @classmethod
    def validator_class(cls) -> type[Validator]:
        return cls.__interactor_config__.validator_class

    @classmethod
    def result_class(cls) -> type[Result]:
        return cls.__interactor_config__.result_class

    # instance state

    @cached_property
    def validator(self) -> Validator:
        return self.validator_class()(self)

    @property
    def errors(self) -> Errors:
        return self.validator.errors

    # pipeline

    def call(self, *args: Any, **kwargs: Any) -> Result:
        params = extract_params(args, kwargs)
        self.errors.clear()

        if not params and not self.validation_required():
            log.debug("%s: no parameters and no validations, executing", type(self).__name__)
            self.execute()
        else:
            params = self.sanitize(params)
            errors = self.validate(params)
            if errors:
                log.debug("%s: rejected with %d error(s)", type(self).__name__, len(errors))
            else:
                log.debug("%s: executing with %s", type(self).__name__, list(params))
                self.execute(**params)

        return self.build_result()

    def __call__(self, *args: Any, **kwargs: Any) -> Result:
        return self.call(*args, **kwargs)

    def execute(self, **params: Any) -> None:
        """Run the business operation. Subclasses must override this."""

        raise NotImplementedError

    def sanitize(self, params: Mapping[str, Any]) -> Mapping[str, Any]:
        return sanitize(params, self.validation_attribute_names())

    def validate(self, params: Mapping[str, Any]) -> Errors:
        if self.validation_required():
            self.validator.assign_attributes(params)
            self.validator.is_valid()
        return self.validator.errors

    def merge_errors(self, additional_errors: HasFullMessages) -> None:
        """Add every full message of ``additional_errors`` to this call's base errors."""

        for message in additional_errors.full_messages:
            self.errors.add(BASE, message)

    def build_result(self) -> Result:
        config = type(self).__interactor_config__
        state = vars(self)
        payload = {name: state.get(key) for name, key in config.exposures.items()}
        return config.result_class(errors=self.errors.copy(), **payload)


def extract_params(args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> Mapping[str, Any]:
    """Accept nothing, one mapping, or keyword arguments, and return them as a mapping."""

    if len(args) > 1:
        raise InteractorUsageError(f"call() takes at most one mapping, got {len(args)} arguments")
    if not args:
        return kwargs
    if kwargs:
        raise InteractorUsageError("call() takes either a mapping or keyword arguments, not both")
    (params,) = args
    if not isinstance(params, Mapping):
        raise InteractorUsageError(f"call() expects a mapping, got {type(params).__name__}")
    return params


def expose[TInteractor: Interactor](
    *names: str, **aliases: str
) -> Callable[[type[TInteractor]], type[TInteractor]]:
    """Class decorator form of :meth:`Interactor.expose`."""

    def decorate(cls: type[TInteractor]) -> type[TInteractor]:
        return cls.expose(*names, **aliases)

    return decorate


def validations[TInteractor: Interactor](
    *names: str, rules: Iterable[Rule] = ()
) -> Callable[[type[TInteractor]], type[TInteractor]]:
    """Class decorator form of :meth:`Interactor.validations`."""

    rules = tuple(rules)

    def decorate(cls: type[TInteractor]) -> type[TInteractor]:
        return cls.validations(*names, rules=rules)

    return decorate
