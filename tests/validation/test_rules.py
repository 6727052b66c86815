from __future__ import annotations

import re
from typing import Any

import pytest

from interactor import DeclarationError
from interactor.validation import (
    Format,
    Length,
    Numericality,
    TypeCheck,
    Validator,
    build_validator_class,
    is_blank,
    validates,
)
from interactor.validation.rules import Rule


def run(rule: Rule, **values: Any) -> dict[str, list[str]]:
    validator_class = build_validator_class("Example", attribute_names=values, rules=[rule])
    validator = validator_class(None)
    validator.assign_attributes(values)
    validator.is_valid()
    return validator.errors.messages


@pytest.mark.parametrize("value", [None, "", "   ", [], {}, False])
def test_blank_values(value: object) -> None:
    assert is_blank(value)


@pytest.mark.parametrize("value", ["x", 0, [0], True, object()])
def test_present_values(value: object) -> None:
    assert not is_blank(value)


def test_presence() -> None:
    rule = validates("name", presence=True)

    assert run(rule, name="  ") == {"name": ["can't be blank"]}
    assert run(rule, name="Qiitan") == {}


def test_absence() -> None:
    assert run(validates("nickname", absence=True), nickname="x") == {
        "nickname": ["must be blank"]
    }


def test_length_bounds() -> None:
    rule = validates("code", length=Length(minimum=2, maximum=4))

    assert run(rule, code="a") == {"code": ["is too short (minimum is 2 characters)"]}
    assert run(rule, code="abcde") == {"code": ["is too long (maximum is 4 characters)"]}
    assert run(rule, code="abc") == {}


def test_length_exact_from_mapping() -> None:
    rule = validates("pin", length={"is_": 4})

    assert run(rule, pin="123") == {"pin": ["is the wrong length (should be 4 characters)"]}
    assert run(rule, pin=1234) == {}


def test_length_of_none_is_zero() -> None:
    assert run(validates("name", length={"maximum": 50}), name=None) == {}


def test_length_needs_a_bound() -> None:
    with pytest.raises(DeclarationError):
        Length()


@pytest.mark.parametrize("value", [100, "100", "-7"])
def test_integers_pass_only_integer(value: object) -> None:
    assert run(validates("price", numericality={"only_integer": True}), price=value) == {}


@pytest.mark.parametrize("value", [None, "cheap", True, object()])
def test_non_numbers_fail_numericality(value: object) -> None:
    assert run(validates("price", numericality=True), price=value) == {
        "price": ["is not a number"]
    }


@pytest.mark.parametrize("value", [1.5, "1.5", 3.0, "3.0"])
def test_fractions_fail_only_integer(value: object) -> None:
    assert run(validates("price", numericality=Numericality(only_integer=True)), price=value) == {
        "price": ["must be an integer"]
    }


def test_numericality_comparisons() -> None:
    rule = validates("quantity", numericality={"greater_than": 0, "less_than_or_equal_to": 10})

    assert run(rule, quantity=0) == {"quantity": ["must be greater than 0"]}
    assert run(rule, quantity="11") == {"quantity": ["must be less than or equal to 10"]}
    assert run(rule, quantity=10) == {}


def test_presence_and_numericality_both_report_missing_values() -> None:
    rule = validates("price", presence=True, numericality={"only_integer": True})

    assert run(rule, price=None) == {"price": ["can't be blank", "is not a number"]}


def test_format() -> None:
    rule = validates("sku", format=re.compile(r"\A[A-Z]{3}-\d+\Z"))

    assert run(rule, sku="ABC-12") == {}
    assert run(rule, sku="abc") == {"sku": ["is invalid"]}
    assert run(validates("sku", format=Format(r"\d", message="needs a digit")), sku="x") == {
        "sku": ["needs a digit"]
    }


def test_inclusion_and_exclusion() -> None:
    assert run(validates("size", inclusion={"S", "M"}), size="XL") == {
        "size": ["is not included in the list"]
    }
    assert run(validates("login", exclusion=["admin"]), login="admin") == {
        "login": ["is reserved"]
    }


def test_type_check_uses_pydantic_validation() -> None:
    rule = validates("tags", type=list[str])

    assert run(rule, tags=["a", "b"]) == {}
    assert run(rule, tags="a") == {"tags": ["is invalid"]}


def test_strict_type_check() -> None:
    rule = validates("count", type=TypeCheck(int, strict=True))

    assert run(rule, count="3") == {"count": ["is invalid"]}
    assert run(rule, count=3) == {}


def test_allow_none_skips_checks() -> None:
    rule = validates("price", numericality=True, allow_none=True)

    assert run(rule, price=None) == {}
    assert run(rule, price="x") == {"price": ["is not a number"]}


def test_message_overrides_every_check() -> None:
    rule = validates("price", presence=True, numericality=True, message="is required")

    assert run(rule, price=None) == {"price": ["is required", "is required"]}


def test_one_rule_covers_several_attributes() -> None:
    rule = validates("first", "last", presence=True)

    assert run(rule, first=None, last="") == {
        "first": ["can't be blank"],
        "last": ["can't be blank"],
    }


def test_validates_needs_attributes_and_checks() -> None:
    with pytest.raises(DeclarationError):
        validates(presence=True)
    with pytest.raises(DeclarationError):
        validates("name")


def test_plain_functions_are_rules() -> None:
    def must_be_even(validator: Validator) -> None:
        if getattr(validator, "number", 0) % 2:
            validator.errors.add("number", "must be even")

    assert run(must_be_even, number=3) == {"number": ["must be even"]}
    assert run(must_be_even, number=4) == {}


def test_custom_length_message_with_stray_brace_is_kept_verbatim() -> None:
    rule = validates("code", length={"maximum": 3, "message": "{bad"})

    assert run(rule, code="abcd") == {"code": ["{bad"]}


def test_custom_numericality_message_with_stray_brace_is_kept_verbatim() -> None:
    rule = validates("quantity", numericality={"greater_than": 0}, message="must be {positive")

    assert run(rule, quantity=-1) == {"quantity": ["must be {positive"]}
