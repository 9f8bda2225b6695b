"""
Declarative Field Rules
========================

Rules are plain data: a predicate paired with the message reported when
the predicate fails. A :class:`FormSchema` lists the rules of every field
in order, plus the cross-field refinements that run afterwards, and
:func:`run_schema` is the single executor for all forms.

Execution per field:

- the raw value is stripped first when the field asks for it;
- rules run in order, every failing rule contributes its message;
- a failing *gate* rule stops the remaining rules of that field, which is
  how "required" keeps an empty value from also failing "min length".

Cross-field refinements see the cleaned values of the whole form and run
only when their target field has no errors of its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence


@dataclass(frozen=True, slots=True)
class FieldRule:
    """A single named constraint on one field.

    Attributes:
        name: Stable identifier (``"required"``, ``"min_length"`` ...).
        message: Human-readable message reported on failure.
        check: Returns ``True`` when the value satisfies the rule.
        gate: Stop evaluating the field's remaining rules on failure.
    """

    name: str
    message: str
    check: Callable[[str], bool]
    gate: bool = True

    def passes(self, value: str) -> bool:
        return self.check(value)


@dataclass(frozen=True, slots=True)
class FieldSchema:
    """Ordered rules for one form field."""

    name: str
    rules: tuple[FieldRule, ...] = ()
    strip: bool = False

    def clean(self, value: str) -> str:
        return value.strip() if self.strip else value

    def errors_for(self, value: str) -> list[str]:
        messages: list[str] = []
        for rule in self.rules:
            if rule.passes(value):
                continue
            messages.append(rule.message)
            if rule.gate:
                break
        return messages


@dataclass(frozen=True, slots=True)
class CrossFieldRule:
    """A check spanning several fields; its error attaches to ``target``."""

    name: str
    target: str
    message: str
    check: Callable[[Mapping[str, Any]], bool]


@dataclass(frozen=True, slots=True)
class FormSchema:
    """Field schemas in display order plus cross-field refinements."""

    fields: tuple[FieldSchema, ...]
    refinements: tuple[CrossFieldRule, ...] = field(default_factory=tuple)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)


def run_schema(
    schema: FormSchema, raw: Mapping[str, Any]
) -> tuple[dict[str, Any], dict[str, list[str]]]:
    """Apply *schema* to the *raw* field values.

    Values for names not covered by a field schema (flags such as
    ``rememberMe``) are passed through untouched.

    Returns:
        ``(cleaned_values, errors)``; *errors* maps field names to
        non-empty message lists and preserves field order.
    """
    cleaned: dict[str, Any] = dict(raw)
    errors: dict[str, list[str]] = {}

    for field_schema in schema.fields:
        value = field_schema.clean(raw.get(field_schema.name, ""))
        cleaned[field_schema.name] = value
        messages = field_schema.errors_for(value)
        if messages:
            errors[field_schema.name] = messages

    for refinement in schema.refinements:
        if refinement.target in errors:
            continue
        if not refinement.check(cleaned):
            errors[refinement.target] = [refinement.message]

    ordered = {
        name: errors[name] for name in schema.field_names if name in errors
    }
    return cleaned, ordered


# ===================================================================== #
#  Rule factories
# ===================================================================== #


def required(message: str) -> FieldRule:
    return FieldRule("required", message, lambda v: len(v) > 0)


def min_length(limit: int, message: str) -> FieldRule:
    return FieldRule("min_length", message, lambda v: len(v) >= limit)


def max_length(limit: int, message: str) -> FieldRule:
    return FieldRule("max_length", message, lambda v: len(v) <= limit)


def matches(name: str, pattern: Any, message: str, *, gate: bool = True) -> FieldRule:
    """Rule satisfied when the whole value matches compiled *pattern*."""
    return FieldRule(name, message, lambda v: pattern.fullmatch(v) is not None, gate)


def contains_any(
    name: str, characters: str, message: str, *, gate: bool = False
) -> FieldRule:
    """Rule satisfied when at least one of *characters* occurs in the value."""
    charset = frozenset(characters)
    return FieldRule(name, message, lambda v: any(c in charset for c in v), gate)


def excludes(name: str, pattern: Any, message: str, *, gate: bool = False) -> FieldRule:
    """Rule satisfied when compiled *pattern* occurs nowhere in the value."""
    return FieldRule(name, message, lambda v: pattern.search(v) is None, gate)


def run_rules(rules: Sequence[FieldRule], value: str) -> list[str]:
    """Evaluate an ad-hoc rule list against one value."""
    return FieldSchema("value", tuple(rules)).errors_for(value)
