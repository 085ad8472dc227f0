"""Request field validation for DRF view actions.

A rule set is an ordered tuple of ``Rule`` objects.  ``run_rules`` applies
every rule, in order, and collects one error per failing rule: a field
with several broken rules contributes several entries, and the first
failure never hides the ones after it.

``handle_input_errors`` attaches a rule set to a view action and answers
``400 {"errors": [...]}`` before the action runs when anything failed.

Each error entry looks like::

    {"type": "field", "value": "abc", "msg": "...", "path": "price", "location": "body"}

``value`` is left out when the field was absent from the request.
"""

from __future__ import annotations

import functools
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Iterable, List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

logger = structlog.get_logger(__name__)

PARAMS = "params"
BODY = "body"

_MISSING = object()

_INT_RE = re.compile(r"^[-+]?[0-9]+$")
_NUMERIC_RE = re.compile(r"^[+-]?([0-9]*[.])?[0-9]+$")
_BOOLEAN_TEXT = frozenset({"true", "false", "1", "0"})
# Decimal literals and radix-prefixed integers a loose numeric comparison accepts
_NUMBER_LITERAL_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
_RADIX_LITERAL_RE = re.compile(r"^0[xXoObB][0-9a-fA-F]+$")

FieldError = Dict[str, Any]


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def _float_text(value: float) -> str:
    """Shortest text for a float, integral values written out up to 1e21."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(repr(value)), "f")
    return re.sub(r"e([+-])0*(\d)", r"e\1\2", repr(value))


def _as_text(value: Any) -> str:
    """Text form used by the string predicates (missing and null are empty)."""
    if value is _MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_text(value)
    return str(value)


def is_int(value: Any) -> bool:
    return bool(_INT_RE.match(_as_text(value)))


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return bool(_NUMERIC_RE.match(_as_text(value)))


def not_empty(value: Any) -> bool:
    return _as_text(value) != ""


def is_boolean(value: Any) -> bool:
    return _as_text(value) in _BOOLEAN_TEXT


def is_positive(value: Any) -> bool:
    """Loose ``value > 0``: booleans count as 0/1 and numeric text is parsed."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return value > 0
    if not isinstance(value, str):
        return False
    text = value.strip()
    if text in ("Infinity", "+Infinity"):
        return True
    if _RADIX_LITERAL_RE.match(text):
        try:
            return int(text, 0) > 0
        except ValueError:
            return False
    if _NUMBER_LITERAL_RE.match(text):
        try:
            return Decimal(text) > 0
        except InvalidOperation:
            return False
    return False


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rule:
    """One predicate applied to one request field."""

    location: str
    field: str
    check: Callable[[Any], bool]
    message: str

    def apply(self, source: Mapping) -> Optional[FieldError]:
        value = source.get(self.field, _MISSING)
        if self.check(value):
            return None
        error: FieldError = {"type": "field"}
        if value is not _MISSING:
            error["value"] = value
        error.update(msg=self.message, path=self.field, location=self.location)
        return error


def param(field: str, check: Callable[[Any], bool], message: str) -> Rule:
    return Rule(PARAMS, field, check, message)


def body(field: str, check: Callable[[Any], bool], message: str) -> Rule:
    return Rule(BODY, field, check, message)


def run_rules(
    rules: Iterable[Rule],
    params: Optional[Mapping] = None,
    data: Any = None,
) -> List[FieldError]:
    """Evaluate every rule and return the failures in rule order."""
    sources = {
        PARAMS: params if isinstance(params, Mapping) else {},
        BODY: data if isinstance(data, Mapping) else {},
    }
    errors = []
    for rule in rules:
        error = rule.apply(sources[rule.location])
        if error is not None:
            errors.append(error)
    return errors


# ---------------------------------------------------------------------------
# Error responder
# ---------------------------------------------------------------------------


def input_errors_response(errors: List[FieldError]) -> Optional[Response]:
    """``400 {"errors": [...]}`` for a non-empty error list, else ``None``."""
    if not errors:
        return None
    return Response({"errors": errors}, status=status.HTTP_400_BAD_REQUEST)


def errors_from_pydantic(exc: PydanticValidationError) -> List[FieldError]:
    """Convert DTO validation failures into body field errors."""
    errors = []
    for err in exc.errors():
        ctx_error = err.get("ctx", {}).get("error")
        message = str(ctx_error) if err["type"] == "value_error" and ctx_error else err["msg"]
        error: FieldError = {"type": "field"}
        if err.get("input") is not None:
            error["value"] = err["input"]
        error.update(
            msg=message,
            path=".".join(str(part) for part in err["loc"]),
            location=BODY,
        )
        errors.append(error)
    return errors


def handle_input_errors(rules: Iterable[Rule]):
    """Decorate a view action so ``rules`` run before it.

    URL keyword arguments are the ``params`` source and ``request.data``
    is the ``body`` source.  The body is only parsed when a rule needs it.
    """
    rules = tuple(rules)
    needs_body = any(rule.location == BODY for rule in rules)

    def decorator(action):
        @functools.wraps(action)
        def wrapper(self, request: Request, *args, **kwargs):
            data = request.data if needs_body else None
            errors = run_rules(rules, params=kwargs, data=data)
            response = input_errors_response(errors)
            if response is not None:
                logger.info(
                    "request.validation_failed",
                    action=action.__name__,
                    error_count=len(errors),
                )
                return response
            return action(self, request, *args, **kwargs)

        wrapper.rules = rules
        return wrapper

    return decorator
