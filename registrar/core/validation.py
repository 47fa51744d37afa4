"""Rule-driven field validation producing human-readable messages.

Rules are declared per field as an ordered list of tokens::

    {
        "email": ["required", "min:4", "max:30", "email"],
        "password": ["required", "min:8", "max:255", "no_null"],
    }

Every rule of every field is checked; ``validate`` returns one message per
violated rule, in declaration order, instead of stopping at the first one.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from email_validator import EmailNotValidError, validate_email

Rule = Tuple[str, Optional[int]]
RuleSet = Mapping[str, Sequence[str]]

_SIZED_RULES = {"min", "max"}
_PLAIN_RULES = {"required", "email", "no_null"}


def parse_rule(token: str) -> Rule:
    """Split a token such as ``min:4`` into ``("min", 4)``"""
    name, _, arg = token.partition(":")
    if name in _PLAIN_RULES and not arg:
        return name, None
    if name in _SIZED_RULES and arg.isdigit():
        return name, int(arg)
    raise ValueError(f"Unknown validation rule: {token!r}")


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _check_required(value: str, _: Optional[int]) -> bool:
    return value != ""


def _check_min(value: str, size: Optional[int]) -> bool:
    return len(value) >= size


def _check_max(value: str, size: Optional[int]) -> bool:
    return len(value) <= size


def _check_email(value: str, _: Optional[int]) -> bool:
    return _is_email(value)


def _check_no_null(value: str, _: Optional[int]) -> bool:
    return "\x00" not in value


_CHECKS: Dict[str, Callable[[str, Optional[int]], bool]] = {
    "required": _check_required,
    "min": _check_min,
    "max": _check_max,
    "email": _check_email,
    "no_null": _check_no_null,
}

_MESSAGES: Dict[str, str] = {
    "required": "The {field} field is required",
    "min": "The {field} field must be minimum {size} char",
    "max": "The {field} field must be maximum {size} char",
    "email": "The {field} field must be a valid email address",
    "no_null": "The {field} field must not contain null characters",
}


class Validator:
    """Applies a rule set to a mapping of submitted values"""

    def __init__(self, rules: RuleSet) -> None:
        self.rules: Dict[str, List[Rule]] = {
            field: [parse_rule(token) for token in tokens] for field, tokens in rules.items()
        }

    def validate(self, data: Mapping[str, Any]) -> List[str]:
        errors: List[str] = []
        for field, rules in self.rules.items():
            value = data.get(field)
            value = "" if value is None else str(value)
            for name, size in rules:
                if not _CHECKS[name](value, size):
                    errors.append(_MESSAGES[name].format(field=field, size=size))
        return errors
