"""Cron expression parser.

Accepted shape: exactly six tokens separated by single spaces
("minute hour day-of-month month day-of-week command").

Supported syntax for the five time fields, tried in this order:
- "N"    -> the single value N
- "*"    -> every value of the field
- "A,B"  -> exactly the two values A and B, as given
- "*/N"  -> every Nth value starting at the field minimum
- "A-B"  -> every value from A to B inclusive

The command token is taken verbatim.
"""

import logging
import re
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

from cronfields.fields import FieldDomain, FieldKind

logger = logging.getLogger(__name__)

STANDARD_FORMAT_RE = re.compile(r"(\S+) (\S+) (\S+) (\S+) (\S+) (\S+)")
NUMBER_RE = re.compile(r"[+-]?[0-9]+")
LIST_RE = re.compile(r"([0-9]+),([0-9]+)")
STEP_RE = re.compile(r"\*/([0-9]+)")
RANGE_RE = re.compile(r"([0-9]+)-([0-9]+)")
WILDCARD = "*"


class CronParseError(Exception):
    pass


class EmptyArgumentError(CronParseError):
    def __init__(self) -> None:
        super().__init__("Cron expression must not be empty or blank")


class WrongArgumentCountError(CronParseError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Cron expression must be passed as one argument, got {count}")


class UnsupportedFormatError(CronParseError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Unsupported cron format (expected 6 space-separated fields): {raw!r}")


class NoFieldsFoundError(CronParseError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"No fields found in: {raw!r}")


class UnrecognizedFieldError(CronParseError):
    def __init__(self, token: str, kind: FieldKind | None = None) -> None:
        self.token = token
        self.kind = kind
        where = f" for {kind.display_name}" if kind is not None else ""
        super().__init__(f"Can not parse field{where}: {token!r}")


class FieldNotFoundError(CronParseError):
    def __init__(self, kind: object) -> None:
        self.kind = kind
        name = kind.display_name if isinstance(kind, FieldKind) else repr(kind)
        super().__init__(f"No parsed field for: {name}")


class FieldSyntax(Enum):
    """Syntax of a time field token. Declaration order is match priority."""

    NUMBER = "number"
    WILDCARD = "wildcard"
    LIST = "list"
    STEP = "step"
    RANGE = "range"


@dataclass(frozen=True)
class ExpandedField:
    name: str
    values: tuple[str, ...]
    syntax: FieldSyntax | None = None


@dataclass(frozen=True)
class ParsedCron:
    fields: tuple[ExpandedField, ...]

    def get_for(self, kind: FieldKind) -> ExpandedField:
        if not isinstance(kind, FieldKind) or kind.position >= len(self.fields):
            raise FieldNotFoundError(kind)
        return self.fields[kind.position]

    @property
    def command(self) -> str:
        return self.get_for(FieldKind.COMMAND).values[0]

    def __iter__(self) -> Iterator[tuple[FieldKind, ExpandedField]]:
        for kind in FieldKind:
            yield kind, self.get_for(kind)


# Eligibility checks

def _is_number(token: str, domain: FieldDomain) -> bool:
    return NUMBER_RE.fullmatch(token) is not None and domain.contains(int(token))


def _is_wildcard(token: str, domain: FieldDomain) -> bool:
    return token == WILDCARD


def _is_list(token: str, domain: FieldDomain) -> bool:
    m = LIST_RE.fullmatch(token)
    return m is not None and all(domain.contains(int(part)) for part in m.groups())


def _is_step(token: str, domain: FieldDomain) -> bool:
    m = STEP_RE.fullmatch(token)
    if m is None:
        return False
    step = int(m.group(1))
    return step > 0 and domain.contains(step)


def _is_range(token: str, domain: FieldDomain) -> bool:
    m = RANGE_RE.fullmatch(token)
    if m is None:
        return False
    start, end = int(m.group(1)), int(m.group(2))
    return start <= end and domain.contains(start) and domain.contains(end)


# Expansions

def _expand_number(token: str, domain: FieldDomain) -> list[int]:
    return [int(token)]


def _expand_wildcard(token: str, domain: FieldDomain) -> list[int]:
    return domain.values()


def _expand_list(token: str, domain: FieldDomain) -> list[int]:
    return [int(part) for part in token.split(",")]


def _expand_step(token: str, domain: FieldDomain) -> list[int]:
    step = int(token[2:])
    return list(range(domain.min_value, domain.max_value + 1, step))


def _expand_range(token: str, domain: FieldDomain) -> list[int]:
    start, end = map(int, token.split("-", 1))
    return list(range(start, end + 1))


_Rule = Callable[[str, FieldDomain], bool]
_Expander = Callable[[str, FieldDomain], list[int]]

_SYNTAX_TABLE: dict[FieldSyntax, tuple[_Rule, _Expander]] = {
    FieldSyntax.NUMBER: (_is_number, _expand_number),
    FieldSyntax.WILDCARD: (_is_wildcard, _expand_wildcard),
    FieldSyntax.LIST: (_is_list, _expand_list),
    FieldSyntax.STEP: (_is_step, _expand_step),
    FieldSyntax.RANGE: (_is_range, _expand_range),
}

assert set(_SYNTAX_TABLE) == set(FieldSyntax), "every field syntax needs a rule and an expander"


def is_standard_format(raw: str) -> bool:
    return STANDARD_FORMAT_RE.fullmatch(raw) is not None


def tokenize(raw: str) -> list[str]:
    m = STANDARD_FORMAT_RE.fullmatch(raw)
    if m is None:
        raise NoFieldsFoundError(raw)
    return list(m.groups())


def detect_syntax(token: str, domain: FieldDomain) -> FieldSyntax | None:
    """Return the first syntax (in priority order) the token is valid for, or None."""
    for syntax in FieldSyntax:
        rule, _ = _SYNTAX_TABLE[syntax]
        if rule(token, domain):
            return syntax
    return None


def expand(syntax: FieldSyntax, token: str, domain: FieldDomain) -> list[int]:
    _, expander = _SYNTAX_TABLE[syntax]
    return expander(token, domain)


def classify(token: str, kind: FieldKind) -> ExpandedField:
    """Expand one token of the expression according to the field it sits in.

    The command field is accepted verbatim; time fields must match one of
    the supported syntaxes within the field's domain.
    """
    domain = kind.domain
    if domain is None:
        return ExpandedField(kind.display_name, (token,))

    syntax = detect_syntax(token, domain)
    if syntax is None:
        raise UnrecognizedFieldError(token, kind)

    values = expand(syntax, token, domain)
    logger.debug("%s: %r parsed as %s (%d values)", kind.display_name, token, syntax.value, len(values))
    return ExpandedField(kind.display_name, tuple(str(v) for v in values), syntax)


def validate_argument(args: Sequence[str]) -> str:
    if len(args) != 1:
        raise WrongArgumentCountError(len(args))
    value = args[0]
    if not value.strip():
        raise EmptyArgumentError()
    return value


def parse_cron(expression: str) -> ParsedCron:
    if not expression.strip():
        raise EmptyArgumentError()
    if not is_standard_format(expression):
        raise UnsupportedFormatError(expression)

    tokens = tokenize(expression)
    logger.debug("Tokens: %s", tokens)

    fields = tuple(classify(tokens[kind.position], kind) for kind in FieldKind)
    return ParsedCron(fields=fields)
