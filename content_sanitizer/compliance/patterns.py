"""Contact-sharing detection rules.

The pattern set is a flat tuple of immutable rules applied in priority order:
PHONE, then EMAIL, then KEYWORD, then SOCIAL_HANDLE. Phone numbers go first so
their digit runs are consumed before anything else can partially match them.
Social handles go last so that an email's ``@domain`` has already been
replaced by the time the handle rule runs.

Every rule set is checked against the placeholder when it is built. A rule
that matches the placeholder would make sanitizing non-idempotent, so
``build_pattern_set`` refuses to return one.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

PLACEHOLDER = "[Contact details removed. Continue discussion after acceptance.]"

# Off-platform channels and circumvention phrases
DEFAULT_KEYWORDS = (
    "whatsapp",
    "whats app",
    "telegram",
    "signal",
    "skype",
    "discord",
    "call me",
    "text me",
    "dm me",
    "inbox me",
)

MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 13
# E.164 numbers carry at most 15 digits
MAX_DIGIT_RUN = 15

# Digit-block sizes of separated numbers written without a country code
PHONE_BLOCK_SHAPES = frozenset({(3, 4), (3, 3, 4), (3, 4, 4), (2, 4, 4), (1, 3, 3, 4)})
_MAX_SHAPE_BLOCKS = max(len(shape) for shape in PHONE_BLOCK_SHAPES)


class ContactCategory(str, enum.Enum):
    """Contact-sharing rule category."""

    PHONE = "phone"
    EMAIL = "email"
    KEYWORD = "keyword"
    SOCIAL_HANDLE = "social_handle"


@dataclass(frozen=True)
class ContactRule:
    """One detection rule: a category, a compiled matcher and its priority.

    ``refine`` optionally receives each raw match and returns the ``(start, end)``
    text spans inside it that are real contacts. An empty list rejects the match.
    """

    category: ContactCategory
    pattern: re.Pattern[str]
    priority: int
    description: str
    refine: Callable[[re.Match[str]], list[tuple[int, int]]] | None = None

    def finditer(self, text: str) -> Iterator[tuple[int, int]]:
        """Yield ``(start, end)`` spans of accepted matches."""
        for match in self.pattern.finditer(text):
            if self.refine is None:
                yield match.span()
            else:
                yield from self.refine(match)

    def sub(self, text: str, replacement: str) -> tuple[str, int]:
        """Replace every accepted match. Returns (new_text, replaced_count)."""
        pieces = []
        last = 0
        count = 0
        for start, end in self.finditer(text):
            pieces.append(text[last:start])
            pieces.append(replacement)
            last = end
            count += 1

        if not count:
            return text, 0

        pieces.append(text[last:])
        return "".join(pieces), count


class _Block(NamedTuple):
    """One digit block of a phone candidate, in text offsets."""

    start: int
    end: int
    size: int
    paren: bool


_DIGIT_BLOCK = re.compile(r"\(\d+\)|\d+")
_GLUED = re.compile(r"[\w@]")


def _blocks(match: re.Match[str]) -> list[_Block]:
    offset = match.start()
    blocks = [
        _Block(
            start=offset + block.start(),
            end=offset + block.end(),
            size=len(block.group().strip("()")),
            paren=block.group().startswith("("),
        )
        for block in _DIGIT_BLOCK.finditer(match.group())
    ]
    # a block glued to a following letter or @ belongs to a word or an address
    if blocks and _GLUED.match(match.string, match.end()):
        blocks.pop()
    return blocks


def _international_digits(blocks: list[_Block]) -> int:
    """Count digits after the country code of a ``+`` number."""
    if len(blocks) == 1:
        return blocks[0].size - 1
    # "+44 20 ..." has an explicit country-code block; "+4420 ..." does not
    if blocks[0].size <= 3:
        return sum(block.size for block in blocks[1:])
    return sum(block.size for block in blocks) - 1


def _is_phone_shape(blocks: list[_Block]) -> bool:
    """Check a run of blocks against the local number layouts."""
    sizes = tuple(block.size for block in blocks)
    if any(block.paren for block in blocks[1:]):
        return False
    if blocks[0].paren:
        area, rest = sizes[0], sizes[1:]
        if not 2 <= area <= 4:
            return False
        if len(rest) == 1:
            return 6 <= rest[0] <= 8
        return len(rest) == 2 and all(3 <= size <= 4 for size in rest)
    if len(sizes) == 1:
        return 10 <= sizes[0] <= MAX_DIGIT_RUN
    return sizes in PHONE_BLOCK_SHAPES


def phone_spans(match: re.Match[str]) -> list[tuple[int, int]]:
    """Split a chain of digit blocks into the phone numbers it holds.

    A leading ``+`` claims the longest run of blocks with a plausible digit
    count. The remaining blocks are scanned left to right, each time taking
    the longest run that has a known local layout. Blocks that belong to no
    number stay in the text, and a number is always replaced whole.
    """
    blocks = _blocks(match)
    spans = []
    i = 0
    if match.group().startswith("+"):
        for k in range(len(blocks), 0, -1):
            if MIN_PHONE_DIGITS <= _international_digits(blocks[:k]) <= MAX_PHONE_DIGITS:
                spans.append((match.start(), blocks[k - 1].end))
                i = k
                break

    while i < len(blocks):
        for j in range(min(len(blocks), i + _MAX_SHAPE_BLOCKS), i, -1):
            if _is_phone_shape(blocks[i:j]):
                spans.append((blocks[i].start, blocks[j - 1].end))
                i = j
                break
        else:
            i += 1
    return spans


# Any chain of digit blocks. Whether it holds a phone number is decided by
# phone_spans, so the chain is always consumed whole and no tail of a longer
# number can match on its own.
PHONE_PATTERN = re.compile(
    r"""
    (?<![\d+])
    \+?
    (?:\(\d{1,4}\)|\d+)
    (?:
        (?:\s?[-.]\s?|\s|(?<=\)))       # block separator, optional after ")"
        (?:\(\d{1,4}\)|\d+)
    )*
    """,
    re.VERBOSE,
)

EMAIL_PATTERN = re.compile(r"[\w.%+-]{1,64}@(?:[A-Za-z0-9-]{1,63}\.){1,8}[A-Za-z]{2,24}\b")

# name [at] host [dot] com, name(at)host.com
OBFUSCATED_EMAIL_PATTERN = re.compile(
    r"""
    [\w.%+-]{1,64}\s{0,3}
    [\[(]\s{0,3}at\s{0,3}[\])]\s{0,3}
    (?:[A-Za-z0-9-]{1,63}\s{0,3}(?:[\[(]\s{0,3}dot\s{0,3}[\])]|\.)\s{0,3}){1,8}
    [A-Za-z]{2,24}\b
    """,
    re.VERBOSE | re.IGNORECASE,
)

SOCIAL_HANDLE_PATTERN = re.compile(r"(?<!\w)@[\w.]{3,30}\b")


def normalize_keywords(keywords: Iterable[str]) -> tuple[str, ...]:
    """Strip, lowercase and dedupe keywords, dropping empty ones."""
    seen: dict[str, None] = {}
    for keyword in keywords:
        cleaned = " ".join(keyword.split()).lower()
        if cleaned:
            seen[cleaned] = None
    return tuple(seen)


def compile_keyword_pattern(keywords: Iterable[str]) -> re.Pattern[str]:
    """Compile a case-insensitive whole-word alternation over ``keywords``.

    Multi-word phrases match any run of whitespace between their words, and
    longer phrases are tried first.
    """
    terms = sorted(normalize_keywords(keywords), key=len, reverse=True)
    if not terms:
        raise ValueError("Keyword vocabulary must not be empty")

    alternatives = [r"\s+".join(re.escape(word) for word in term.split()) for term in terms]
    return re.compile(r"(?<!\w)(?:" + "|".join(alternatives) + r")(?!\w)", re.IGNORECASE)


def ensure_placeholder_safe(rules: Iterable[ContactRule], placeholder: str) -> None:
    """Raise ValueError if any rule matches the placeholder text."""
    probes = (placeholder, f"{placeholder} {placeholder}")
    for rule in rules:
        for probe in probes:
            if next(rule.finditer(probe), None) is not None:
                raise ValueError(
                    f"Placeholder {placeholder!r} matches the {rule.category.value} rule "
                    f"({rule.description})"
                )


def build_pattern_set(
    extra_keywords: Iterable[str] = (),
    placeholder: str = PLACEHOLDER,
) -> tuple[ContactRule, ...]:
    """Build the ordered, placeholder-safe rule set."""
    rules = (
        ContactRule(
            category=ContactCategory.PHONE,
            pattern=PHONE_PATTERN,
            priority=10,
            description="phone number with optional country code",
            refine=phone_spans,
        ),
        ContactRule(
            category=ContactCategory.EMAIL,
            pattern=EMAIL_PATTERN,
            priority=20,
            description="email address",
        ),
        ContactRule(
            category=ContactCategory.EMAIL,
            pattern=OBFUSCATED_EMAIL_PATTERN,
            priority=21,
            description="email address spelled with [at] / [dot]",
        ),
        ContactRule(
            category=ContactCategory.KEYWORD,
            pattern=compile_keyword_pattern((*DEFAULT_KEYWORDS, *extra_keywords)),
            priority=30,
            description="off-platform channel or circumvention phrase",
        ),
        ContactRule(
            category=ContactCategory.SOCIAL_HANDLE,
            pattern=SOCIAL_HANDLE_PATTERN,
            priority=40,
            description="@handle",
        ),
    )
    rules = tuple(sorted(rules, key=lambda rule: rule.priority))
    ensure_placeholder_safe(rules, placeholder)
    return rules


CONTACT_PATTERNS = build_pattern_set()


def rules_for(
    category: ContactCategory, rules: tuple[ContactRule, ...] = CONTACT_PATTERNS
) -> tuple[ContactRule, ...]:
    """Rules of a single category, in application order."""
    return tuple(rule for rule in rules if rule.category == category)
