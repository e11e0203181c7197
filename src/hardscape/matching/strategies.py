"""Ordered template-matching strategies (first hit wins)."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from hardscape.config.models import RateTemplate

SIGNIFICANT_WORD_MIN_LENGTH = 4
CUTTING_KEYWORD = "cutting"


class MatchStrategy(str, Enum):
    EXACT = "exact"
    DOMAIN_SPECIFIC = "domain-specific"
    WORD_ORDER = "word-order"
    PARTIAL = "partial"
    NONE = "none"


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of matching one task name against the catalog.

    Attributes
    ----------
    task_name:
        Name that was matched (after any upstream renaming).
    template:
        Matched catalog entry, or ``None`` when no strategy succeeded.
    strategy:
        Strategy that produced the hit (``none`` on a miss).
    """

    task_name: str
    template: RateTemplate | None
    strategy: MatchStrategy

    @property
    def matched(self) -> bool:
        return self.template is not None

    @property
    def template_id(self) -> str | None:
        return self.template.id if self.template is not None else None

    @property
    def low_confidence(self) -> bool:
        return self.strategy is MatchStrategy.PARTIAL


Matcher = Callable[[str, RateTemplate], bool]


def _words(text: str) -> list[str]:
    return text.lower().split()


def exact_match(task_name: str, template: RateTemplate) -> bool:
    """Case-insensitive equality of the full names."""

    return template.name.lower() == task_name.strip().lower()


def domain_specific_match(task_name: str, template: RateTemplate) -> bool:
    """
    Cutting variants: the template must mention cutting and the material being cut.

    Only applies when the task name itself contains ``cutting``; ``cutting porcelain`` matches
    ``Cutting porcelain tiles`` but not ``Cutting sandstones``.
    """

    task = task_name.strip().lower()
    if CUTTING_KEYWORD not in task:
        return False
    name = template.name.lower()
    remainder = task.replace(f"{CUTTING_KEYWORD} ", "", 1).strip()
    return CUTTING_KEYWORD in name and remainder in name


def word_order_match(task_name: str, template: RateTemplate) -> bool:
    """
    Every task word is contained in a later template word, preserving order.

    Template words are consumed as the scan advances, so ``soil excavation`` does not match
    ``Excavation soil with digger``.
    """

    task_words = _words(task_name)
    if not task_words:
        return False
    template_words = _words(template.name)
    position = 0
    for word in task_words:
        while position < len(template_words) and word not in template_words[position]:
            position += 1
        if position == len(template_words):
            return False
        position += 1
    return True


def partial_match(task_name: str, template: RateTemplate) -> bool:
    """
    Loosest pass: each significant task word (4+ characters) overlaps some template word.

    Overlap means either word contains the other. Names without significant words never match.
    """

    task_words = [w for w in _words(task_name) if len(w) >= SIGNIFICANT_WORD_MIN_LENGTH]
    if not task_words:
        return False
    template_words = [w for w in _words(template.name) if len(w) >= SIGNIFICANT_WORD_MIN_LENGTH]
    return all(
        any(task_word in candidate or candidate in task_word for candidate in template_words)
        for task_word in task_words
    )


MATCH_STRATEGIES: tuple[tuple[MatchStrategy, Matcher], ...] = (
    (MatchStrategy.EXACT, exact_match),
    (MatchStrategy.DOMAIN_SPECIFIC, domain_specific_match),
    (MatchStrategy.WORD_ORDER, word_order_match),
    (MatchStrategy.PARTIAL, partial_match),
)


def match_template(
    task_name: str,
    catalog: Sequence[RateTemplate],
    strategies: Sequence[tuple[MatchStrategy, Matcher]] = MATCH_STRATEGIES,
) -> MatchResult:
    """
    Run ``strategies`` in order and return the first catalog entry any of them accepts.

    Each strategy scans the whole catalog in order before the next one runs, so an exact
    match always beats a looser match on an earlier template.
    """

    if task_name.strip():
        for strategy, matcher in strategies:
            for template in catalog:
                if matcher(task_name, template):
                    return MatchResult(task_name=task_name, template=template, strategy=strategy)
    return MatchResult(task_name=task_name, template=None, strategy=MatchStrategy.NONE)


__all__ = [
    "MatchStrategy",
    "MatchResult",
    "Matcher",
    "exact_match",
    "domain_specific_match",
    "word_order_match",
    "partial_match",
    "MATCH_STRATEGIES",
    "match_template",
]
