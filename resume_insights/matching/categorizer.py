"""
Course Categorization

Every catalog course belongs to exactly one category. Rules are evaluated
in priority order and the first match wins; anything no rule claims falls
back to FALLBACK_CATEGORY.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .config import CATEGORY_RULES, FALLBACK_CATEGORY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryRule:
    """One row of the categorization decision table."""

    label: str
    codes: Tuple[str, ...] = ()
    prefixes: Tuple[str, ...] = ()
    code_fragments: Tuple[str, ...] = ()
    name_keywords: Tuple[str, ...] = ()
    prefix_keywords: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()
    excluded_codes: Tuple[str, ...] = ()
    excluded_prefixes: Tuple[str, ...] = ()

    @classmethod
    def from_config(cls, entry: Dict[str, Any]) -> "CategoryRule":
        return cls(
            label=entry["label"],
            codes=tuple(entry.get("codes", [])),
            prefixes=tuple(entry.get("prefixes", [])),
            code_fragments=tuple(entry.get("code_fragments", [])),
            name_keywords=tuple(entry.get("name_keywords", [])),
            prefix_keywords=tuple(
                (prefix, tuple(keywords))
                for prefix, keywords in entry.get("prefix_keywords", {}).items()
            ),
            excluded_codes=tuple(entry.get("excluded_codes", [])),
            excluded_prefixes=tuple(entry.get("excluded_prefixes", [])),
        )

    def is_vetoed(self, code: str) -> bool:
        return code in self.excluded_codes or any(
            code.startswith(prefix) for prefix in self.excluded_prefixes
        )

    def matches(self, code: str, name: str) -> bool:
        """
        Check the rule against an upper-cased code and lower-cased name.
        """
        if self.is_vetoed(code):
            return False

        if code in self.codes:
            return True
        if any(code.startswith(prefix) for prefix in self.prefixes):
            return True
        if any(fragment in code for fragment in self.code_fragments):
            return True
        if any(keyword in name for keyword in self.name_keywords):
            return True

        for prefix, keywords in self.prefix_keywords:
            if code.startswith(prefix) and any(keyword in name for keyword in keywords):
                return True

        return False


def build_rules(entries: List[Dict[str, Any]]) -> List[CategoryRule]:
    """Build the ordered decision table from configuration entries."""
    return [CategoryRule.from_config(entry) for entry in entries]


RULES = build_rules(CATEGORY_RULES)


def categorize_course(
    course_code: str,
    course_name: str,
    rules: List[CategoryRule] = None,
) -> str:
    """
    Assign a single category label to a catalog course.

    Args:
        course_code: Catalog identifier (e.g. "COP3530")
        course_name: Catalog title (e.g. "Data Structures and Algorithms")
        rules: Optional decision table override (defaults to RULES)

    Returns:
        One of CATEGORY_LABELS
    """
    code = (course_code or "").upper()
    name = (course_name or "").lower()

    for rule in (rules if rules is not None else RULES):
        if rule.matches(code, name):
            logger.debug(f"Categorized {code} '{name}' as {rule.label}")
            return rule.label

    logger.debug(f"No rule matched {code} '{name}', using {FALLBACK_CATEGORY}")
    return FALLBACK_CATEGORY
