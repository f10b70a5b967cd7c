"""Keyword rules for node classification.

Each classification concern is an ordered list of rules evaluated
top-to-bottom; the first rule whose level range and keywords both
match decides the result. The order of each table is its priority.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


def word_pattern(*words: str) -> re.Pattern[str]:
    """Compile whole-word alternatives, case-insensitive, optional plural "s"."""
    alternatives = "|".join(re.escape(word) for word in words)
    return re.compile(rf"\b(?:{alternatives})s?\b", re.IGNORECASE)


@dataclass(frozen=True)
class KeywordRule:
    """A level-bounded keyword rule.

    Args:
        result: Value produced when the rule matches.
        terms: Exact-case substrings to look for in the label.
        pattern: Compiled regex searched in the label (whole English words).
        min_level: Lowest depth the rule applies to.
        max_level: Highest depth the rule applies to (None = unbounded).
        description: Human-readable description of the rule.

    A rule with neither terms nor pattern matches any label.
    """

    result: str
    terms: tuple[str, ...] = ()
    pattern: re.Pattern[str] | None = None
    min_level: int = 0
    max_level: int | None = None
    description: str = ""

    @property
    def has_keywords(self) -> bool:
        return bool(self.terms) or self.pattern is not None

    def applies_to_level(self, level: int) -> bool:
        if level < self.min_level:
            return False
        return self.max_level is None or level <= self.max_level

    def matches(self, label: str, level: int) -> bool:
        """Check whether the rule fires for a label at a depth."""
        if not self.applies_to_level(level):
            return False
        if not self.has_keywords:
            return True
        if any(term in label for term in self.terms):
            return True
        return self.pattern is not None and self.pattern.search(label) is not None

    def to_dict(self) -> dict[str, object]:
        """Serialize to dictionary."""
        return {
            "result": self.result,
            "terms": list(self.terms),
            "pattern": self.pattern.pattern if self.pattern else None,
            "min_level": self.min_level,
            "max_level": self.max_level,
            "description": self.description,
        }


def first_match(rules: list[KeywordRule], label: str, level: int) -> str | None:
    """Return the result of the first matching rule, or None."""
    for rule in rules:
        if rule.matches(label, level):
            return rule.result
    return None


# --- Marker vocabularies ---

CHANNEL_TERMS = ("渠道",)
TOOL_TERMS = ("工具",)
FACTOR_TERMS = ("补贴", "体验", "丰富度")
INCENTIVE_TERMS = ("工具", "红包", "券")

CHANNEL_WORDS = word_pattern("channel")
CHANNEL_OR_TOOL_WORDS = word_pattern("channel", "tool")
FACTOR_WORDS = word_pattern("subsidy", "subsidies", "experience", "richness")
INCENTIVE_WORDS = word_pattern("tool", "voucher", "coupon")


# --- Node type ---

NODE_TYPE_RULES: list[KeywordRule] = [
    KeywordRule("metric", max_level=2, description="Upper levels are always metrics"),
    KeywordRule(
        "tool",
        CHANNEL_TERMS + TOOL_TERMS,
        CHANNEL_OR_TOOL_WORDS,
        description="Channels and tools",
    ),
    KeywordRule("factor", FACTOR_TERMS, FACTOR_WORDS, description="Subsidy, experience, richness"),
]


# --- Category ---

CATEGORY_RULES: list[KeywordRule] = [
    KeywordRule("business_target", min_level=0, max_level=0),
    KeywordRule("core_metric", min_level=1, max_level=1),
    KeywordRule("segment", min_level=2, max_level=2),
    KeywordRule("platform", min_level=3, max_level=3),
    KeywordRule("user_group", min_level=4, max_level=4),
    KeywordRule("channel", CHANNEL_TERMS, CHANNEL_WORDS, min_level=5),
    KeywordRule("conversion_factor", FACTOR_TERMS, FACTOR_WORDS),
    KeywordRule("marketing_tool", INCENTIVE_TERMS, INCENTIVE_WORDS),
]


# --- Domain ---

ROOT_DOMAIN = "core"
FALLBACK_DOMAIN = "other"

DOMAIN_RULES: list[KeywordRule] = [
    KeywordRule(ROOT_DOMAIN, max_level=0, description="Document root"),
    # Exact case: "DAU" only, never "dau" inside a word
    KeywordRule("user", ("DAU",), description="User acquisition"),
    KeywordRule("conversion", ("访购率", "转化"), word_pattern("conversion")),
    KeywordRule("behavior", ("频次",), word_pattern("frequency")),
    KeywordRule("revenue", ("单价",), word_pattern("price")),
    # "非闪购" contains "闪购", so it only reaches non_flash_sale via its
    # other markers.
    KeywordRule("flash_sale", ("闪购",)),
    KeywordRule("non_flash_sale", ("非闪购", "饿了么", "微信")),
    KeywordRule(
        "marketing",
        ("营销", "补贴"),
        word_pattern("marketing", "subsidy", "subsidies"),
    ),
    KeywordRule("supply", ("供给", "商户", "商品"), word_pattern("supply", "merchant")),
    KeywordRule("fulfillment", ("物流", "体验"), word_pattern("logistics", "experience")),
]
