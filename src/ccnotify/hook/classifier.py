"""Pick a notification sound from the text of a Claude Code notification."""

import re
from dataclasses import dataclass
from typing import Optional, Pattern, Sequence, Tuple

from ccnotify.notify.sounds import Sound


def _compile(*patterns: str) -> Tuple[Pattern, ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


@dataclass(frozen=True)
class ClassificationRule:
    """
    One row of the classification table.

    A rule with a failure_pattern does not map to a fixed sound: it
    resolves to ERROR when the failure pattern matches the content and
    to SUCCESS otherwise.
    """
    name: str
    category: Sound
    patterns: Tuple[Pattern, ...]
    failure_pattern: Optional[Pattern] = None

    def matches(self, content: str) -> bool:
        return any(p.search(content) for p in self.patterns)

    def resolve(self, content: str) -> Sound:
        if self.failure_pattern is None:
            return self.category
        if self.failure_pattern.search(content):
            return Sound.ERROR
        return Sound.SUCCESS


ERROR_RULE = ClassificationRule(
    "error", Sound.ERROR,
    _compile(r"error", r"failed", r"failure", r"crash", r"exception",
             "\u274c", "\U0001f6a8", "\U0001f4a5", "\u26a0\ufe0f"),  # ❌ 🚨 💥 ⚠️
)

WARNING_RULE = ClassificationRule(
    "warning", Sound.WARNING,
    _compile(r"warning", r"caution", r"attention", r"notice",
             "\u26a0\ufe0f", "\U0001f514", "\U0001f4e2"),  # ⚠️ 🔔 📢
)

SUCCESS_RULE = ClassificationRule(
    "success", Sound.SUCCESS,
    _compile(r"complete", r"success", r"passed", r"done", r"finished",
             "\u2705", "\U0001f389", "\u2728",  # ✅ 🎉 ✨
             "\U0001f3d7\ufe0f", "\U0001f4e6", "\U0001f680"),  # 🏗️ 📦 🚀
)

PROGRESS_RULE = ClassificationRule(
    "progress", Sound.PROGRESS,
    _compile(r"progress", r"running", r"processing", r"installing", r"building",
             "\U0001f4ca", "\u23f3", "\U0001f504"),  # 📊 ⏳ 🔄
)

TEST_RULE = ClassificationRule(
    "test", Sound.SUCCESS,
    _compile(r"test", r"spec", r"jest", r"vitest", r"cypress",
             "\U0001f9ea", "\u2705", "\u274c"),  # 🧪 ✅ ❌
    failure_pattern=re.compile("\u274c|fail", re.IGNORECASE),
)

BUILD_RULE = ClassificationRule(
    "build", Sound.SUCCESS,
    _compile(r"build", r"compile", r"deploy", r"publish",
             "\U0001f3d7\ufe0f", "\U0001f4e6", "\U0001f680"),  # 🏗️ 📦 🚀
    failure_pattern=re.compile(r"fail|error", re.IGNORECASE),
)

GIT_RULE = ClassificationRule(
    "git", Sound.SUCCESS,
    _compile(r"git", r"commit", r"push", r"pull", r"merge",
             "\U0001f4dd", "\U0001f500", "\U0001f4cb"),  # 📝 🔀 📋
    failure_pattern=re.compile(r"fail|error", re.IGNORECASE),
)

# Evaluated in order; the first matching rule wins.
RULES: Tuple[ClassificationRule, ...] = (
    ERROR_RULE,
    WARNING_RULE,
    SUCCESS_RULE,
    PROGRESS_RULE,
    TEST_RULE,
    BUILD_RULE,
    GIT_RULE,
)

DEFAULT_CATEGORY = Sound.INFO


def match_rule(content: str, rules: Sequence[ClassificationRule] = RULES) -> Optional[ClassificationRule]:
    """Return the first rule matching content, or None."""
    for rule in rules:
        if rule.matches(content):
            return rule
    return None


def classify(title: str, message: str, rules: Sequence[ClassificationRule] = RULES) -> Sound:
    """
    Classify a notification by its title and message.

    Args:
        title: Notification title
        message: Notification body
        rules: Ordered classification table

    Returns:
        The sound category; INFO when nothing matches
    """
    content = f"{title} {message}".lower()
    rule = match_rule(content, rules)
    if rule is None:
        return DEFAULT_CATEGORY
    return rule.resolve(content)
