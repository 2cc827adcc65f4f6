"""Emoji styling and filtering for hook notifications."""

import re
from typing import Dict

from ccnotify.notify.sounds import Sound

CATEGORY_EMOJI: Dict[Sound, str] = {
    Sound.SUCCESS: "\u2705",  # ✅
    Sound.ERROR: "\U0001f6a8",  # 🚨
    Sound.WARNING: "\u26a0\ufe0f",  # ⚠️
    Sound.INFO: "\U0001f4a1",  # 💡
    Sound.PROGRESS: "\u23f3",  # ⏳
}

# Misc technical/symbols/dingbats/arrows and the supplementary pictograph blocks
EMOJI_PATTERN = re.compile(
    "[\u2300-\u23ff\u2600-\u27bf\u2b00-\u2bff\U0001f000-\U0001faff]"
)

SKIP_PATTERNS = [
    re.compile(p, re.IGNORECASE)
    for p in (r"debug", r"verbose", r"trace", r"internal", r"system")
]


def has_emoji(text: str) -> bool:
    """Check whether text contains an emoji glyph."""
    return EMOJI_PATTERN.search(text) is not None


def enhance_title(title: str, category: Sound) -> str:
    """Prefix the category emoji unless the title already has one."""
    emoji = CATEGORY_EMOJI.get(category)
    if emoji and not has_emoji(title):
        return f"{emoji} {title}"
    return title


def should_skip(title: str, message: str) -> bool:
    """Skip blank notifications and development/debug chatter."""
    if not title.strip() or not message.strip():
        return True

    content = f"{title} {message}".lower()
    return any(p.search(content) for p in SKIP_PATTERNS)
