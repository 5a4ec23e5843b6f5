"""Reply texts for chat commands.

Replies using ``*bold*``, ``_italic_`` and backticks are sent with the
Markdown parse mode.
"""

from collections.abc import Sequence

from pingtag.application.usecase.tag import (
    MentionItem,
    TagListItem,
    TagStatItem,
    UserTagItem,
)

HELP = (
    "👋 Hi! I'm a tag bot. Commands:\n\n"
    "/ct <tag> [description] — create a tag\n"
    "/st <tag> — subscribe\n"
    "/dt <tag> — delete\n"
    "/lt — all tags\n"
    "/mt — my tags\n"
    "/stats — statistics\n\n"
    "Mention a tag with #tag"
)

CREATE_USAGE = "❗ Specify a tag name: /ct <tag> [description]"
SUBSCRIBE_USAGE = "❗ Specify a tag: /st <tag>"
DELETE_USAGE = "❗ Specify a tag: /dt <tag>"

TAG_EXISTS = "⚠️ This tag already exists!"
TAG_NOT_FOUND = "⛔ Tag not found!"
ALREADY_SUBSCRIBED = "✅ You're already subscribed!"
DELETE_FORBIDDEN = "🚫 Only the creator can delete this tag!"
SAVE_FAILED = "💾 Could not save the change, please try again later."
NO_TAGS = "📭 No tags yet!"
NO_SUBSCRIPTIONS = "_You're not subscribed to any tag._"


def invalid_name(max_length: int) -> str:
    return f"❗ A tag name must be 1-{max_length} characters long."


def description_too_long(max_length: int) -> str:
    return f"❗ The description is too long (at most {max_length} characters)."


def quota_exceeded(limit: int) -> str:
    return f"🚫 You've already created {limit} tags."


def tag_created(creator: str, name: str, description: str) -> str:
    return (
        "🌟 *New tag created!\n"
        f"👤 Creator:* @{creator}\n"
        f"🏷️ *Tag:* `#{name}`\n"
        f"📜 *Description:* {description}"
    )


def subscribed(name: str) -> str:
    return f"📬 Subscribed to `#{name}`!"


def deleted(name: str) -> str:
    return f"🗑️ Tag `#{name}` deleted!"


def tag_list(tags: Sequence[TagListItem]) -> str:
    lines = ["📚 *Tags:*"]
    lines.extend(
        f"`#{t.name}` ({t.subscriber_count}): {t.description}" for t in tags
    )
    return "\n".join(lines) + "\n"


def user_tags(tags: Sequence[UserTagItem]) -> str:
    if not tags:
        return "📌 *Your tags:*\n" + NO_SUBSCRIPTIONS
    lines = ["📌 *Your tags:*"]
    lines.extend(f"`#{t.name}` — {t.description}" for t in tags)
    return "\n".join(lines) + "\n"


def stats(tags: Sequence[TagStatItem]) -> str:
    lines = ["📊 *Statistics:*"]
    lines.extend(f"`#{t.name}` — {t.subscriber_count} subscribers" for t in tags)
    return "\n".join(lines) + "\n"


def summon(mention: MentionItem, phrase: str) -> str:
    """Render one mention block: the ``@name`` line followed by a phrase."""
    names = " ".join(f"@{name}" for name in mention.usernames)
    return f"{names}\n{phrase.format(tag=mention.tag_name)}"
