"""User-facing text for the dashboard, in English and Arabic.

Holds the controller's error messages, the interaction action labels and the
templates a new plan is seeded with.
"""

from dataclasses import dataclass, field

from clipdeck.models.schemas import InteractionAction


@dataclass(frozen=True)
class Messages:
    """Localized strings for one locale."""

    search_failed: str
    action_labels: dict[InteractionAction, str]
    # Templates receive ``title`` (trimmed video title)
    caption_template: str
    comment_details: str
    repost_details: str
    follow_details: str
    # Suggested caption lines; ``handle`` is the author's handle or display name
    suggestion_lines: tuple[str, ...] = field(default_factory=tuple)


ENGLISH = Messages(
    search_failed="Something went wrong while fetching videos. Try again later.",
    action_labels={
        InteractionAction.LIKE: "Like",
        InteractionAction.COMMENT: "Comment",
        InteractionAction.FOLLOW: "Follow",
        InteractionAction.REPOST: "Repost",
    },
    caption_template="☕️ {title}\n\nFollow for more coffee ideas and reviews every day.",
    comment_details=(
        "What's in your cup today? Share your take and drop by our page for more recipes."
    ),
    repost_details="Repost with a voice-over or subtitles that hook coffee lovers.",
    follow_details="Follow the account if it keeps posting great coffee content.",
    suggestion_lines=(
        "☕️ For lovers of great coffee!",
        "This clip from @{handle} inspired a new recipe.",
        "How about we try it with a small twist and share the result?",
        "Follow along for more cafe and drink tours.",
    ),
)

ARABIC = Messages(
    search_failed="حدث خطأ أثناء جلب المقاطع. جرّب مرة أخرى لاحقًا.",
    action_labels={
        InteractionAction.LIKE: "إعجاب",
        InteractionAction.COMMENT: "تعليق",
        InteractionAction.FOLLOW: "متابعة",
        InteractionAction.REPOST: "إعادة نشر",
    },
    caption_template="☕️ {title}\n\nتابعوني لمزيد من أفكار ومراجعات القهوة يوميًا.",
    comment_details="قهوتك اليوم؟ شاركهم تجربتك وادعُهم لزيارة حسابك لمزيد من الوصفات.",
    repost_details="أعد نشر المقطع مع تعليق صوتي أو ترجمة عربية تشد عشاق القهوة.",
    follow_details="تابع الحساب إذا تكرر محتواه المميز حول القهوة.",
    suggestion_lines=(
        "☕️ لمحبي القهوة المميزة!",
        "يلهمني هذا المقطع من @{handle} لإعداد وصفة جديدة.",
        "ما رأيكم أن نجربها مع تعديل بسيط ونشارك النتيجة؟",
        "تابعني لجولات قادمة في عالم المقاهي والمشروبات.",
    ),
)

_MESSAGES = {
    "en": ENGLISH,
    "ar": ARABIC,
}


def get_messages(locale: str = "en") -> Messages:
    """Return the strings for ``locale``, falling back to English."""
    return _MESSAGES.get(locale, ENGLISH)
