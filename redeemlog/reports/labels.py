"""Display labels for report columns and messages, keyed by locale."""

from dataclasses import dataclass

# Column order follows RedemptionRecord field order.
FIELDS: tuple[str, ...] = ("redeemed_at", "user_id", "user_login", "user_name", "reward_title")

DEFAULT_LOCALE = "ja"


@dataclass(frozen=True)
class LabelSet:
    columns: dict[str, str]
    found_message: str
    empty_message: str
    title: str
    file_stem: str = "twitch_redemptions"

    def headers(self) -> list[str]:
        return [self.columns[name] for name in FIELDS]

    def found(self, count: int) -> str:
        return self.found_message.format(count=count)


LABELS: dict[str, LabelSet] = {
    "ja": LabelSet(
        columns={
            "redeemed_at": "日時",
            "user_id": "ユーザーID",
            "user_login": "ログイン名",
            "user_name": "表示名",
            "reward_title": "報酬名",
        },
        found_message="{count}件の引き換えが見つかりました",
        empty_message="データがありません",
        title="引き換え履歴",
    ),
    "en": LabelSet(
        columns={
            "redeemed_at": "Time",
            "user_id": "User ID",
            "user_login": "Login",
            "user_name": "Display Name",
            "reward_title": "Reward",
        },
        found_message="Found {count} redemption(s)",
        empty_message="No data",
        title="Redemption History",
    ),
}


def get_labels(locale: str = DEFAULT_LOCALE) -> LabelSet:
    """Return the label set for ``locale``."""
    try:
        return LABELS[locale.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported locale {locale!r}; choose from {', '.join(sorted(LABELS))}"
        ) from None
