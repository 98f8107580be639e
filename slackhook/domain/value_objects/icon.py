from dataclasses import dataclass
from enum import Enum


class IconType(str, Enum):
    """How Slack should interpret the icon value (doubles as the payload key)."""

    URL = "icon_url"
    EMOJI = "icon_emoji"


@dataclass(frozen=True)
class Icon:
    """Icon value paired with its classification."""

    value: str
    type: IconType

    @classmethod
    def parse(cls, value: str) -> "Icon":
        """Classify ``value`` as an emoji token (``:ghost:``) or a URL."""
        if len(value) >= 2 and value.startswith(":") and value.endswith(":"):
            return cls(value=value, type=IconType.EMOJI)
        return cls(value=value, type=IconType.URL)

    @property
    def is_emoji(self) -> bool:
        return self.type is IconType.EMOJI

    def to_payload(self) -> dict[str, str]:
        return {self.type.value: self.value}
