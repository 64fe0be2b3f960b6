"""
Notification Request Schema.

Outbound display requests sent to the host overlay. The guid is the
correlation key: a request is sent once, then updated or cancelled by
guid.
"""

import uuid
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Optional


class NotificationRendering(IntFlag):
    """Where the host should render a notification."""
    NATIVE_VISUAL = 1      # Overlay popup
    NATIVE_VOCAL = 2       # Text-to-speech
    PLUGIN_NOTIFIER = 4    # Forwarded to notifier plugins
    ALL = NATIVE_VISUAL | NATIVE_VOCAL | PLUGIN_NOTIFIER


# Stays on screen until cancelled
TIMEOUT_PERSISTENT = 0
# Host decides when to dismiss
TIMEOUT_DEFAULT = -1

# Empty SSML document, silences the spoken title
SILENT_SSML = (
    '<speak version="1.0" xmlns="http://www.w3.org/2001/10/synthesis" '
    'xml:lang="en-US"><voice name=""></voice></speak>'
)


def speak_ssml(text: str) -> str:
    """Wrap text into an SSML document."""
    return (
        '<speak version="1.0" xmlns="http://www.w3.org/2001/10/synthesis" '
        f'xml:lang="en-US"><voice name="">{text}</voice></speak>'
    )


@dataclass
class NotificationArgs:
    """
    Notification request.

    Attributes:
        title: Title line
        detail: Body text
        rendering: Rendering channels
        timeout: TIMEOUT_PERSISTENT, TIMEOUT_DEFAULT or milliseconds
        sender: Plugin short name
        guid: Stable identifier for update/cancel
        x_pos: Horizontal screen position hint (percent)
        y_pos: Vertical screen position hint (percent)
        title_ssml: Spoken title override
        detail_ssml: Spoken detail override
    """

    title: str
    detail: str
    rendering: NotificationRendering = NotificationRendering.ALL
    timeout: int = TIMEOUT_DEFAULT
    sender: str = ""
    guid: uuid.UUID = field(default_factory=uuid.uuid4)
    x_pos: Optional[float] = None
    y_pos: Optional[float] = None
    title_ssml: Optional[str] = None
    detail_ssml: Optional[str] = None

    @property
    def is_persistent(self) -> bool:
        return self.timeout == TIMEOUT_PERSISTENT

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'title': self.title,
            'detail': self.detail,
            'rendering': int(self.rendering),
            'timeout': self.timeout,
            'sender': self.sender,
            'guid': str(self.guid),
            'x_pos': self.x_pos,
            'y_pos': self.y_pos,
            'title_ssml': self.title_ssml,
            'detail_ssml': self.detail_ssml,
        }
