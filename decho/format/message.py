from dataclasses import dataclass, field
from typing import List, Tuple

from decho.ingest.attachment import Attachment, attachment_from_path, attachment_from_text
from decho.util.errors import InputError

MAX_CHARACTERS = 2000            # discord message limit
MAX_SIZE = 8 * 1024 * 1024       # discord file limit
OVERFLOW_NAME = "message.txt"


@dataclass(frozen=True)
class Message:
    text: str = ""
    attachments: Tuple[Attachment, ...] = field(default_factory=tuple)

    @property
    def has_attachments(self) -> bool:
        return bool(self.attachments)


def build_message(text: str, file_path: str | None = None) -> Message:
    """Route text and an optional file into one outbound message.

    Text longer than MAX_CHARACTERS is moved into a "message.txt" attachment and
    the message body is left empty. The explicit file, if any, always comes after it.
    """
    attachments: List[Attachment] = []

    if len(text) > MAX_CHARACTERS:
        if len(text.encode("utf-8", errors="surrogateescape")) > MAX_SIZE:
            raise InputError("message too big to send")
        attachments.append(attachment_from_text(OVERFLOW_NAME, text))
        text = ""

    if file_path:
        attachments.append(attachment_from_path(file_path))

    return Message(text=text, attachments=tuple(attachments))
