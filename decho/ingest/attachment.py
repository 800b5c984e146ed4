import os
from dataclasses import dataclass

from decho.util.errors import InputError


@dataclass(frozen=True)
class Attachment:
    name: str
    content: bytes


def attachment_from_text(name: str, text: str) -> Attachment:
    return Attachment(name=name, content=text.encode("utf-8", errors="surrogateescape"))


# Read a local file into memory, named after its last path segment
def attachment_from_path(path: str) -> Attachment:
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise InputError(str(e)) from e
    return Attachment(name=os.path.basename(path), content=data)
