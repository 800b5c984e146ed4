import requests
from requests.exceptions import RequestException

from decho.format.message import Message
from decho.util.errors import TransportError

USERNAME = "decho"


def _check(r: requests.Response) -> None:
    # Webhooks answer 204 No Content when the message was accepted
    if r.status_code == 204:
        return
    status = f"{r.status_code} {r.reason or ''}".strip()
    body = r.text
    raise TransportError(
        f"Discord returned status: {status}, message: {body}",
        status_code=r.status_code,
        body=body,
    )


# Plain message: JSON body, no files
def send_text(message: Message, webhook: str) -> None:
    data = {"username": USERNAME, "content": message.text}
    try:
        r = requests.post(webhook, json=data)
    except RequestException as e:
        raise TransportError(str(e)) from e
    _check(r)


# Multipart upload: "content" field, then one "file" part per attachment in order
def send_with_files(message: Message, webhook: str) -> None:
    files = [("file", (a.name, a.content)) for a in message.attachments]
    content = message.text.encode("utf-8", errors="surrogateescape")
    try:
        r = requests.post(webhook, data={"content": content}, files=files)
    except RequestException as e:
        raise TransportError(str(e)) from e
    _check(r)


def send_message(message: Message, webhook: str) -> None:
    if message.has_attachments:
        send_with_files(message, webhook)
    else:
        send_text(message, webhook)
