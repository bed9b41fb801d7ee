from typing import Any, Literal, NotRequired, TypedDict


class Attachment(TypedDict):
    """File payload encoded as base64."""

    mime_type: str
    data: str
    name: str


class Message(TypedDict):
    """One turn of prior conversation owned by the UI."""

    role: Literal["user", "model"]
    content: str
    attachments: list[Attachment]


class ChatResponse(TypedDict):
    """Reply handed back to the UI."""

    text: str
    grounding_metadata: NotRequired[Any]
