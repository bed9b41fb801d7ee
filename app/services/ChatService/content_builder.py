"""
Request shaping for the Gemini chat API.

Converts UI-owned messages and attachments into google-genai ``types``
objects. The API rejects a turn without parts, so every turn built here
carries at least one part.
"""

from __future__ import annotations

import base64
from typing import Any

from google.genai import types

from app.entities.message import Attachment, Message

# Placeholder text for a turn that has neither text nor attachments
EMPTY_TURN_TEXT = " "


def build_parts(text: str | None, attachments: list[Attachment] | None) -> list[types.Part]:
    """
    Build the part list for a single turn.

    Attachments come first, in order, followed by the text. The text is sent
    as-is; trimming only decides whether it is sent at all.

    Args:
        text: Message text, possibly empty or whitespace-only
        attachments: Attachments with base64-encoded payloads

    Returns:
        A non-empty list of parts
    """
    parts: list[types.Part] = []

    for attachment in attachments or []:
        parts.append(
            types.Part.from_bytes(
                data=base64.b64decode(attachment["data"], validate=True),
                mime_type=attachment["mime_type"],
            )
        )

    if text and text.strip():
        parts.append(types.Part.from_text(text=text))

    if not parts:
        parts.append(types.Part.from_text(text=EMPTY_TURN_TEXT))

    return parts


def build_history(history: list[Message] | None) -> list[types.Content]:
    """Convert prior messages into chat history, keeping roles and order."""
    return [
        types.Content(
            role=message["role"],
            parts=build_parts(message.get("content"), message.get("attachments")),
        )
        for message in history or []
    ]


def tools_for(
    model_name: str, use_search: bool, pro_model_name: str
) -> list[types.Tool]:
    """
    Select the tools for a request.

    Google Search is enabled when the caller asks for it and always for the
    pro model tier.
    """
    tools: list[types.Tool] = []
    if use_search or model_name == pro_model_name:
        tools.append(types.Tool(google_search=types.GoogleSearch()))
    return tools


def build_config(
    system_instruction: str | None, tools: list[types.Tool]
) -> types.GenerateContentConfig:
    """
    Build the generation config, leaving absent fields unset.

    The system instruction is passed through untrimmed when it has any
    non-whitespace content.
    """
    config_kwargs: dict[str, Any] = {}

    if system_instruction and system_instruction.strip():
        config_kwargs["system_instruction"] = system_instruction

    if tools:
        config_kwargs["tools"] = tools

    return types.GenerateContentConfig(**config_kwargs)
