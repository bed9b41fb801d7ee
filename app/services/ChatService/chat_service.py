"""
ChatService backed by the Google Gen AI chat API.

Each call creates a fresh chat session from the caller's history, sends one
message and unwraps the single response. No state is kept between calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from langfuse import observe

from app.entities.message import Attachment, ChatResponse, Message
from app.entities.model_type import ModelType
from app.services.ChatService.chat_service_interface import ChatServiceInterface
from app.services.ChatService.content_builder import (
    build_config,
    build_history,
    build_parts,
    tools_for,
)

if TYPE_CHECKING:
    from google.genai import Client


NO_RESPONSE_TEXT = "No response generated."
GENERIC_ERROR_TEXT = "Something went wrong with the AI service. Please try again."
ERROR_PREFIX = "Error: "


class ChatService(ChatServiceInterface):
    """Gemini chat adapter with Langfuse tracing."""

    def __init__(
        self,
        client: Client,
        logger: logging.Logger,
        pro_model_name: str = ModelType.PRO,
    ) -> None:
        """
        Initialize the service.

        Args:
            client: Google Gen AI client used for chat sessions
            logger: Logger instance
            pro_model_name: Model tier that always gets the search tool
        """
        self.client = client
        self.logger = logger
        self.pro_model_name = pro_model_name

    @observe()
    async def generate_response(
        self,
        history: list[Message],
        new_message: str,
        attachments: list[Attachment],
        model_name: str,
        system_instruction: str | None = None,
        use_search: bool = False,
    ) -> ChatResponse:
        """
        Send a new turn on top of the given history and return the reply.

        Args:
            history: Prior conversation turns, oldest first
            new_message: Text of the new user turn
            attachments: Attachments of the new user turn
            model_name: Model identifier
            system_instruction: Optional system instruction
            use_search: Whether to enable Google Search grounding

        Returns:
            The reply text and, when present, the grounding metadata of the
            first candidate
        """
        try:
            parts = build_parts(new_message, attachments)
            chat_history = build_history(history)
            tools = tools_for(model_name, use_search, self.pro_model_name)
            config = build_config(system_instruction, tools)

            self.logger.info(
                "Sending message to %s (history: %d, parts: %d, tools: %d)",
                model_name,
                len(chat_history),
                len(parts),
                len(tools),
            )

            chat = self.client.aio.chats.create(
                model=model_name,
                config=config,
                history=chat_history,
            )
            response = await chat.send_message(parts)

            text = response.text
            if not text:
                self.logger.warning("Gemini returned an empty response")
                text = NO_RESPONSE_TEXT

            result: ChatResponse = {"text": text}

            if response.candidates:
                grounding_metadata = response.candidates[0].grounding_metadata
                if grounding_metadata is not None:
                    result["grounding_metadata"] = grounding_metadata

            return result

        except Exception as e:
            self.logger.error("Gemini API error: %s", e, exc_info=True)
            return {"text": f"{ERROR_PREFIX}{str(e) or GENERIC_ERROR_TEXT}"}
