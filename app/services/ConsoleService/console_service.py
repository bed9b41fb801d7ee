"""
Interactive console chat.

Owns the conversation history and pending attachments on behalf of the user,
and forwards each turn to the chat service. Turns answered with an error
reply are not added to the history.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from app.entities.message import Attachment, ChatResponse, Message
from app.entities.model_type import ModelType
from app.services.AttachmentService.attachment_service import (
    AttachmentReadError,
    AttachmentService,
    LocalFile,
)
from app.services.ChatService.chat_service import ERROR_PREFIX
from app.services.ChatService.chat_service_interface import ChatServiceInterface

HELP_TEXT = """Commands:
  /help           show this help
  /attach <path>  attach a file to the next message
  /search         toggle Google Search grounding
  /pro            switch to the pro model
  /flash          switch to the flash model
  /quit           exit"""


def format_sources(grounding_metadata: Any) -> list[str]:
    """Return the web sources of a grounded reply as display lines."""
    chunks = getattr(grounding_metadata, "grounding_chunks", None) or []
    lines = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        if web and getattr(web, "uri", None):
            title = getattr(web, "title", None) or web.uri
            lines.append(f"  - {title}: {web.uri}")
    return lines


class ChatConsole:
    def __init__(
        self,
        chat_service: ChatServiceInterface,
        attachment_service: AttachmentService,
        logger: logging.Logger,
        model_name: str = ModelType.FLASH,
        pro_model_name: str = ModelType.PRO,
        system_instruction: str | None = None,
        use_search: bool = False,
        output: Callable[[str], None] = print,
    ) -> None:
        self.chat_service = chat_service
        self.attachment_service = attachment_service
        self.logger = logger
        self.flash_model_name = model_name
        self.pro_model_name = pro_model_name
        self.model_name = model_name
        self.system_instruction = system_instruction
        self.use_search = use_search
        self.output = output

        self.history: list[Message] = []
        self.pending_attachments: list[Attachment] = []

    async def handle_line(self, line: str) -> bool:
        """
        Process one line of user input.

        Returns:
            False when the user asked to quit, True otherwise
        """
        command, _, argument = line.strip().partition(" ")

        if command == "/quit":
            return False
        if command == "/help":
            self.output(HELP_TEXT)
        elif command == "/attach":
            await self.attach(argument.strip())
        elif command == "/search":
            self.use_search = not self.use_search
            self.output(f"Search {'enabled' if self.use_search else 'disabled'}")
        elif command == "/pro":
            self.model_name = self.pro_model_name
            self.output(f"Using {self.model_name}")
        elif command == "/flash":
            self.model_name = self.flash_model_name
            self.output(f"Using {self.model_name}")
        else:
            await self.send(line)
        return True

    async def attach(self, path: str) -> None:
        if not path:
            self.output("Usage: /attach <path>")
            return

        try:
            attachment = await self.attachment_service.read_attachment(LocalFile(path))
        except AttachmentReadError as e:
            self.output(str(e))
            return

        self.pending_attachments.append(attachment)
        self.output(f"Attached {attachment['name']} ({attachment['mime_type']})")

    async def send(self, text: str) -> ChatResponse:
        attachments = self.pending_attachments
        self.pending_attachments = []

        response = await self.chat_service.generate_response(
            history=self.history,
            new_message=text,
            attachments=attachments,
            model_name=self.model_name,
            system_instruction=self.system_instruction,
            use_search=self.use_search,
        )

        if response["text"].startswith(ERROR_PREFIX):
            # Failed turns stay out of history; attachments wait for a retry
            self.pending_attachments = [*attachments, *self.pending_attachments]
        else:
            self.history = [
                *self.history,
                {"role": "user", "content": text, "attachments": attachments},
                {"role": "model", "content": response["text"], "attachments": []},
            ]

        self.output(response["text"])
        sources = format_sources(response.get("grounding_metadata"))
        if sources:
            self.output("Sources:\n" + "\n".join(sources))

        return response

    async def run(self) -> None:
        self.output(HELP_TEXT)
        self.logger.info("Console chat started with model %s", self.model_name)

        while True:
            try:
                line = await asyncio.to_thread(input, "> ")
            except EOFError:
                break

            if not line.strip() and not self.pending_attachments:
                continue

            if not await self.handle_line(line):
                break

        self.logger.info("Console chat finished after %d turns", len(self.history) // 2)
