from abc import ABC, abstractmethod

from app.entities.message import Attachment, ChatResponse, Message


class ChatServiceInterface(ABC):
    @abstractmethod
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

        Never raises: failures are returned as a reply whose text starts
        with "Error: ".
        """
