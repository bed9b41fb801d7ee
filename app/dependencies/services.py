from google import genai

from app.bootstrap.components import Components
from app.components.configuration.configuration_interface import (
    ConfigurationInterface,
)
from app.components.logger.logger_interface import LoggerInterface
from app.entities.model_type import ModelType
from app.services.AttachmentService.attachment_service import AttachmentService
from app.services.ChatService.chat_service import ChatService
from app.services.ChatService.chat_service_interface import ChatServiceInterface
from app.services.ConsoleService.console_service import ChatConsole


def get_chat_service(components: Components) -> ChatServiceInterface:
    """
    Create the Gemini chat service with Langfuse tracing.
    """
    configuration = components.get_component(ConfigurationInterface)

    pro_model_name = configuration.get_configuration(
        "MODEL_NAME_PRO", str, default=ModelType.PRO.value
    )

    return ChatService(
        client=components.get_component(genai.Client),
        logger=components.get_component(LoggerInterface).get_logger("ChatService"),
        pro_model_name=pro_model_name,
    )


def get_attachment_service(components: Components) -> AttachmentService:
    return AttachmentService(
        logger=components.get_component(LoggerInterface).get_logger(
            "AttachmentService"
        )
    )


def get_chat_console(
    components: Components, chat_service: ChatServiceInterface
) -> ChatConsole:
    configuration = components.get_component(ConfigurationInterface)

    model_name = configuration.get_configuration(
        "MODEL_NAME", str, default=ModelType.FLASH.value
    )
    pro_model_name = configuration.get_configuration(
        "MODEL_NAME_PRO", str, default=ModelType.PRO.value
    )
    system_instruction = configuration.get_configuration(
        "SYSTEM_INSTRUCTION", str, default=""
    )
    use_search = configuration.get_configuration("USE_SEARCH", bool, default=False)

    return ChatConsole(
        chat_service=chat_service,
        attachment_service=get_attachment_service(components),
        logger=components.get_component(LoggerInterface).get_logger("ChatConsole"),
        model_name=model_name,
        pro_model_name=pro_model_name,
        system_instruction=system_instruction or None,
        use_search=use_search,
    )
