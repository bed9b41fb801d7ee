from app.dependencies.components import get_components
from app.dependencies.services import get_chat_console, get_chat_service
from app.services.ChatService.chat_service_interface import ChatServiceInterface
from app.services.ConsoleService.console_service import ChatConsole


def bootstrap_chat(
    env: str = "development",
    config_path: str = "configuration",
) -> ChatConsole:
    components = get_components(env=env, config_path=config_path)
    chat_service: ChatServiceInterface = get_chat_service(components)

    return get_chat_console(components, chat_service)
