import logging
from unittest.mock import MagicMock

import pytest
from google import genai

from app.components.configuration.configuration_interface import (
    ConfigurationInterface,
)
from app.components.logger.logger_interface import LoggerInterface
from app.dependencies.services import get_chat_console, get_chat_service
from app.services.ChatService.chat_service import ChatService


@pytest.fixture
def components() -> MagicMock:
    values = {
        "MODEL_NAME": "gemini-flash",
        "MODEL_NAME_PRO": "gemini-pro",
        "SYSTEM_INSTRUCTION": "",
        "USE_SEARCH": True,
    }

    configuration = MagicMock()
    configuration.get_configuration.side_effect = (
        lambda key, value_type, default=None: values.get(key, default)
    )

    logger = MagicMock()
    logger.get_logger.side_effect = logging.getLogger

    client = MagicMock()
    registry = {
        ConfigurationInterface: configuration,
        LoggerInterface: logger,
        genai.Client: client,
    }

    mock_components = MagicMock()
    mock_components.get_component.side_effect = registry.__getitem__
    return mock_components


@pytest.mark.unit
def test_get_chat_service(components: MagicMock) -> None:
    service = get_chat_service(components)

    assert isinstance(service, ChatService)
    assert service.pro_model_name == "gemini-pro"
    assert service.client is components.get_component(genai.Client)
    assert service.logger.name == "ChatService"


@pytest.mark.unit
def test_get_chat_console(components: MagicMock) -> None:
    chat_service = MagicMock()

    console = get_chat_console(components, chat_service)

    assert console.chat_service is chat_service
    assert console.model_name == "gemini-flash"
    assert console.pro_model_name == "gemini-pro"
    assert console.system_instruction is None
    assert console.use_search is True
