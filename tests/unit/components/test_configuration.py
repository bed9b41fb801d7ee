from pathlib import Path

import pytest

from app.components.configuration.configuration import Configuration
from app.components.logger.logger import Logger


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    (tmp_path / "development.env").write_text(
        "MODEL_NAME=gemini-flash\n"
        "LLM_TEMPERATURE=0.4\n"
        "MAX_TURNS=12\n"
        "USE_SEARCH=yes\n"
        "EMPTY_VALUE=\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.mark.unit
class TestConfiguration:
    def test_reads_values_from_env_file(self, config_dir: Path) -> None:
        configuration = Configuration("development", str(config_dir))

        assert configuration.get_configuration("MODEL_NAME", str) == "gemini-flash"
        assert configuration.get_configuration("LLM_TEMPERATURE", float) == 0.4
        assert configuration.get_configuration("MAX_TURNS", int) == 12
        assert configuration.get_configuration("USE_SEARCH", bool) is True

    def test_process_environment_takes_precedence(
        self, config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MODEL_NAME", "gemini-pro")

        configuration = Configuration("development", str(config_dir))

        assert configuration.get_configuration("MODEL_NAME", str) == "gemini-pro"

    def test_missing_file_uses_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MODEL_NAME", "from-env")

        configuration = Configuration("staging", str(tmp_path))

        assert configuration.get_configuration("MODEL_NAME", str) == "from-env"

    def test_default_is_used_for_missing_or_empty_keys(self, config_dir: Path) -> None:
        configuration = Configuration("development", str(config_dir))

        assert configuration.get_configuration("NOT_A_KEY_XYZ", str, default="x") == "x"
        assert configuration.get_configuration("EMPTY_VALUE", int, default=3) == 3
        assert configuration.get_configuration("NOT_A_KEY_XYZ", bool, default=False) is False

    def test_missing_key_without_default_raises(self, config_dir: Path) -> None:
        configuration = Configuration("development", str(config_dir))

        with pytest.raises(ValueError, match="NOT_A_KEY_XYZ"):
            configuration.get_configuration("NOT_A_KEY_XYZ", str)

    def test_invalid_value_raises(self, config_dir: Path) -> None:
        configuration = Configuration("development", str(config_dir))

        with pytest.raises(ValueError, match="MODEL_NAME"):
            configuration.get_configuration("MODEL_NAME", int)


@pytest.mark.unit
def test_logger_returns_named_logger_with_level() -> None:
    logger = Logger(log_level="debug").get_logger("ComponentTest")

    assert logger.name == "ComponentTest"
    assert logger.level == 10
