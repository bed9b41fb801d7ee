from enum import StrEnum


class ModelType(StrEnum):
    FLASH = "gemini-3-flash-preview"
    PRO = "gemini-3-pro-preview"
