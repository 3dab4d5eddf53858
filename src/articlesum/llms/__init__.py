"""Language model backends."""

from articlesum.errors import AdapterError, EmptyResultError

from .base import GenerationObserver, LanguageModel
from .bedrock import HUMAN_ASSISTANT_FORMAT, BedrockAnthropicModel, BedrockConfig
from .observers import LoggingObserver
from .static import StaticLanguageModel

__all__ = [
    "AdapterError",
    "BedrockAnthropicModel",
    "BedrockConfig",
    "EmptyResultError",
    "GenerationObserver",
    "HUMAN_ASSISTANT_FORMAT",
    "LanguageModel",
    "LoggingObserver",
    "StaticLanguageModel",
]
