"""Prompt chains."""

from .stuff import DEFAULT_STUFF_QA_TEMPLATE, StuffDocumentsChain, StuffPromptConfig

__all__ = ["DEFAULT_STUFF_QA_TEMPLATE", "StuffDocumentsChain", "StuffPromptConfig"]
