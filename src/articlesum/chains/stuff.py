"""Stuff-documents question answering: every document goes into one prompt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from langchain_core.documents import Document
from langchain_core.prompts import PromptTemplate

from articlesum.llms.base import LanguageModel
from articlesum.metrics.observability import get_logger
from articlesum.models import GenerationOptions

DEFAULT_STUFF_QA_TEMPLATE = (
    "Use the following pieces of context to answer the question at the end. "
    "If you don't know the answer, just say that you don't know, don't try to make up an answer.\n\n"
    "{context}\n\n"
    "Question: {question}\n"
    "Helpful Answer:"
)


@dataclass(frozen=True)
class StuffPromptConfig:
    """Configuration for prompt construction."""

    template: str = DEFAULT_STUFF_QA_TEMPLATE
    document_separator: str = "\n\n"


class StuffDocumentsChain:
    """Builds one prompt from all documents and asks the model once."""

    def __init__(self, model: LanguageModel, config: StuffPromptConfig | None = None) -> None:
        self._model = model
        self._config = config or StuffPromptConfig()
        self._prompt = PromptTemplate.from_template(self._config.template)
        self._logger = get_logger("chains.stuff")

    @property
    def model(self) -> LanguageModel:
        return self._model

    def build_context(self, documents: Sequence[Document]) -> str:
        return self._config.document_separator.join(doc.page_content for doc in documents)

    def build_prompt(self, documents: Sequence[Document], question: str) -> str:
        return self._prompt.format(context=self.build_context(documents), question=question)

    def run(
        self,
        documents: Sequence[Document],
        question: str,
        options: GenerationOptions | None = None,
    ) -> str:
        prompt = self.build_prompt(documents, question)
        self._logger.info(
            "stuff.prompt",
            document_count=len(documents),
            prompt_chars=len(prompt),
            prompt_tokens_estimate=self._model.get_num_tokens(prompt),
        )
        return self._model.generate(prompt, options).text
