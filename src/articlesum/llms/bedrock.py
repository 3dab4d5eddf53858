"""Anthropic Claude text completions on AWS Bedrock."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from articlesum.errors import AdapterError
from articlesum.metrics.observability import get_logger
from articlesum.models import GenerationOptions, GenerationRequest, GenerationResult

from .base import GenerationObserver, LanguageModel

HUMAN_ASSISTANT_FORMAT = "\n\nHuman:{prompt}\n\nAssistant:"


@dataclass(frozen=True)
class BedrockConfig:
    """Configuration for the Bedrock completion backend."""

    model_id: str = "anthropic.claude-v2"
    prompt_format: str = HUMAN_ASSISTANT_FORMAT
    use_human_assistant_prompt: bool = True
    region_name: str | None = None
    content_type: str = "application/json"
    accept: str = "application/json"


class BedrockAnthropicModel(LanguageModel):
    """Calls ``InvokeModel`` with the legacy Human/Assistant prompt body."""

    name = "bedrock"

    def __init__(
        self,
        config: BedrockConfig | None = None,
        client: Any | None = None,
        observers: Iterable[GenerationObserver] = (),
    ) -> None:
        super().__init__(observers)
        self._config = config or BedrockConfig()
        self._client = client
        self._logger = get_logger("llms.bedrock")

    @property
    def client(self) -> Any:
        # Credentials and region resolve through the default AWS chain.
        if self._client is None:
            self._client = boto3.client(
                "bedrock-runtime",
                region_name=self._config.region_name,
                config=Config(retries={"total_max_attempts": 1, "mode": "standard"}),
            )
        return self._client

    def format_prompt(self, prompt: str) -> str:
        if not self._config.use_human_assistant_prompt:
            return prompt
        return self._config.prompt_format.format(prompt=prompt)

    def build_payload(self, prompt: str, options: GenerationOptions) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "prompt": self.format_prompt(prompt),
            "max_tokens_to_sample": options.max_tokens,
        }
        if options.temperature:
            payload["temperature"] = options.temperature
        if options.top_p:
            payload["top_p"] = options.top_p
        if options.top_k:
            payload["top_k"] = options.top_k
        if options.stop_sequences:
            payload["stop_sequences"] = list(options.stop_sequences)
        return payload

    def _generate(self, request: GenerationRequest) -> List[GenerationResult]:
        try:
            body = json.dumps(self.build_payload(request.prompt, request.options), allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise AdapterError(f"Failed to encode request: {exc}") from exc

        self._logger.debug("bedrock.invoke", model_id=self._config.model_id, body_bytes=len(body))
        try:
            response = self.client.invoke_model(
                modelId=self._config.model_id,
                body=body,
                contentType=self._config.content_type,
                accept=self._config.accept,
            )
        except (BotoCoreError, ClientError) as exc:
            raise AdapterError(str(exc)) from exc

        data = self._decode(response)
        return [GenerationResult(text=data["completion"], raw=data)]

    @staticmethod
    def _decode(response: Dict[str, Any]) -> Dict[str, Any]:
        stream = response.get("body")
        if stream is None:
            raise AdapterError("Response has no body")
        try:
            raw = stream.read()
        except BotoCoreError as exc:
            raise AdapterError(f"Failed to read response: {exc}") from exc
        finally:
            close = getattr(stream, "close", None)
            if close is not None:
                close()
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise AdapterError(f"Failed to decode response: {exc}") from exc
        if not isinstance(data, dict) or not isinstance(data.get("completion"), str):
            raise AdapterError("Response is missing the 'completion' field")
        return data
