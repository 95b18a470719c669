from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from typing import Any, Protocol

import vertexai
from vertexai.generative_models import GenerationConfig, GenerativeModel

logger = logging.getLogger(__name__)


class LLMError(RuntimeError):
    """Raised for any failed completion: configuration, transport or parsing."""


@dataclass(frozen=True)
class LLMRequest:
    system_prompt: str
    user_prompt: str
    temperature: float = 0.7
    max_tokens: int = 2000
    json_mode: bool = True


@dataclass(frozen=True)
class LLMResponse:
    data: Any
    tokens_used: int = 0
    model: str | None = None


class LLMClient(Protocol):
    model_name: str

    def complete(self, request: LLMRequest) -> LLMResponse:
        ...


class VertexAIAdapter:
    """Adapter for Vertex AI Gemini models."""

    def __init__(
        self,
        *,
        project_id: str | None,
        location: str = "asia-northeast1",
        model_name: str = "gemini-1.5-pro",
    ) -> None:
        """Initialize Vertex AI adapter.

        Vertex AI itself is initialised on the first request, so a missing
        project or bad credentials surface as ``LLMError`` from ``complete``.

        Args:
            project_id: GCP project ID
            location: Vertex AI location
            model_name: Model name (e.g., "gemini-1.5-pro")
        """
        self.project_id = project_id
        self.location = location
        self.model_name = model_name
        self._initialised = False
        self._init_lock = threading.Lock()

    def complete(self, request: LLMRequest) -> LLMResponse:
        """Run one completion and parse the JSON body when ``json_mode`` is set.

        Raises:
            LLMError: on missing configuration, API failure or invalid JSON
        """
        text, tokens_used = self.generate_content(request)
        data = self.parse_json(text) if request.json_mode else text
        return LLMResponse(data=data, tokens_used=tokens_used, model=self.model_name)

    def generate_content(self, request: LLMRequest) -> tuple[str, int]:
        """Generate raw text and report the total token count."""
        model = self._model(request.system_prompt)
        generation_config = GenerationConfig(
            temperature=request.temperature,
            max_output_tokens=request.max_tokens,
            response_mime_type="application/json" if request.json_mode else None,
        )

        try:
            response = model.generate_content(
                request.user_prompt,
                generation_config=generation_config,
            )
            generated_text = response.text
        except Exception as exc:
            raise LLMError(f"Vertex AI request failed: {exc}") from exc

        usage = getattr(response, "usage_metadata", None)
        tokens_used = int(getattr(usage, "total_token_count", 0) or 0)

        logger.info(
            "Generated content with Vertex AI",
            extra={
                "model": self.model_name,
                "temperature": request.temperature,
                "input_length": len(request.user_prompt),
                "output_length": len(generated_text),
                "tokens_used": tokens_used,
            },
        )

        return generated_text, tokens_used

    @staticmethod
    def parse_json(text: str) -> Any:
        """Parse a JSON body, tolerating a surrounding markdown code fence."""
        body = text.strip()
        if body.startswith("```json"):
            body = body[7:]
        if body.startswith("```"):
            body = body[3:]
        if body.endswith("```"):
            body = body[:-3]

        try:
            return json.loads(body.strip())
        except json.JSONDecodeError as exc:
            logger.error(
                "Failed to parse JSON response",
                extra={"response": text[:500]},
            )
            raise LLMError(f"Invalid JSON response: {exc}") from exc

    def _model(self, system_prompt: str) -> GenerativeModel:
        if not self.project_id:
            raise LLMError("Vertex AI project is not configured")

        with self._init_lock:
            if not self._initialised:
                try:
                    vertexai.init(project=self.project_id, location=self.location)
                except Exception as exc:
                    raise LLMError(f"Vertex AI initialisation failed: {exc}") from exc
                self._initialised = True

        return GenerativeModel(self.model_name, system_instruction=[system_prompt])


__all__ = ["LLMClient", "LLMError", "LLMRequest", "LLMResponse", "VertexAIAdapter"]
