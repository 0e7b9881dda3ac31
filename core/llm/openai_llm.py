# core/llm/openai_llm.py
"""OpenAI-compatible chat completions over HTTP"""

import logging
import threading
from typing import Dict, List, Optional, Union

import requests

from ..config import LLMConfig
from ..exceptions import ConfigurationError, ModelError, handle_model_error
from .base import BaseLLM, ChatMessage, LLMResponse

logger = logging.getLogger(__name__)


class OpenAIChatLLM(BaseLLM):
    """Chat completions API wrapper"""

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = "gpt-4o-mini",
        base_url: str = "https://api.openai.com/v1",
        temperature: float = 0.2,
        timeout: float = 60.0,
        session: Optional[requests.Session] = None,
    ):
        if not api_key:
            raise ConfigurationError("OPENAI_API_KEY", "not set")
        super().__init__(model_name)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.temperature = temperature
        self.timeout = timeout
        # One session per thread unless a session is injected
        self._shared_session = session
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        """Injected session, else one session per worker thread"""
        if self._shared_session is not None:
            return self._shared_session
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = requests.Session()
        return session

    @classmethod
    def from_config(cls, config: LLMConfig) -> "OpenAIChatLLM":
        return cls(
            api_key=config.api_key,
            model_name=config.model,
            base_url=config.base_url,
            temperature=config.temperature,
            timeout=config.timeout_seconds,
        )

    @handle_model_error
    def chat(
        self, messages: List[Union[ChatMessage, Dict[str, str]]], **kwargs
    ) -> LLMResponse:
        """Request one completion; any non-2xx status is a ModelError"""
        payload = {
            "model": self.model_name,
            "messages": self.format_messages(messages),
            "temperature": kwargs.get("temperature", self.temperature),
        }

        logger.debug(f"Chat completion request: {len(payload['messages'])} messages")
        response = self.session.post(
            f"{self.base_url}/chat/completions",
            json=payload,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.api_key}",
            },
            timeout=self.timeout,
        )

        if not response.ok:
            logger.error(f"OpenAI error: {response.status_code}")
            raise ModelError(
                f"OpenAI error: {response.status_code}",
                self.model_name,
                "MODEL_HTTP_ERROR",
            )

        data = response.json()
        choices = data.get("choices") or [{}]
        content = (choices[0].get("message") or {}).get("content") or ""

        return LLMResponse(
            content=content,
            model_name=data.get("model", self.model_name),
            usage=data.get("usage") or {},
        )

    def is_available(self) -> bool:
        """Check if the models endpoint answers with our credential"""
        try:
            response = self.session.get(
                f"{self.base_url}/models",
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=5,
            )
            return response.ok
        except requests.RequestException:
            return False
