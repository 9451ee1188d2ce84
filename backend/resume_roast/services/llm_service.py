"""
LLM Service: single-provider text completion

Architecture:
- Groq (default): OpenAI-compatible endpoint, driven through ChatOpenAI
- OpenAI: ChatOpenAI
- Google Gemini: ChatGoogleGenerativeAI
- Uses LangChain for provider abstraction

One call per generate_response. No retries at any layer: the provider
client is built with max_retries=0 and failures propagate to the caller.
"""
import logging
import time
from contextlib import nullcontext
from enum import Enum
from typing import Any, Dict, Optional

import mlflow
import tiktoken
from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from resume_roast.config import Settings, get_settings
from resume_roast.utils.prometheus_metrics import record_llm_call, record_llm_usage

logger = logging.getLogger(__name__)

# metrics label for provider calls
OPERATION = "roast"


class LLMProvider(str, Enum):
    """Available LLM providers."""
    GROQ = "groq"
    OPENAI = "openai"
    GEMINI = "gemini"


class LLMService:
    """
    Thin wrapper around one LangChain chat model.

    Every call is:
    - Counted and timed in Prometheus
    - Logged to MLflow when MLFLOW_ENABLED is set
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.provider = LLMProvider(self.settings.llm_provider)
        self.model = self.settings.llm_model()

        api_key = self.settings.llm_api_key()
        if api_key is None:
            raise RuntimeError(
                f"No API key configured for LLM provider '{self.provider.value}'"
            )

        self.client = self._init_client(api_key)
        self._encoding = None

        if self.settings.mlflow_enabled:
            mlflow.set_tracking_uri(self.settings.mlflow_tracking_uri)
            mlflow.set_experiment(self.settings.experiment_name)

        logger.info(f"LLM Service initialized: {self.provider.value} ({self.model})")

    def _init_client(self, api_key: str):
        if self.provider == LLMProvider.GEMINI:
            return ChatGoogleGenerativeAI(
                model=self.model,
                google_api_key=api_key,
                temperature=self.settings.llm_temperature,
                max_output_tokens=self.settings.llm_max_tokens,
                timeout=self.settings.timeout_seconds,
                max_retries=0,
            )

        base_url = (
            self.settings.groq_base_url
            if self.provider == LLMProvider.GROQ
            else self.settings.openai_base_url
        )
        return ChatOpenAI(
            model=self.model,
            api_key=api_key,
            base_url=base_url,
            temperature=self.settings.llm_temperature,
            max_tokens=self.settings.llm_max_tokens,
            timeout=self.settings.timeout_seconds,
            max_retries=0,
        )

    def count_tokens(self, text: str) -> int:
        """
        Estimate token count for usage tracking.
        Note: cl100k approximation regardless of provider.
        """
        try:
            if self._encoding is None:
                self._encoding = tiktoken.get_encoding("cl100k_base")
            return len(self._encoding.encode(text))
        except Exception as e:
            logger.warning(f"Token counting failed: {e}. Using word estimate.")
            return int(len(text.split()) * 1.3)

    @staticmethod
    def _content_text(content: Any) -> str:
        # Gemini may answer with a list of content parts instead of a str
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            parts = []
            for part in content:
                if isinstance(part, str):
                    parts.append(part)
                elif isinstance(part, dict) and part.get("type") == "text":
                    parts.append(part.get("text", ""))
            return "".join(parts)
        return ""

    def _tracking_run(self):
        if not self.settings.mlflow_enabled:
            return nullcontext()
        return mlflow.start_run(nested=True, run_name="roast_generation")

    def generate_response(self, user_prompt: str) -> Dict[str, Any]:
        """
        Send one prompt to the configured provider.

        Args:
            user_prompt: Prompt sent as the only (user) message

        Returns:
            Dict with:
            - content: Generated text (may be empty)
            - usage: Token counts
            - model: Model used
            - provider: Provider used
        """
        messages = [HumanMessage(content=user_prompt)]
        input_tokens = self.count_tokens(user_prompt)
        start_time = time.time()

        with self._tracking_run():
            try:
                response = self.client.invoke(messages)
            except Exception as e:
                duration = time.time() - start_time
                record_llm_call(OPERATION, self.model, "failure", duration)
                logger.error(f"{self.provider.value} call failed after {duration:.2f}s: {e}")
                raise

            duration = time.time() - start_time
            content = self._content_text(response.content)
            output_tokens = self.count_tokens(content)

            record_llm_call(OPERATION, self.model, "success", duration)
            record_llm_usage(OPERATION, input_tokens, output_tokens)

            if self.settings.mlflow_enabled:
                mlflow.log_param("provider", self.provider.value)
                mlflow.log_param("model", self.model)
                mlflow.log_param("temperature", self.settings.llm_temperature)
                mlflow.log_param("input_tokens", input_tokens)
                mlflow.log_metric("duration_seconds", duration)
                mlflow.log_metric("output_tokens", output_tokens)
                mlflow.log_metric("total_tokens", input_tokens + output_tokens)

        logger.info(
            f"✓ {self.provider.value} responded in {duration:.2f}s "
            f"({output_tokens} output tokens)"
        )

        return {
            "content": content,
            "usage": {
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "total_tokens": input_tokens + output_tokens,
            },
            "model": self.model,
            "provider": self.provider.value,
        }
