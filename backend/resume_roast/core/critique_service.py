"""
Critique Service: résumé text in, roast out.

Two paths:
- Demo: no usable LLM credential. A canned roast with a random score,
  tiered with DEMO_TIERS. No outbound call.
- Live: one call to the configured LLM provider, score parsed from the
  reply, tiered with LIVE_TIERS.
"""
from __future__ import annotations

import logging
import random
from functools import lru_cache
from typing import Optional

from resume_roast.config import Settings, get_settings
from resume_roast.core.demo_roasts import render_demo_roast
from resume_roast.core.prompts import PromptVersion, Prompts
from resume_roast.core.scoring import (
    DEMO_SCORE_RANGE,
    DEMO_TIERS,
    parse_reply,
    roast_level_for,
)
from resume_roast.models.schemas import CritiqueRequest, CritiqueResponse
from resume_roast.services.llm_service import LLMService
from resume_roast.utils.prometheus_metrics import (
    record_roast,
    record_validation_failure,
    track_request_metrics,
)

logger = logging.getLogger(__name__)

EMPTY_REPLY_TEXT = "AI is taking a coffee break. Try again!"


class CritiqueError(Exception):
    """Base for errors surfaced to API callers."""
    status_code = 500
    default_message = "Critique failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequestError(CritiqueError):
    """Raised when resume text or filename is missing."""
    status_code = 400
    default_message = "Resume text and filename are required"


class CritiqueGenerationError(CritiqueError):
    """Raised when the live LLM call fails for any reason."""
    status_code = 500
    default_message = (
        "Failed to generate critique. The AI is probably laughing too hard "
        "at your resume to respond properly. 😂"
    )


class CritiqueService:
    """Orchestrates one critique request end to end."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        llm_service: Optional[LLMService] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize with optional LLM service and RNG for dependency injection."""
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()
        self.version = PromptVersion.V1

        if self.settings.has_llm_credential():
            self.llm = llm_service or LLMService(self.settings)
        else:
            # An injected client is ignored too: no key means no outbound call.
            self.llm = None
            logger.warning(
                f"No API key for LLM provider '{self.settings.llm_provider}' - "
                "serving demo roasts"
            )

    @property
    def mode(self) -> str:
        return "live" if self.llm is not None else "demo"

    @track_request_metrics("critique")
    def submit(self, request: CritiqueRequest) -> CritiqueResponse:
        """
        Roast one résumé.

        Raises:
            InvalidRequestError: resume_text or filename is empty
            CritiqueGenerationError: the live LLM call failed
        """
        if not request.resume_text.strip() or not request.filename.strip():
            record_validation_failure("request")
            raise InvalidRequestError()

        if self.llm is None:
            response = self._demo_critique(request)
        else:
            response = self._live_critique(request)

        record_roast(response.roast_level.value, response.score, self.mode)
        return response

    def _demo_critique(self, request: CritiqueRequest) -> CritiqueResponse:
        critique = render_demo_roast(request.filename, self.rng)
        score = self.rng.randint(*DEMO_SCORE_RANGE)
        logger.info(f"Demo roast for '{request.filename}': score {score}")
        return CritiqueResponse(
            critique=critique,
            score=score,
            roast_level=roast_level_for(score, DEMO_TIERS),
        )

    def _live_critique(self, request: CritiqueRequest) -> CritiqueResponse:
        prompt = Prompts.get_roast_prompt(
            self.version, request.filename, request.resume_text
        )
        logger.info(
            f"Roasting '{request.filename}' (length: {len(request.resume_text)})"
        )

        try:
            resp = self.llm.generate_response(user_prompt=prompt)
        except Exception as e:
            logger.error(f"Error generating critique: {e}")
            raise CritiqueGenerationError() from e

        critique = resp.get("content") or EMPTY_REPLY_TEXT
        score, roast_level = parse_reply(critique, self.rng)
        return CritiqueResponse(critique=critique, score=score, roast_level=roast_level)


@lru_cache
def get_critique_service() -> CritiqueService:
    """Process-wide service, built on first use from settings."""
    return CritiqueService(get_settings())
