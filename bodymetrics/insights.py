"""
Natural-language progress insight.

`InsightService.summarize` never raises: a fallback narrative is part of the
contract, so callers can render the result unconditionally.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Optional

import google.generativeai as genai

from bodymetrics.models import AppState

logger = logging.getLogger(__name__)

RECENT_ENTRIES = 5
TEMPERATURE = 0.7

PERSONA = (
    "You are a high-performance fitness analyst. Your tone is professional, "
    "futuristic, and encouraging. Use tech-inspired metaphors."
)

FALLBACK_INSIGHT = (
    "Analyzing biometric data flow... System optimal. "
    "Keep pushing your physical limits."
)


def build_prompt(state: AppState) -> str:
    recent = [e.to_dict() for e in state.entries[-RECENT_ENTRIES:]]
    goals = [g.to_dict() for g in state.goals]
    return (
        "Analyze these body measurement trends and goals. Provide a concise, "
        "high-tech, motivational insight (max 3 sentences).\n"
        f"Data: {json.dumps(recent)}\n"
        f"Goals: {json.dumps(goals)}"
    )


class InsightService(ABC):
    @abstractmethod
    def summarize(self, state: AppState) -> str:
        """Narrative for `state`; implementations return text instead of raising."""


class StaticInsightService(InsightService):
    """Returns a fixed narrative; for offline use and tests."""

    def __init__(self, text: str = FALLBACK_INSIGHT):
        self.text = text

    def summarize(self, state: AppState) -> str:
        return self.text


class GeminiInsightService(InsightService):
    def __init__(self, api_key: Optional[str], model_name: str):
        self.api_key = api_key
        self.model_name = model_name

    def _model(self):
        if not self.api_key:
            raise ValueError("API_KEY not found in environment variables!")
        genai.configure(api_key=self.api_key)
        return genai.GenerativeModel(self.model_name, system_instruction=PERSONA)

    def summarize(self, state: AppState) -> str:
        try:
            response = self._model().generate_content(
                build_prompt(state),
                generation_config={"temperature": TEMPERATURE},
            )
            text = (response.text or "").strip()
            if not text:
                raise ValueError("empty response from Gemini")
            return text
        except Exception:
            logger.exception("Gemini insight request failed")
            return FALLBACK_INSIGHT
