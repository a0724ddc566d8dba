"""
AI Assistant Client

Talks to any OpenAI-compatible chat completions endpoint, so we use the
openai library (the default base URL is Gemini's OpenAI-compatible API).

AI is used for:
- Drafting job descriptions for recruiters
- Resume summary feedback for candidates
- The career assistant chat widget

Failures never reach the caller: each method logs the error and returns a
fixed fallback message instead.
"""
from typing import List, Optional
from openai import OpenAI

from jobportal.core.config import Settings, get_settings
from jobportal.core.log import get_logger
from jobportal.schemas.schemas import ChatRole, ChatTurn

logger = get_logger(__name__)

ASSISTANT_SYSTEM_INSTRUCTION = (
    "You are a professional AI Career Assistant for JobPortal. Your goal is to help users "
    "with job searches, resume improvements, interview preparation, and general career advice. "
    "Keep your responses concise, encouraging, and professional. If a user asks about the "
    "website, tell them you can help find jobs or build profiles."
)

ASSISTANT_GREETING = (
    "Hello! I'm your AI Career Assistant. How can I help you today? I can review your resume "
    "summary, suggest interview tips, or help you find specific roles."
)

# Fallback replies
DESCRIPTION_EMPTY = "Failed to generate description."
DESCRIPTION_ERROR = "Error generating content. Please try manual entry."
FEEDBACK_EMPTY = "No feedback available."
FEEDBACK_ERROR = "Could not generate AI tips."
CHAT_EMPTY = "I'm sorry, I couldn't process that request."
CHAT_ERROR = "I'm having trouble connecting right now. Please try again in a moment."


class AIClientNotConfigured(Exception):
    pass


class AssistantClient:
    """
    Wrapper for the chat completions API with one method per product use.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.client = None
        if self.settings.ai_configured:
            self.client = OpenAI(
                api_key=self.settings.ai_api_key,
                base_url=self.settings.ai_base_url
            )
        self.model = self.settings.ai_model

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    def _call_api(self, messages: List[dict], max_tokens: Optional[int] = None,
                  temperature: Optional[float] = None) -> str:
        """
        Internal method to call the chat completions API.
        Returns raw text response ("" when the model sent no content).
        """
        if self.client is None:
            raise AIClientNotConfigured("AI API key is not configured")

        kwargs = {"model": self.model, "messages": messages}
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        if temperature is not None:
            kwargs["temperature"] = temperature

        response = self.client.chat.completions.create(**kwargs)
        return (response.choices[0].message.content or "").strip()

    def generate_job_description(self, title: str, company: str) -> str:
        """Draft a job description with Role, Responsibilities and Requirements."""
        prompt = (
            f"Generate a professional job description for a {title} position at {company}. "
            "Keep it concise with sections for Role, Responsibilities, and Requirements."
        )
        try:
            text = self._call_api([{"role": "user", "content": prompt}])
            return text or DESCRIPTION_EMPTY
        except Exception as e:
            logger.error("Job description generation failed: %s", e)
            return DESCRIPTION_ERROR

    def get_resume_feedback(self, summary: str) -> str:
        """Three actionable tips for a candidate summary."""
        prompt = (
            "Acting as a professional recruiter, provide 3 actionable tips to improve "
            f"this candidate summary: \"{summary}\""
        )
        try:
            text = self._call_api([{"role": "user", "content": prompt}])
            return text or FEEDBACK_EMPTY
        except Exception as e:
            logger.error("Resume feedback failed: %s", e)
            return FEEDBACK_ERROR

    def chat_with_assistant(self, message: str, history: List[ChatTurn]) -> str:
        """
        Continue a career assistant conversation.

        Args:
            message: new user message
            history: previous turns, oldest first ("model" turns are sent
                as "assistant")
        """
        messages = [{"role": "system", "content": ASSISTANT_SYSTEM_INSTRUCTION}]
        for turn in history:
            role = "assistant" if turn.role == ChatRole.model else "user"
            messages.append({"role": role, "content": turn.text})
        messages.append({"role": "user", "content": message})

        try:
            text = self._call_api(messages, max_tokens=500, temperature=0.7)
            return text or CHAT_EMPTY
        except Exception as e:
            logger.error("Assistant chat failed: %s", e)
            return CHAT_ERROR

    def test_connection(self) -> bool:
        """Test if the AI API is reachable"""
        try:
            response = self._call_api(
                [
                    {"role": "system", "content": "You are a test assistant."},
                    {"role": "user", "content": "Reply with exactly: OK"},
                ],
                max_tokens=10
            )
            return "OK" in response.upper()
        except Exception as e:
            logger.warning("AI connection failed: %s", e)
            return False


# Singleton instance
_assistant_client: AssistantClient = None


def get_assistant_client() -> AssistantClient:
    """Get or create the assistant client (singleton pattern)"""
    global _assistant_client
    if _assistant_client is None:
        _assistant_client = AssistantClient()
    return _assistant_client
