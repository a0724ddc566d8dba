"""
Unit tests for jobportal/services/ai_client.py

The OpenAI client is replaced with a MagicMock; no network calls are made.
"""

from unittest.mock import MagicMock

import pytest

from jobportal.core.config import Settings
from jobportal.schemas.schemas import ChatRole, ChatTurn
from jobportal.services import ai_client
from jobportal.services.ai_client import AssistantClient


def _completion(content):
    response = MagicMock()
    response.choices[0].message.content = content
    return response


@pytest.fixture
def unconfigured():
    return AssistantClient(Settings(_env_file=None, ai_api_key=""))


@pytest.fixture
def assistant():
    """Configured client whose OpenAI transport is a mock."""
    client = AssistantClient(Settings(_env_file=None, ai_api_key="test-key", ai_model="test-model"))
    client.client = MagicMock()
    return client


class TestUnconfigured:
    def test_no_openai_client(self, unconfigured):
        assert unconfigured.is_configured is False

    def test_fallbacks(self, unconfigured):
        assert unconfigured.generate_job_description("Dev", "Acme") == ai_client.DESCRIPTION_ERROR
        assert unconfigured.get_resume_feedback("I code") == ai_client.FEEDBACK_ERROR
        assert unconfigured.chat_with_assistant("hi", []) == ai_client.CHAT_ERROR
        assert unconfigured.test_connection() is False


class TestJobDescription:
    def test_prompt_and_reply(self, assistant):
        assistant.client.chat.completions.create.return_value = _completion("  Role: ship code  ")

        assert assistant.generate_job_description("Backend Engineer", "Acme") == "Role: ship code"

        kwargs = assistant.client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        prompt = kwargs["messages"][0]["content"]
        assert "Backend Engineer position at Acme" in prompt
        assert "Role, Responsibilities, and Requirements" in prompt

    def test_empty_reply(self, assistant):
        assistant.client.chat.completions.create.return_value = _completion(None)
        assert assistant.generate_job_description("Dev", "Acme") == ai_client.DESCRIPTION_EMPTY

    def test_api_error(self, assistant):
        assistant.client.chat.completions.create.side_effect = RuntimeError("quota")
        assert assistant.generate_job_description("Dev", "Acme") == ai_client.DESCRIPTION_ERROR


class TestResumeFeedback:
    def test_summary_is_quoted(self, assistant):
        assistant.client.chat.completions.create.return_value = _completion("1. Add metrics")

        assert assistant.get_resume_feedback("Java dev") == "1. Add metrics"
        prompt = assistant.client.chat.completions.create.call_args.kwargs["messages"][0]["content"]
        assert '"Java dev"' in prompt
        assert "3 actionable tips" in prompt

    def test_empty_reply(self, assistant):
        assistant.client.chat.completions.create.return_value = _completion("")
        assert assistant.get_resume_feedback("x") == ai_client.FEEDBACK_EMPTY


class TestChat:
    def test_history_roles(self, assistant):
        assistant.client.chat.completions.create.return_value = _completion("Sure!")
        history = [
            ChatTurn(role=ChatRole.model, text=ai_client.ASSISTANT_GREETING),
            ChatTurn(role=ChatRole.user, text="Find me Python jobs"),
            ChatTurn(role=ChatRole.model, text="Try Bangalore."),
        ]

        assert assistant.chat_with_assistant("And remote?", history) == "Sure!"

        kwargs = assistant.client.chat.completions.create.call_args.kwargs
        assert [m["role"] for m in kwargs["messages"]] == ["system", "assistant", "user", "assistant", "user"]
        assert kwargs["messages"][0]["content"] == ai_client.ASSISTANT_SYSTEM_INSTRUCTION
        assert kwargs["messages"][-1]["content"] == "And remote?"
        assert kwargs["max_tokens"] == 500
        assert kwargs["temperature"] == 0.7

    def test_empty_reply(self, assistant):
        assistant.client.chat.completions.create.return_value = _completion(None)
        assert assistant.chat_with_assistant("hi", []) == ai_client.CHAT_EMPTY

    def test_api_error(self, assistant):
        assistant.client.chat.completions.create.side_effect = ConnectionError("down")
        assert assistant.chat_with_assistant("hi", []) == ai_client.CHAT_ERROR


def test_connection_check(assistant):
    assistant.client.chat.completions.create.return_value = _completion("ok")
    assert assistant.test_connection() is True
