"""Tests for the Gemini text-generation collaborator (SDK mocked)."""
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from tarot_journal import llm


def _response(*texts):
    parts = [SimpleNamespace(text=t) for t in texts]
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))])


@pytest.fixture
def genai(monkeypatch):
    fake = MagicMock()
    monkeypatch.setattr(llm, "genai", fake)
    monkeypatch.setenv("GEMINI_TOKEN", "test-token")
    return fake


class TestChat:

    def test_missing_token_raises(self):
        with pytest.raises(RuntimeError, match="GEMINI_TOKEN"):
            llm.chat("hello")

    def test_joins_candidate_parts(self, genai):
        genai.GenerativeModel.return_value.generate_content.return_value = _response("The Star", "", "rises.")
        assert llm.chat("hello", system_prompt="be kind") == "The Star\nrises."
        genai.configure.assert_called_once_with(api_key="test-token")
        genai.GenerativeModel.assert_called_once_with(model_name="gemini-2.5-flash", system_instruction="be kind")

    def test_temperature_and_model_are_passed(self, genai, monkeypatch):
        monkeypatch.setenv("GEMINI_MODEL", "gemini-env")
        genai.GenerativeModel.return_value.generate_content.return_value = _response("ok")
        llm.chat("hello", model="gemini-other", temperature=0.2)
        assert genai.GenerativeModel.call_args.kwargs["model_name"] == "gemini-other"
        genai.GenerativeModel.return_value.generate_content.assert_called_once_with(
            "hello", generation_config={"temperature": 0.2}
        )

    def test_no_candidates_gives_empty_text(self, genai):
        genai.GenerativeModel.return_value.generate_content.return_value = SimpleNamespace(candidates=[])
        assert llm.chat("hello") == ""
