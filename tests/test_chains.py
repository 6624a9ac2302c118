"""
Tests for LangChain runnable helpers.

Uses LangChain's fake chat model so no provider is contacted.
"""

from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage
from langchain_core.runnables import Runnable

from metaprompt.chains import build_prompt_runnable, prepare_chain
from metaprompt.texts import DisplayTexts


class TestBuildPromptRunnable:
    """Test the compile runnable."""

    def test_returns_runnable(self, sample_schema):
        """Test the helper returns a composable runnable."""
        assert isinstance(build_prompt_runnable(sample_schema), Runnable)

    def test_invoke_compiles_submission(self, minimal_schema):
        """Test invoking the runnable compiles a raw submission."""
        runnable = build_prompt_runnable(minimal_schema)
        assert runnable.invoke({"who": "world"}) == "Hello world"

    def test_invoke_with_pairs(self, sample_schema):
        """Test a pair list submission is accepted."""
        runnable = build_prompt_runnable(sample_schema, DisplayTexts())
        prompt = runnable.invoke([("topic", "tides"), ("keywords", "news")])
        assert prompt.startswith("Write an article about tides.")
        assert "Keywords: news" in prompt
        assert "Cite your sources." not in prompt

    def test_batch(self, minimal_schema):
        """Test several submissions compile independently."""
        runnable = build_prompt_runnable(minimal_schema)
        assert runnable.batch([{"who": "a"}, {"who": "b"}]) == ["Hello a", "Hello b"]


class TestPrepareChain:
    """Test chains ending in a chat model."""

    def test_chat_model_output(self, minimal_schema):
        """Test the compiled prompt is sent to the model."""
        llm = FakeListChatModel(responses=["Bonjour!"])
        chain = prepare_chain(minimal_schema, llm)
        result = chain.invoke({"who": "world"})
        assert isinstance(result, AIMessage)
        assert result.content == "Bonjour!"

    def test_parse_as_string(self, minimal_schema):
        """Test the string parser returns plain text."""
        llm = FakeListChatModel(responses=["Hi there"])
        chain = prepare_chain(minimal_schema, llm, parse_as_string=True)
        assert chain.invoke({"who": "world"}) == "Hi there"

    def test_literal_braces_preserved(self, minimal_schema):
        """Test compiled text with braces is not treated as a template."""
        schema = minimal_schema.model_copy(
            update={"prompt_template": "Return {\"name\": \"{{who}}\"}"}
        )
        runnable = build_prompt_runnable(schema)
        assert runnable.invoke({"who": "x"}) == 'Return {"name": "x"}'
        llm = FakeListChatModel(responses=["ok"])
        assert prepare_chain(schema, llm, parse_as_string=True).invoke({"who": "x"}) == "ok"
