"""
Integration tests for the utterance interpreter.

Tests the complete pipeline: meta-commands, correction, intents and paths.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from voice_nlp import config as voice_config
from voice_nlp.interpreter import (
    UtteranceInterpreter,
    InterpreterConfig,
    IntentDefinition,
    Empty,
    MetaCommand,
    Task,
    Conversation,
    get_default_interpreter,
    interpret_text,
    classify_simple,
)


class TestInterpreterPipeline:
    """Test the complete interpretation pipeline."""

    def setup_method(self):
        """Setup test fixtures."""
        self.interpreter = UtteranceInterpreter()

    @pytest.mark.parametrize("text", ["", "   ", "\n\t "])
    def test_empty_input(self, text):
        """Blank input short-circuits before anything else."""
        result = self.interpreter.interpret(text)

        assert isinstance(result, Empty)
        assert result.to_dict() == {'type': 'empty'}

    def test_meta_command_substring(self):
        result = self.interpreter.interpret("reset the conversation")

        assert isinstance(result, MetaCommand)
        assert result.action == 'reset'
        assert result.confidence == 1.0
        assert result.original_text == "reset the conversation"

    def test_meta_command_single_word(self):
        result = self.interpreter.interpret("clear")

        assert isinstance(result, MetaCommand)
        assert result.action == 'reset'

    def test_meta_command_takes_priority(self):
        """A trigger phrase wins even when a task intent would match."""
        result = self.interpreter.interpret("clear the file server.js")

        assert isinstance(result, MetaCommand)
        assert result.action == 'reset'

    def test_task_with_homophone(self):
        """'red' is read as 'read', and the file name is picked up."""
        result = self.interpreter.interpret("red the file server.js")

        assert isinstance(result, Task)
        assert result.intent == 'file_read'
        assert result.confidence == pytest.approx(0.75)
        assert 'server.js' in result.file_paths
        assert result.corrected_text == "read the file server.js"
        assert result.enhanced_prompt == (
            "read the file server.js\n\n"
            "[Context: User likely wants to read/view a file]\n"
            "[Detected file paths: server.js]"
        )

    def test_paths_come_from_original_text(self):
        """Correction lowercases, path extraction does not."""
        result = self.interpreter.interpret("red the file Server.JS")

        assert isinstance(result, Task)
        assert result.file_paths == ('Server.JS',)
        assert result.corrected_text == "read the file server.js"

    def test_task_without_paths(self):
        result = self.interpreter.interpret("in stall the express package")

        assert isinstance(result, Task)
        assert result.intent == 'install'
        assert result.file_paths == ()
        assert result.enhanced_prompt == (
            "install the express package\n\n"
            "[Context: User likely wants to install a package or dependency]"
        )

    def test_delete_task(self):
        """'the lead' is corrected to 'delete' and clears the stricter 0.7 floor."""
        result = self.interpreter.interpret("the lead that file")

        assert isinstance(result, Task)
        assert result.intent == 'file_delete'
        assert result.confidence == pytest.approx(0.75)
        assert result.corrected_text == "delete that file"

    def test_conversation_fallback(self):
        result = self.interpreter.interpret("the quick brown fox jumps")

        assert isinstance(result, Conversation)
        assert result.corrected_text == "the quick brown fox jumps"
        assert result.enhanced_prompt == result.corrected_text
        assert result.file_paths == ()

    def test_task_to_dict(self):
        data = self.interpreter.interpret("red the file server.js").to_dict()

        assert data['type'] == 'task'
        assert data['intent'] == 'file_read'
        assert data['file_paths'] == ['server.js']
        assert data['original_text'] == "red the file server.js"

    def test_non_ascii_input(self):
        result = self.interpreter.interpret("ünïcödé ñ 日本語")

        assert isinstance(result, Conversation)

    def test_long_input(self):
        result = self.interpreter.interpret("lorem ipsum dolor " * 200)

        assert isinstance(result, (Task, Conversation))

    def test_suggestions(self):
        """Unclassifiable input gets rephrase prompts, tasks get none."""
        assert len(self.interpreter.get_suggestions("the quick brown fox jumps")) == 3
        assert self.interpreter.get_suggestions("red the file server.js") == []

    def test_concurrent_calls_agree(self):
        """One shared instance gives the same answers from many threads."""
        utterances = [
            "red the file server.js",
            "clear",
            "the quick brown fox jumps",
            "in stall the express package",
            "",
        ] * 20
        expected = [self.interpreter.interpret(u) for u in utterances]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(self.interpreter.interpret, utterances))

        assert results == expected


class TestGlobalTaskFloor:
    """The global floor applies on top of each intent's own floor."""

    def _interpreter(self, **overrides):
        greet = IntentDefinition(
            'greet', ('hello', 'world', 'there', 'friend', 'buddy'), (), 0.3
        )
        config = InterpreterConfig(
            correction_rules=(),
            meta_commands=(),
            intents=(greet,),
            **overrides
        )
        return UtteranceInterpreter(config)

    def test_low_confidence_intent_is_conversation(self):
        """2.0 / 5 = 0.4 clears the intent floor but not the 0.5 global floor."""
        interpreter = self._interpreter()

        assert interpreter.classify("hello").confidence == pytest.approx(0.4)
        assert isinstance(interpreter.interpret("hello"), Conversation)

    def test_lower_global_floor_allows_task(self):
        interpreter = self._interpreter(task_confidence_threshold=0.3)

        result = interpreter.interpret("hello")

        assert isinstance(result, Task)
        assert result.intent == 'greet'
        assert result.enhanced_prompt == "hello\n\n[Context: User likely wants to greet]"


class TestIntentContext:
    """Every Task prompt carries an intent annotation."""

    def _interpreter(self, *intents):
        config = InterpreterConfig(
            correction_rules=(),
            meta_commands=(),
            intents=intents,
        )
        return UtteranceInterpreter(config)

    def test_intent_without_description_uses_name(self):
        interpreter = self._interpreter(IntentDefinition('deploy', ('deploy',), ()))

        result = interpreter.interpret("deploy now")

        assert isinstance(result, Task)
        assert result.intent == 'deploy'
        assert result.enhanced_prompt == "deploy now\n\n[Context: User likely wants to deploy]"
        assert result.enhanced_prompt != result.corrected_text

    def test_name_underscores_become_spaces(self):
        interpreter = self._interpreter(
            IntentDefinition('restart_server', ('restart',), ())
        )

        assert interpreter.get_intent_context('restart_server') == 'restart server'

    def test_description_wins_over_name(self):
        interpreter = self._interpreter(
            IntentDefinition('deploy', ('deploy',), (), description='ship a release')
        )

        assert interpreter.get_intent_context('deploy') == 'ship a release'


class TestIntegration:
    """Test the default instance and convenience wrappers."""

    def test_default_interpreter_is_shared(self):
        assert get_default_interpreter() is get_default_interpreter()

    def test_interpret_text(self):
        result = interpret_text("red the file server.js")

        assert isinstance(result, Task)
        assert result.intent == 'file_read'

    def test_classify_simple(self):
        assert classify_simple("scroll down") == 'scroll_down'
        assert classify_simple("red the file server.js") == 'file_read'
        assert classify_simple("the quick brown fox jumps") is None


class TestConfiguration:
    """Test configuration loading and validation."""

    def test_defaults(self):
        config = InterpreterConfig.default()

        assert config.word_similarity_threshold == 0.70
        assert config.meta_command_threshold == 0.85
        assert config.task_confidence_threshold == 0.50
        assert [c.action for c in config.meta_commands][:2] == ['reset', 'save']
        assert config.get_intent('file_delete').confidence == 0.70

    def test_load_config_applies_overrides(self, monkeypatch):
        monkeypatch.setattr(voice_config, 'META_COMMAND_THRESHOLD', 0.9)

        assert voice_config.load_config().meta_command_threshold == 0.9

    def test_bad_environment_value(self, monkeypatch):
        monkeypatch.setenv('VOICE_NLP_TEST_VALUE', 'not-a-number')

        with pytest.raises(ValueError, match='VOICE_NLP_TEST_VALUE'):
            voice_config._env_float('VOICE_NLP_TEST_VALUE')

    def test_threshold_out_of_range(self):
        with pytest.raises(ValueError):
            InterpreterConfig.default(meta_command_threshold=1.5)

    def test_config_is_immutable(self):
        config = InterpreterConfig.default()

        with pytest.raises(AttributeError):
            config.meta_command_threshold = 0.1


# Run tests with: pytest tests/test_interpreter/test_interpreter.py -v
