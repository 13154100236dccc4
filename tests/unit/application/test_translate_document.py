"""
Tests for TranslateDocumentUseCase.

Covers ordering, short-circuit on failure and the chunk budget.
"""

from unittest.mock import MagicMock

import pytest

from src.application.use_cases.translate_document import TranslateDocumentUseCase
from src.domain.entities.post_translation import TranslationResult
from src.domain.ports.translator_port import ITranslator
from tests.fakes import ScriptedTranslator

SCENARIO_TEXT = (
    "Sentence one. Sentence two is much longer and exceeds the budget on its own "
    "possibly. Sentence three."
)


def test_default_budget_is_800_characters():
    assert TranslateDocumentUseCase.CHUNK_SIZE == 800


def test_scenario_translates_three_chunks_and_concatenates_in_order():
    translator = ScriptedTranslator()
    use_case = TranslateDocumentUseCase(translator, chunk_size=40)

    result = use_case.execute(SCENARIO_TEXT, "es")

    assert len(translator.calls) == 3
    assert all(language == "es" for _, language in translator.calls)
    assert result == SCENARIO_TEXT.upper() + " "


@pytest.mark.parametrize("failing_chunk", [1, 2, 3])
def test_failure_on_chunk_k_aborts_without_submitting_later_chunks(failing_chunk):
    translator = ScriptedTranslator(fail_on=(failing_chunk,))
    use_case = TranslateDocumentUseCase(translator, chunk_size=40)

    result = use_case.execute(SCENARIO_TEXT, "it")

    assert result is None
    assert len(translator.calls) == failing_chunk


def test_concatenates_in_source_order_whatever_the_content():
    translator = MagicMock(spec=ITranslator)
    translator.translate.side_effect = [
        TranslationResult.success("[3rd?]"),
        TranslationResult.success("[1st?]"),
        TranslationResult.success("[2nd?]"),
    ]
    use_case = TranslateDocumentUseCase(translator, chunk_size=40)

    result = use_case.execute(SCENARIO_TEXT, "de")

    assert result == "[3rd?][1st?][2nd?]"
    submitted = [call.args[0] for call in translator.translate.call_args_list]
    assert submitted[0].startswith("Sentence one.")
    assert submitted[2].startswith("Sentence three.")


def test_empty_body_makes_no_calls():
    translator = ScriptedTranslator()

    assert TranslateDocumentUseCase(translator).execute("", "it") == ""
    assert translator.calls == []


def test_no_separator_is_inserted_between_translations():
    translator = MagicMock(spec=ITranslator)
    translator.translate.side_effect = [
        TranslationResult.success("uno"),
        TranslationResult.success("due"),
    ]
    use_case = TranslateDocumentUseCase(translator, chunk_size=10)

    assert use_case.execute("One two. Three four.", "it") == "unodue"


def test_trailing_newline_does_not_cost_an_extra_call():
    translator = ScriptedTranslator()
    use_case = TranslateDocumentUseCase(translator, chunk_size=13)

    assert use_case.execute("Hello there.\n", "it") == "HELLO THERE. "
    assert len(translator.calls) == 1
