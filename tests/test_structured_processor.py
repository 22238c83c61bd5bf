import logging
from typing import Any

from typing_extensions import override

import pytest

from structured_vars.access import NOT_ACCESSIBLE, ObjectAccessor, PropertyAccessor
from structured_vars.executors import Executor
from structured_vars.processors import StructuredVariablesProcessor


class _RecordingExecutor(Executor):
    def __init__(self, results: dict[str, Any]) -> None:
        super().__init__()
        self.results = results
        self.calls: list[tuple[str, dict[str, Any]]] = []

    @override
    def execute(self, key: str, parameters: dict[str, Any]) -> Any:
        self.calls.append((key, parameters))
        return self.results.get(key)


class _RefusingAccessor(PropertyAccessor):
    @override
    def get_property(self, subject: Any, name: str) -> Any:
        return NOT_ACCESSIBLE

    @override
    def set_property(self, subject: Any, name: str, value: Any) -> bool:
        return False


class _Page:
    def __init__(self) -> None:
        self.title = ""


@pytest.fixture
def processor() -> StructuredVariablesProcessor:
    return StructuredVariablesProcessor()


def test_processor_expands_sub_task_then_folds(processor: StructuredVariablesProcessor) -> None:
    executor = _RecordingExecutor({"5": "Test..."})
    configuration = {"5": {"value": "Test...", "as": "foo.bar.text"}}

    nested = processor.process({}, configuration, executor)

    assert executor.calls == [("5", {"value": "Test..."})]
    assert nested == {"foo": {"bar": {"text": "Test..."}}}


def test_processor_expand_adds_flat_keys_without_touching_configuration(
    processor: StructuredVariablesProcessor,
) -> None:
    executor = _RecordingExecutor({"5": "Test..."})
    configuration = {"5": {"value": "Test...", "as": "foo.bar.text"}, "levels": 4}
    flat: dict[str, Any] = {"title": "Home"}

    result = processor.expand(configuration, flat, executor)

    assert result is flat
    assert flat == {"title": "Home", "foo.bar.text": "Test..."}
    assert configuration == {"5": {"value": "Test...", "as": "foo.bar.text"}, "levels": 4}


def test_processor_skips_inert_configuration(processor: StructuredVariablesProcessor) -> None:
    executor = _RecordingExecutor({})
    configuration = {"levels": 4, "expandAll": {"value": 1}, "titleField": "nav_title // title"}

    nested = processor.process({"a.b": 1}, configuration, executor)

    assert executor.calls == []
    assert nested == {"a": {"b": 1}}


def test_processor_merges_sub_task_results_with_existing_variables(
    processor: StructuredVariablesProcessor,
) -> None:
    configuration = {"searchText": "TEXT", "searchText.": {"value": "Test...", "as": "foo.bar.text"}}
    flat = {"foo.bar.menu": ["home", "about"], "data": {"uid": 1}}

    nested = processor.process(flat, configuration)

    assert nested == {
        "foo": {"bar": {"menu": ["home", "about"], "text": "Test..."}},
        "data": {"uid": 1},
    }
    assert flat == {"foo.bar.menu": ["home", "about"], "data": {"uid": 1}}


def test_processor_sub_task_result_overrides_existing_flat_key(processor: StructuredVariablesProcessor) -> None:
    executor = _RecordingExecutor({"text": "new"})
    nested = processor.process({"foo.text": "old"}, {"text": {"as": "foo.text"}}, executor)
    assert nested == {"foo": {"text": "new"}}


def test_processor_plain_alias_is_stored_without_nesting(processor: StructuredVariablesProcessor) -> None:
    executor = _RecordingExecutor({"text": "value"})
    assert processor.process({}, {"text": {"as": "headline"}}, executor) == {"headline": "value"}


def test_processor_writes_through_object_variables(processor: StructuredVariablesProcessor) -> None:
    page = _Page()
    executor = _RecordingExecutor({"title": "Welcome"})

    nested = processor.process({"page": page}, {"title": {"as": "page.title"}}, executor)

    assert nested == {"page": page}
    assert page.title == "Welcome"


def test_processor_without_configuration_only_folds(processor: StructuredVariablesProcessor) -> None:
    assert processor.process({"x.y": 1}) == {"x": {"y": 1}}


def test_processor_never_raises_when_accessor_refuses_everything(caplog: pytest.LogCaptureFixture) -> None:
    processor = StructuredVariablesProcessor(accessor=_RefusingAccessor())
    with caplog.at_level(logging.DEBUG, logger="structured_vars.key_mapping.nested"):
        nested = processor.process({"plain": 1, "foo": 5, "foo.bar": 2, "a.b.c": 3})
    assert nested == {"plain": 1, "foo": {}, "a": {"b": {}}}
    assert "Dropped value for 'foo.bar'" in caplog.text


def test_processor_custom_separator_and_alias_key() -> None:
    processor = StructuredVariablesProcessor(sep="/", alias_key="target")
    executor = _RecordingExecutor({"menu": [1]})
    configuration = {"menu": {"target": "nav/main", "levels": 2}}

    nested = processor.process({"a.b": 1}, configuration, executor)

    assert executor.calls == [("menu", {"levels": 2})]
    assert nested == {"a.b": 1, "nav": {"main": [1]}}
    assert processor.sep == "/"
    assert processor.alias_key == "target"


def test_processor_rejects_invalid_settings() -> None:
    with pytest.raises(ValueError, match="sep must not be empty"):
        _ = StructuredVariablesProcessor(sep="")
    with pytest.raises(ValueError, match="alias_key must not be empty"):
        _ = StructuredVariablesProcessor(alias_key="")
    with pytest.raises(ValueError, match="alias_key must differ from separator"):
        _ = StructuredVariablesProcessor(sep="as")


def test_processor_default_accessor_is_object_accessor(processor: StructuredVariablesProcessor) -> None:
    assert isinstance(processor._accessor, ObjectAccessor)  # noqa: SLF001


def test_processor_treats_none_alias_as_inert(processor: StructuredVariablesProcessor) -> None:
    executor = _RecordingExecutor({"5": "x"})
    assert processor.process({}, {"5": {"value": "x", "as": None}}, executor) == {}
    assert executor.calls == []


def test_processor_stringifies_non_string_configuration_keys(processor: StructuredVariablesProcessor) -> None:
    executor = _RecordingExecutor({"5": "Test..."})
    nested = processor.process({}, {5: {"value": "Test...", "as": "foo.text"}}, executor)  # type: ignore[dict-item]
    assert executor.calls == [("5", {"value": "Test..."})]
    assert nested == {"foo": {"text": "Test..."}}
