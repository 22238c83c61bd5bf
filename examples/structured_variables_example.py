"""Minimal example for StructuredVariablesProcessor with a registry executor."""

from structured_vars.executors.registry import RegistryExecutor
from structured_vars.processors import StructuredVariablesProcessor


def main() -> None:
    """Expand a TEXT sub-task and a menu sub-task, then fold the variables."""
    configuration = {
        "searchText": "TEXT",
        "searchText.": {"value": "Test...", "as": "foo.bar.text"},
        "menu.": {"levels": 2, "as": "foo.bar.menu"},
        "levels": 4,
    }
    executor = RegistryExecutor(configuration, handlers={"menu": lambda parameters: ["home"] * parameters["levels"]})
    processor = StructuredVariablesProcessor()

    nested = processor.process({"title": "Home", "page.uid": 1}, configuration, executor)
    print(f"{nested=}")
    print("text:", nested["foo"]["bar"]["text"])
    print("menu:", nested["foo"]["bar"]["menu"])


if __name__ == "__main__":
    main()
