"""
Playground Example Store and Registry Tests
"""

import pytest

from playground.kernel.errors import EvaluationError
from playground.kernel.registry import COMMON, WIREFRAME, RegistrySource, default_registry_source
from playground.kernel.store import CommonNotFound, FileExampleStore, MemoryExampleStore


@pytest.fixture
def example_dir(tmp_path):
    target = tmp_path / "elements" / "Button" / "Types"
    target.mkdir(parents=True)
    (target / "ButtonExampleButton.js").write_text("export default 1\n", encoding="utf-8")
    (tmp_path / "elements" / "Button" / "common.py").write_text("sizes = ['mini']\n", encoding="utf-8")
    return tmp_path


class TestFileExampleStore:
    def test_get(self, example_dir):
        store = FileExampleStore(example_dir)
        assert store.get("elements/Button/Types/ButtonExampleButton") == "export default 1\n"

    def test_missing_path(self, example_dir):
        assert FileExampleStore(example_dir).get("elements/Button/Types/Nope") is None

    def test_path_traversal_is_rejected(self, example_dir):
        store = FileExampleStore(example_dir / "elements")
        assert store.get("../elements/Button/Types/ButtonExampleButton") is None

    def test_list_paths(self, example_dir):
        assert FileExampleStore(example_dir).list_paths() == ["elements/Button/Types/ButtonExampleButton"]

    def test_load_common_is_cached(self, example_dir):
        store = FileExampleStore(example_dir)
        first = store.load_common("elements/Button")
        assert first.sizes == ["mini"]
        assert store.load_common("elements/Button") is first

    def test_load_common_missing(self, example_dir):
        with pytest.raises(CommonNotFound):
            FileExampleStore(example_dir).load_common("elements/Label")


class TestMemoryExampleStore:
    def test_counts_gets(self):
        store = MemoryExampleStore({"a/b": "x"})
        store.get("a/b")
        store.get("a/c")
        assert store.get_calls == 2

    def test_put_and_list(self):
        store = MemoryExampleStore()
        store.put("b/b", "1")
        store.put("a/a", "2")
        assert store.list_paths() == ["a/a", "b/b"]


class TestRegistrySource:
    def test_fixed_symbols(self):
        registry = default_registry_source().build("elements/Button")
        assert set(registry) == {"FAKER", "LODASH", "REACT", "SEMANTIC_UI_REACT"}

    def test_conditional_slots_only_when_imported(self, example_dir):
        source = default_registry_source(FileExampleStore(example_dir))
        registry = source.build("elements/Button", {COMMON, WIREFRAME})
        assert registry[COMMON].sizes == ["mini"]
        assert callable(registry[WIREFRAME])

    def test_common_without_loader(self):
        with pytest.raises(EvaluationError, match="Cannot find module 'docs/src/examples/elements/Button/common'"):
            RegistrySource().build("elements/Button", {COMMON})

    def test_each_build_is_fresh(self):
        source = default_registry_source()
        assert source.build("a/b")["FAKER"] is not source.build("a/b")["FAKER"]

    def test_common_containers_are_copied_per_build(self, example_dir):
        source = default_registry_source(FileExampleStore(example_dir))
        first = source.build("elements/Button", {COMMON})[COMMON]
        first.sizes.append("huge")
        second = source.build("elements/Button", {COMMON})[COMMON]
        assert second.sizes == ["mini"]
        assert first is not second
