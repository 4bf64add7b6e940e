"""
Playground Kernel — Symbol Registry

Maps the uppercase symbolic names the import rewriter emits to concrete
values. A RegistrySource builds a fresh registry for every pipeline run:

    FAKER              → seeded fake-data helper (same seed, same markup)
    LODASH             → pydash facade
    REACT              → element framework namespace
    SEMANTIC_UI_REACT  → component kit namespace
    COMMON             → per-component helpers, only when imported
    WIREFRAME          → wireframe helper, only when imported
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from types import ModuleType, SimpleNamespace
from typing import Any, Callable, Iterator, Mapping

from playground.kernel.errors import EvaluationError
from playground.kernel.store import CommonNotFound, ExampleStore

logger = logging.getLogger(__name__)

COMMON = "COMMON"
WIREFRAME = "WIREFRAME"

FAKER_SEED = 1234


class SymbolRegistry(Mapping[str, Any]):
    """Read-only symbol → value mapping for one run."""

    def __init__(self, bindings: dict[str, Any]) -> None:
        self._bindings = dict(bindings)

    def __getitem__(self, symbol: str) -> Any:
        return self._bindings[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"SymbolRegistry({sorted(self._bindings)})"


@dataclass
class RegistrySource:
    """
    Factories for the fixed symbols plus the two conditional slots.

    common_loader receives the component path ("elements/Button") and returns
    the helpers module; it is only called when the program imports COMMON.
    """

    factories: dict[str, Callable[[], Any]] = field(default_factory=dict)
    common_loader: Callable[[str], Any] | None = None
    wireframe: Any = None

    def build(self, component_path: str, symbols: set[str] | frozenset[str] = frozenset()) -> SymbolRegistry:
        bindings = {symbol: factory() for symbol, factory in self.factories.items()}

        if COMMON in symbols:
            if self.common_loader is None:
                raise EvaluationError(f"Cannot find module 'docs/src/examples/{component_path}/common'")
            try:
                bindings[COMMON] = _isolated(self.common_loader(component_path))
            except CommonNotFound as e:
                raise EvaluationError(f"Cannot find module 'docs/src/examples/{component_path}/common'", cause=e) from e
            logger.debug("COMMON resolved for %s", component_path)

        if WIREFRAME in symbols and self.wireframe is not None:
            bindings[WIREFRAME] = self.wireframe

        return SymbolRegistry(bindings)


def _isolated(helpers: Any) -> SimpleNamespace:
    """Public helpers of a common module, containers copied so runs cannot share edits."""
    values = vars(helpers) if isinstance(helpers, (ModuleType, SimpleNamespace)) else {}
    return SimpleNamespace(
        **{
            name: copy.deepcopy(value) if isinstance(value, (list, dict, set)) else value
            for name, value in values.items()
            if not name.startswith("_") and not isinstance(value, ModuleType)
        }
    )


def default_registry_source(store: ExampleStore | None = None, faker_seed: int | None = FAKER_SEED) -> RegistrySource:
    """The registry examples are written against."""
    from playground.library.fake import create_faker
    from playground.library.lodash import lodash
    from playground.library.react import react
    from playground.library.ui import semantic_ui
    from playground.library.wireframe import Wireframe

    return RegistrySource(
        factories={
            "FAKER": lambda: create_faker(faker_seed),
            "LODASH": lambda: lodash,
            "REACT": lambda: react,
            "SEMANTIC_UI_REACT": lambda: semantic_ui,
        },
        common_loader=store.load_common if store is not None else None,
        wireframe=Wireframe,
    )
