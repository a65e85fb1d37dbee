"""Feature providers and their default declaration order."""

from __future__ import annotations

from typing import List

from ..template import TemplateRenderer
from .base import FeatureProvider, FeatureResult
from .css import CSSProvider
from .git_hooks import GitHooksProvider
from .linter import LinterProvider
from .router import RouterProvider
from .store import StoreProvider
from .unocss import UnoCSSProvider

__all__ = [
    "CSSProvider",
    "FeatureProvider",
    "FeatureResult",
    "GitHooksProvider",
    "LinterProvider",
    "RouterProvider",
    "StoreProvider",
    "UnoCSSProvider",
    "default_providers",
]


def default_providers(renderer: TemplateRenderer | None = None) -> List[FeatureProvider]:
    """Return one instance of every provider in declaration order.

    The order decides the order of imports and ``app.use`` calls in the
    entry file.
    """

    renderer = renderer or TemplateRenderer()
    return [
        RouterProvider(renderer),
        StoreProvider(renderer),
        LinterProvider(renderer),
        UnoCSSProvider(renderer),
        CSSProvider(renderer),
        GitHooksProvider(renderer),
    ]
