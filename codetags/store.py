"""Declared, included and excluded tags of a Codetags instance."""

import os
import typing
from collections.abc import Callable, Iterable, Mapping
from typing import TypeVar

from .logger import get_logger
from .models import Presets
from .strings import string_to_list

logger = get_logger()

T = TypeVar("T")


class CacheCell(typing.Generic[T]):
    """A lazily computed value that stays until invalidated."""

    def __init__(self) -> None:
        self._value: T | None = None
        self._filled: bool = False

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def filled(self) -> bool:
        return self._filled

    def compute_if_absent(self, compute: Callable[[], T]) -> T:
        if not self._filled:
            self._value = compute()
            self._filled = True
        return typing.cast(T, self._value)

    def invalidate(self) -> None:
        self._value = None
        self._filled = False


class TagStore:
    """
    Source of truth for the activation of single tags.

    Three tiers are combined with a fixed precedence: an excluded tag is never
    active, a declared tag is active otherwise, and any other tag is active only
    when it is included. The included and excluded lists come from the
    environment and are read once per cache epoch, activation results are
    memoized for the same epoch.
    """

    def __init__(self, environ: Mapping[str, str] | None = None):
        # None means os.environ, looked up at read time
        self._environ = environ
        self.declared_tags: list[str] = []
        self.included_tags: CacheCell[list[str]] = CacheCell()
        self.excluded_tags: CacheCell[list[str]] = CacheCell()
        self.cached_tags: dict[str, bool] = {}
        self.env: dict[str, list[str]] = {}

    def declare(self, tags: Iterable[str]) -> None:
        added = False
        for tag in tags:
            if tag not in self.declared_tags:
                self.declared_tags.append(tag)
                added = True
        if added:
            # activation results depend on the declared tags
            self.cached_tags.clear()

    def get_env(self, name: str) -> list[str]:
        """Read a comma separated environment variable, memoized per epoch."""
        if name not in self.env:
            environ = os.environ if self._environ is None else self._environ
            self.env[name] = string_to_list(environ.get(name))
            logger.debug("Loaded %s from environment: %s", name, self.env[name])
        return self.env[name]

    def refresh_env(self, presets: Presets) -> None:
        """Populate the included and excluded tags if this epoch has not done so yet."""
        included_name, excluded_name = presets.env_var_names()
        self.included_tags.compute_if_absent(lambda: self.get_env(included_name))
        self.excluded_tags.compute_if_absent(lambda: self.get_env(excluded_name))

    def check_label_activated(self, tag: str) -> bool:
        if tag in self.cached_tags:
            return self.cached_tags[tag]
        if tag in (self.excluded_tags.value or []):
            activated = False
        elif tag in self.declared_tags:
            activated = True
        else:
            activated = tag in (self.included_tags.value or [])
        self.cached_tags[tag] = activated
        return activated

    def invalidate(self) -> None:
        """Start a new cache epoch."""
        self.env.clear()
        self.included_tags.invalidate()
        self.excluded_tags.invalidate()
        self.cached_tags.clear()

    def reset(self) -> None:
        self.invalidate()
        self.declared_tags.clear()
