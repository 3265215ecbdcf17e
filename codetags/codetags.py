"""Codetags instance: registration, presets and activation queries."""

import typing
from collections.abc import Mapping

from .errors import DEFAULT_INSTANCE_NAME, CodetagsException
from .expressions import is_any_satisfied
from .loader import load_descriptors
from .logger import get_logger
from .models import Presets
from .planner import plan_declared_tags
from .store import TagStore
from .strings import labelify

if typing.TYPE_CHECKING:
    from .registry import InstanceRegistry

logger = get_logger()


class Codetags:
    """
    An independently configured evaluator of feature tags.

    Tags are declared by registration, included or excluded by the
    environment variables ``<NAMESPACE>_POSITIVE_TAGS`` and
    ``<NAMESPACE>_NEGATIVE_TAGS`` (label suffixes are configurable), and
    queried with ``is_active``. Excluded tags always lose, declared tags win
    over the included ones.
    """

    def __init__(
        self,
        name: str = DEFAULT_INSTANCE_NAME,
        presets: Mapping[str, typing.Any] | None = None,
        env: Mapping[str, str] | None = None,
        registry: "InstanceRegistry | None" = None,
    ):
        self.name: str = labelify(name)
        self._registry = registry
        self._store = TagStore(env)
        self._initial_presets = Presets().merge(presets) if isinstance(presets, Mapping) else Presets()
        self._presets = self._initial_presets

    def __repr__(self) -> str:
        return f"Codetags(name={self.name!r})"

    def initialize(self, opts: Mapping[str, typing.Any] | None = None, **kwargs: typing.Any) -> "Codetags":
        """
        Update the presets.

        Recognized keys are ``namespace``, ``positiveTagsLabel`` (or
        ``POSITIVE_TAGS_LABEL``, ``POSITIVE_TAGS``), ``negativeTagsLabel`` (or
        ``NEGATIVE_TAGS_LABEL``, ``NEGATIVE_TAGS``) and ``version``, others are
        ignored. Presets not mentioned keep their value. The environment is
        not read again before clear_cache() is called.
        """
        config: dict[str, typing.Any] = dict(opts) if isinstance(opts, Mapping) else {}
        config.update(kwargs)
        self._presets = self._presets.merge(config)
        logger.debug("Presets of %s: %s", self.name, self._presets)
        return self

    def get_presets(self) -> Presets:
        return self._presets.model_copy()

    def is_active(self, *expressions: typing.Any) -> bool:
        """
        Check whether any of the given expressions is satisfied.

        Each argument is a tag, a list of expressions (all of them must hold)
        or a mapping of ``$all``/``$and``, ``$any``/``$or`` and ``$not``
        operators. Calling without arguments gives False.
        """
        self._store.refresh_env(self._presets)
        return is_any_satisfied(expressions, self._store.check_label_activated)

    # older name of is_active
    is_enabled = is_active

    def register(self, descriptors: typing.Any) -> "Codetags":
        if not isinstance(descriptors, list | tuple):
            return self
        tags = plan_declared_tags(descriptors, self._presets.version)
        logger.debug("Declaring tags for %s: %s", self.name, tags)
        self._store.declare(tags)
        return self

    def register_file(self, path: str) -> "Codetags":
        """Register the descriptors found in a yaml, json or toml file."""
        return self.register(load_descriptors(path))

    def get_declared_tags(self) -> list[str]:
        return list(self._store.declared_tags)

    def get_included_tags(self) -> list[str] | None:
        included = self._store.included_tags.value
        return None if included is None else list(included)

    def get_excluded_tags(self) -> list[str] | None:
        excluded = self._store.excluded_tags.value
        return None if excluded is None else list(excluded)

    def clear_cache(self) -> "Codetags":
        self._store.invalidate()
        return self

    def reset(self) -> "Codetags":
        """Forget cached environment values, declared tags and presets given after construction."""
        self._store.reset()
        self._presets = self._initial_presets
        return self

    def _attached_registry(self) -> "InstanceRegistry":
        if self._registry is None:
            raise CodetagsException(f"Instance {self.name} does not belong to a registry")
        return self._registry

    def get_instance(self, name: str, opts: Mapping[str, typing.Any] | None = None) -> "Codetags":
        return self._attached_registry().get_instance(name, opts)

    def new_instance(self, name: str, opts: Mapping[str, typing.Any] | None = None) -> "Codetags":
        return self._attached_registry().new_instance(name, opts)
