"""Named Codetags instances."""

import typing
from collections.abc import Mapping

from .codetags import Codetags
from .errors import DEFAULT_INSTANCE_NAME, InvalidArgumentError
from .logger import get_logger
from .strings import labelify

logger = get_logger()


def assert_space(name: typing.Any) -> str:
    """
    Validate the name of a new instance.

    Returns:
        str: the normalized name.

    Raises:
        InvalidArgumentError: if the name is not a string or is the default instance name.
    """
    if not isinstance(name, str):
        raise InvalidArgumentError("name of a new instance must be a string")
    space = labelify(name)
    if space == DEFAULT_INSTANCE_NAME:
        raise InvalidArgumentError(
            f"{DEFAULT_INSTANCE_NAME} is the default instance name. Please provide another name."
        )
    return space


class InstanceRegistry:
    """
    Collection of Codetags instances keyed by normalized name.

    A registry is created with its default instance already in place under
    the name CODETAGS. Instances share no state with each other.
    """

    def __init__(self, env: Mapping[str, str] | None = None):
        self._env = env
        self.default = Codetags(DEFAULT_INSTANCE_NAME, env=env, registry=self)
        self._instances: dict[str, Codetags] = {DEFAULT_INSTANCE_NAME: self.default}

    def __contains__(self, name: typing.Any) -> bool:
        return isinstance(name, str) and labelify(name) in self._instances

    def names(self) -> list[str]:
        return list(self._instances.keys())

    def get_instance(self, name: str, opts: Mapping[str, typing.Any] | None = None) -> Codetags:
        """Return the instance with the given name, creating it when missing."""
        instance = self._instances.get(labelify(name)) if isinstance(name, str) else None
        if instance is None:
            return self.new_instance(name, opts)
        if opts is not None:
            instance.initialize(opts)
        return instance

    def new_instance(self, name: str, opts: Mapping[str, typing.Any] | None = None) -> Codetags:
        """
        Create an instance, replacing an existing one of the same name.

        The namespace defaults to the name of the instance unless opts has one.
        """
        space = assert_space(name)
        presets: dict[str, typing.Any] = dict(opts) if isinstance(opts, Mapping) else {}
        if not isinstance(presets.get("namespace"), str):
            presets["namespace"] = space
        if space in self._instances:
            logger.debug("Replacing instance %s", space)
        instance = Codetags(space, presets=presets, env=self._env, registry=self)
        self._instances[space] = instance
        return instance
