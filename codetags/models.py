"""Descriptors, rollout plans and per-instance presets."""

import typing
from collections.abc import Mapping

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import DEFAULT_INSTANCE_NAME
from .logger import get_logger
from .strings import labelify

logger = get_logger()

DEFAULT_NAMESPACE = DEFAULT_INSTANCE_NAME
DEFAULT_POSITIVE_TAGS_LABEL = "POSITIVE_TAGS"
DEFAULT_NEGATIVE_TAGS_LABEL = "NEGATIVE_TAGS"


def _boolean_or_none(value: typing.Any) -> bool | None:
    # only real booleans count, "false" or 0 are treated as not given
    return value if isinstance(value, bool) else None


def _string_or_none(value: typing.Any) -> str | None:
    return value if isinstance(value, str) else None


class RolloutPlan(BaseModel):
    """
    Version gated rollout of a tag.

    The tag is declared with ``enabled`` while the current version lies in
    ``[min_bound, max_bound)``. Bounds are kept as given and validated when the
    plan is applied, an invalid bound disables the whole plan.
    """

    model_config = ConfigDict(populate_by_name=True)

    enabled: bool | None = None
    min_bound: typing.Any = Field(
        default=None, validation_alias=AliasChoices("minBound", "from", "begin", "min_bound")
    )
    max_bound: typing.Any = Field(default=None, validation_alias=AliasChoices("maxBound", "to", "end", "max_bound"))

    @field_validator("enabled", mode="before")
    @classmethod
    def _check_enabled(cls, value: typing.Any) -> bool | None:
        return _boolean_or_none(value)


class TagDescriptor(BaseModel):
    """Registration entry for a single tag."""

    model_config = ConfigDict(populate_by_name=True)

    tag: str = Field(validation_alias=AliasChoices("tag", "name", "label"))
    enabled: bool | None = None
    plan: RolloutPlan | None = None

    @field_validator("enabled", mode="before")
    @classmethod
    def _check_enabled(cls, value: typing.Any) -> bool | None:
        return _boolean_or_none(value)

    @field_validator("plan", mode="before")
    @classmethod
    def _check_plan(cls, value: typing.Any) -> typing.Any:
        if isinstance(value, RolloutPlan | Mapping):
            return value
        return None


def normalize_descriptor(raw: typing.Any) -> TagDescriptor | None:
    """
    Turn a loosely typed descriptor into a TagDescriptor.

    A string is the tag itself. A mapping provides the tag under one of the
    keys ``tag``, ``name`` or ``label`` (in this order of priority). Everything
    else gives None.
    """
    if isinstance(raw, TagDescriptor):
        return raw
    if isinstance(raw, str):
        return TagDescriptor(tag=raw)
    if isinstance(raw, Mapping):
        try:
            return TagDescriptor.model_validate(dict(raw))
        except ValidationError as e:
            logger.debug("Skipping descriptor %s: %s", raw, e)
            return None
    if raw is not None:
        logger.debug("Skipping descriptor of type %s", type(raw).__name__)
    return None


class Presets(BaseModel):
    """Configuration of a Codetags instance."""

    model_config = ConfigDict(populate_by_name=True)

    namespace: str | None = None
    positive_tags_label: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "positiveTagsLabel", "POSITIVE_TAGS_LABEL", "POSITIVE_TAGS", "positive_tags_label"
        ),
    )
    negative_tags_label: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "negativeTagsLabel", "NEGATIVE_TAGS_LABEL", "NEGATIVE_TAGS", "negative_tags_label"
        ),
    )
    # semantic version string, compared verbatim
    version: str | None = None

    @field_validator("namespace", "positive_tags_label", "negative_tags_label", mode="before")
    @classmethod
    def _normalize_label(cls, value: typing.Any) -> str | None:
        return labelify(_string_or_none(value))

    @field_validator("version", mode="before")
    @classmethod
    def _check_version(cls, value: typing.Any) -> str | None:
        return _string_or_none(value)

    def env_var_names(self) -> tuple[str, str]:
        """Names of the environment variables holding the included and excluded tags."""
        namespace = self.namespace or DEFAULT_NAMESPACE
        positive = self.positive_tags_label or DEFAULT_POSITIVE_TAGS_LABEL
        negative = self.negative_tags_label or DEFAULT_NEGATIVE_TAGS_LABEL
        return f"{namespace}_{positive}", f"{namespace}_{negative}"

    def merge(self, opts: Mapping[str, typing.Any]) -> "Presets":
        """Return new presets with the recognized keys of opts applied on top of these."""
        update = Presets.model_validate(dict(opts)).model_dump(exclude_unset=True, exclude_none=True)
        return self.model_copy(update=update)
