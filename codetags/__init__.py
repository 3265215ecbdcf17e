"""
Runtime feature tags.

A tag is active when it is declared by registration or listed in the
``<NAMESPACE>_POSITIVE_TAGS`` environment variable, unless it is listed in
``<NAMESPACE>_NEGATIVE_TAGS``. Queries combine tags with a small boolean
language, see ``codetags.expressions``.

The package keeps one process wide registry. Its default instance, reachable
as ``codetags.default``, reads ``CODETAGS_*`` variables and backs the module
level shortcuts::

    import codetags

    codetags.register(["new-parser", {"name": "beta-ui", "enabled": False}])
    if codetags.is_active("new-parser", {"$and": ["beta-ui", {"$not": "legacy"}]}):
        ...
"""

from .codetags import Codetags
from .errors import (
    DEFAULT_INSTANCE_NAME,
    CodetagsException,
    DescriptorFileNotFoundError,
    InvalidArgumentError,
    InvalidDescriptorFormatError,
    UnsupportedDescriptorFileError,
)
from .loader import load_descriptors
from .models import Presets, RolloutPlan, TagDescriptor
from .registry import InstanceRegistry
from .strings import labelify

default_registry = InstanceRegistry()
default = default_registry.default

get_instance = default_registry.get_instance
new_instance = default_registry.new_instance

initialize = default.initialize
is_active = default.is_active
is_enabled = default.is_enabled
register = default.register
register_file = default.register_file
clear_cache = default.clear_cache
reset = default.reset
get_declared_tags = default.get_declared_tags
get_included_tags = default.get_included_tags
get_excluded_tags = default.get_excluded_tags

__all__ = [
    "DEFAULT_INSTANCE_NAME",
    "Codetags",
    "CodetagsException",
    "DescriptorFileNotFoundError",
    "InstanceRegistry",
    "InvalidArgumentError",
    "InvalidDescriptorFormatError",
    "Presets",
    "RolloutPlan",
    "TagDescriptor",
    "UnsupportedDescriptorFileError",
    "clear_cache",
    "default",
    "default_registry",
    "get_declared_tags",
    "get_excluded_tags",
    "get_included_tags",
    "get_instance",
    "initialize",
    "is_active",
    "is_enabled",
    "labelify",
    "load_descriptors",
    "new_instance",
    "register",
    "register_file",
    "reset",
]
