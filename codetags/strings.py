"""String helpers for labels and comma separated environment values."""

import re
import typing

_NON_WORD_RUNS = re.compile(r"\W+", re.ASCII)


def labelify(value: typing.Any) -> typing.Any:
    """
    Normalize a free-form string into a label.

    The string is upper-cased and every run of non-word characters is
    collapsed into a single underscore, so ``"Dev-ebot app"`` becomes
    ``"DEV_EBOT_APP"``. Values that are not strings are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    return _NON_WORD_RUNS.sub("_", value.upper())


def string_to_list(labels: typing.Any) -> list[str]:
    """
    Split a comma separated value into a list of tokens.

    Every token is trimmed, empty tokens are dropped. ``None`` and the empty
    string give an empty list, a list is returned as a copy.
    """
    if not labels:
        return []
    if isinstance(labels, str):
        return [item.strip() for item in labels.split(",") if item.strip()]
    return list(labels)


def arrayify(value: typing.Any) -> list:
    if value is None:
        return []
    if isinstance(value, list | tuple):
        return list(value)
    return [value]
