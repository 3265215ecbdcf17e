"""Selection of the declared tags out of registration descriptors."""

import typing
from collections.abc import Iterable

from . import versions
from .logger import get_logger
from .models import TagDescriptor, normalize_descriptor

logger = get_logger()


def _plan_decision(descriptor: TagDescriptor, version: str | None) -> bool | None:
    """
    Apply the rollout plan of a descriptor.

    Returns:
        bool | None: whether the tag is declared, None if the plan does not apply.
    """
    plan = descriptor.plan
    if plan is None or plan.enabled is None or not versions.is_valid(version):
        return None
    for bound in (plan.min_bound, plan.max_bound):
        if bound is not None and not versions.is_valid(bound):
            logger.warning("Ignoring plan of %s, invalid version bound: %s", descriptor.tag, bound)
            return None
    satisfied = True
    if plan.min_bound is not None:
        satisfied = satisfied and bool(versions.less_or_equal(plan.min_bound, version))
    if plan.max_bound is not None:
        satisfied = satisfied and bool(versions.less_than(version, plan.max_bound))
    logger.debug("Plan of %s for version %s satisfied: %s", descriptor.tag, version, satisfied)
    if satisfied:
        return plan.enabled
    # outside of the window the tag takes the opposite state of the plan
    if descriptor.enabled is not None:
        return descriptor.enabled
    return not plan.enabled


def is_declared(descriptor: TagDescriptor, version: str | None = None) -> bool:
    decision = _plan_decision(descriptor, version)
    if decision is not None:
        return decision
    return descriptor.enabled is not False


def plan_declared_tags(descriptors: Iterable[typing.Any], version: str | None = None) -> list[str]:
    """
    Compute the declared tags of a list of descriptors.

    Entries that cannot be normalized are skipped. The result keeps the order
    of first appearance and contains no duplicates.
    """
    tags: list[str] = []
    for raw in descriptors:
        descriptor = normalize_descriptor(raw)
        if descriptor is None:
            continue
        if is_declared(descriptor, version) and descriptor.tag not in tags:
            tags.append(descriptor.tag)
    return tags
