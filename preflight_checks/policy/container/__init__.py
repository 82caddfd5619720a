"""Checks that apply to container images."""

from preflight_checks.policy.container.has_unique_tag import HasUniqueTagCheck

__all__ = ["HasUniqueTagCheck"]
