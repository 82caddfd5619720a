"""Capabilities that checks depend on, expressed as structural interfaces."""

from __future__ import annotations

from typing import Protocol


class TagListingError(Exception):
    """Raised by a tag lister when the tag list could not be obtained."""


class TagLister(Protocol):
    """Anything that can list the tags of an image repository."""

    def list_tags(self, image: str) -> list[str]:
        """Return all known tags for *image*.

        Args:
            image: Image coordinate in ``registry/repository`` form
                (e.g. ``quay.io/myorg/myimage``).

        Raises:
            Exception: If the list could not be obtained (network, auth,
                unknown repository, ...). Implementations conventionally
                raise :class:`TagListingError`.
        """
        ...
