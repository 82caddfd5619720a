"""HasUniqueTag check — the image must carry a tag other than ``latest``."""

from __future__ import annotations

import logging

from preflight_checks.certification import (
    CERT_DOCUMENTATION_URL,
    BaseCheck,
    HelpText,
    ImageReference,
    Metadata,
)
from preflight_checks.service import TagLister

logger = logging.getLogger(__name__)

# Floating tag that cannot identify an image on its own.
_FLOATING_TAG = "latest"


class HasUniqueTagCheck(BaseCheck):
    """Ensure the image has a tag other than ``latest``.

    ``latest`` is a floating tag: the image it points to changes over time,
    so it cannot be used to identify the same image reliably.

    Args:
        tag_lister: Source of the repository's tags.
    """

    name = "HasUniqueTag"

    def __init__(self, tag_lister: TagLister) -> None:
        self.tag_lister = tag_lister

    def validate(self, image_ref: ImageReference) -> bool:
        """Return whether *image_ref* can be uniquely identified by a tag.

        Errors raised by the tag lister propagate unchanged.
        """
        tags = self._get_data_to_validate(image_ref.coordinate)
        return self._validate(tags)

    def _get_data_to_validate(self, image: str) -> list[str]:
        logger.debug("Listing tags for %s", image)
        tags = self.tag_lister.list_tags(image)
        logger.debug("Found %d tag(s) for %s", len(tags), image)
        return tags

    def _validate(self, tags: list[str]) -> bool:
        # Passes with more than one tag (``latest`` among them is fine), or
        # with a single tag that is not ``latest``.
        passed = len(tags) > 1 or (len(tags) == 1 and tags[0].lower() != _FLOATING_TAG)
        logger.debug("%s verdict: %s", self.name, passed)
        return passed

    def metadata(self) -> Metadata:
        return Metadata(
            description=(
                "Checking if container has a tag other than 'latest', "
                "so that the image can be uniquely identified."
            ),
            level="best",
            knowledge_base_url=CERT_DOCUMENTATION_URL,
            check_url=CERT_DOCUMENTATION_URL,
        )

    def help(self) -> HelpText:
        return HelpText(
            message=(
                "Check HasUniqueTag encountered an error. "
                "Please review the preflight.log file for more information."
            ),
            suggestion=(
                "Add a tag to your image. Consider using Semantic Versioning. "
                "https://semver.org/"
            ),
        )
