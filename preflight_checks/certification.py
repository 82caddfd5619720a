"""Core types shared by all certification checks."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from importlib import resources
from typing import Any

import jsonschema

#: Landing page of the certification policy guide.
CERT_DOCUMENTATION_URL = (
    "https://access.redhat.com/documentation/en-us/red_hat_software_certification"
)


class CheckError(Exception):
    """Raised when a check is misconfigured or describes itself incorrectly."""


@dataclass(frozen=True)
class ImageReference:
    """Reference to a container image on a registry.

    Attributes:
        registry: Registry hostname (e.g. ``quay.io``).
        repository: Full repository path (e.g. ``myorg/myimage``).
        tag: Tag the reference was given with (defaults to ``latest``).
        digest: Optional content digest (e.g. ``sha256:abc...``).
    """

    registry: str
    repository: str
    tag: str = "latest"
    digest: str | None = None

    @property
    def coordinate(self) -> str:
        """Return the ``registry/repository`` string the image's tags live under."""
        return f"{self.registry}/{self.repository}"


@dataclass(frozen=True)
class Metadata:
    """Static description of a check, used when rendering reports."""

    description: str
    level: str
    knowledge_base_url: str
    check_url: str


@dataclass(frozen=True)
class HelpText:
    """Message shown when a check fails or errors, and how to fix it."""

    message: str
    suggestion: str


class BaseCheck(ABC):
    """Abstract base class for certification checks.

    Subclasses must define :attr:`name` and implement :meth:`validate`,
    :meth:`metadata` and :meth:`help`.
    """

    #: Identifier the check is registered and reported under.
    name: str = ""

    #: Filename of the JSON Schema inside ``preflight_checks/schemas/``.
    schema_file: str = "check.schema.json"

    @abstractmethod
    def validate(self, image_ref: ImageReference) -> bool:
        """Evaluate the check against *image_ref*.

        Returns:
            ``True`` if the image passes, ``False`` if it was checked and failed.

        Raises:
            Exception: Whatever the check's collaborators raise when the
                data needed to decide could not be obtained.
        """

    @abstractmethod
    def metadata(self) -> Metadata:
        """Return the static description of the check."""

    @abstractmethod
    def help(self) -> HelpText:
        """Return the failure message and remediation suggestion."""

    # ------------------------------------------------------------------
    # Description
    # ------------------------------------------------------------------

    def describe(self) -> dict[str, Any]:
        """Return name, metadata and help text as a plain dict.

        Raises:
            CheckError: If the description does not conform to the schema.
        """
        description = {
            "name": self.name,
            "metadata": asdict(self.metadata()),
            "help": asdict(self.help()),
        }
        schema = self._load_schema()
        try:
            jsonschema.validate(instance=description, schema=schema)
        except jsonschema.ValidationError as exc:
            raise CheckError(
                f"Description of check '{self.name}' failed schema validation: {exc.message}"
            ) from exc
        return description

    def _load_schema(self) -> dict[str, Any]:
        """Load the JSON Schema file from the ``preflight_checks.schemas`` package."""
        schema_ref = resources.files("preflight_checks.schemas").joinpath(self.schema_file)
        schema_text = schema_ref.read_text(encoding="utf-8")
        return json.loads(schema_text)  # type: ignore[no-any-return]
