"""Parse container image references into :class:`ImageReference` objects."""

from __future__ import annotations

from urllib.parse import urlparse

from preflight_checks.certification import ImageReference

#: Registry API host used when a reference names no registry.
DOCKER_HUB_REGISTRY = "registry-1.docker.io"

# Hostnames that refer to Docker Hub but are not its API endpoint.
_DOCKER_HUB_ALIASES = {"docker.io", "index.docker.io", "hub.docker.com"}


def parse_image_reference(ref: str) -> ImageReference:
    """Parse an image reference or URL into an :class:`ImageReference`.

    Supported formats:

    * ``quay.io/myorg/myimage:1.2``
    * ``registry.local:5000/myimage``  (port kept, tag defaults to ``latest``)
    * ``myorg/myimage@sha256:...``  (digest)
    * ``docker://quay.io/myorg/myimage:tag``  (transport prefix)
    * ``https://hub.docker.com/r/nginxinc/nginx-unprivileged``
    * ``https://hub.docker.com/_/nginx``  (official shorthand)
    * ``nginx``  (bare image name, assumes Docker Hub)

    Args:
        ref: The image reference string.

    Returns:
        An :class:`ImageReference` with the parsed components.

    Raises:
        ValueError: If no repository can be extracted from *ref*, or the
            digest after ``@`` is empty.
    """
    ref = ref.strip()

    # If it looks like a URL (has a scheme), parse with urllib.
    if "://" in ref:
        return _parse_full_url(ref)

    return _parse_bare_reference(ref)


def _parse_full_url(url: str) -> ImageReference:
    """Parse a URL with a scheme; the host is always the registry."""
    parsed = urlparse(url)
    # netloc rather than hostname: the port is part of the registry.
    host = parsed.netloc.rsplit("@", 1)[-1]
    path = parsed.path.strip("/")

    if not host or not path:
        raise ValueError(f"Cannot extract repository from URL: {url!r}")

    if host in _DOCKER_HUB_ALIASES:
        # Docker Hub web UI pages live under /r/<namespace>/<name>.
        if path.startswith("r/"):
            path = path[2:]
        return _build(url, DOCKER_HUB_REGISTRY, path, docker_hub=True)

    return _build(url, host, path)


def _parse_bare_reference(ref: str) -> ImageReference:
    """Parse a reference like ``nginx:latest`` or ``myregistry/org/img:tag``."""
    name = ref.strip("/")

    # Heuristic: if the first segment looks like a host it's a registry.
    parts = name.split("/", 1)
    if len(parts) == 2 and _is_registry_host(parts[0]):
        registry, remainder = parts
        if registry in _DOCKER_HUB_ALIASES:
            return _build(ref, DOCKER_HUB_REGISTRY, remainder, docker_hub=True)
        return _build(ref, registry, remainder)

    return _build(ref, DOCKER_HUB_REGISTRY, name, docker_hub=True)


def _build(
    ref: str,
    registry: str,
    remainder: str,
    *,
    docker_hub: bool = False,
) -> ImageReference:
    """Split *remainder* into repository, tag and digest."""
    remainder, digest = _split_digest(ref, remainder)
    repository, tag = _split_tag(remainder)
    if docker_hub:
        repository = _library_repository(repository)

    if not repository:
        raise ValueError(f"Cannot extract repository from image reference: {ref!r}")

    return ImageReference(
        registry=registry,
        repository=repository,
        tag=tag,
        digest=digest,
    )


def _is_registry_host(segment: str) -> bool:
    return "." in segment or ":" in segment or segment == "localhost"


def _library_repository(repository: str) -> str:
    """Official Docker Hub images live under the ``library/`` namespace."""
    if repository.startswith("_/"):
        return "library/" + repository[2:]
    if repository and "/" not in repository:
        return "library/" + repository
    return repository


def _split_digest(ref: str, name: str) -> tuple[str, str | None]:
    """Split ``name@digest`` into a ``(name, digest)`` tuple."""
    if "@" not in name:
        return name, None
    name, digest = name.split("@", 1)
    if not digest:
        raise ValueError(f"Empty digest in image reference: {ref!r}")
    return name, digest


def _split_tag(ref: str) -> tuple[str, str]:
    """Split ``name:tag`` into a ``(name, tag)`` tuple.

    Only a colon after the last ``/`` separates a tag; earlier colons belong
    to a registry port.
    """
    last_segment = ref.rsplit("/", 1)[-1]
    if ":" in last_segment:
        name, tag = ref.rsplit(":", 1)
        return name, tag or "latest"
    return ref, "latest"
