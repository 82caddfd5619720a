"""Tests for the image reference parser."""

import pytest

from preflight_checks.image import DOCKER_HUB_REGISTRY, parse_image_reference


class TestFullReferences:
    """References that name their registry."""

    def test_registry_repo_tag(self):
        ref = parse_image_reference("quay.io/myorg/myimage:1.2")
        assert ref.registry == "quay.io"
        assert ref.repository == "myorg/myimage"
        assert ref.tag == "1.2"
        assert ref.digest is None

    def test_registry_with_port_no_tag(self):
        ref = parse_image_reference("registry.local:5000/myimage")
        assert ref.registry == "registry.local:5000"
        assert ref.repository == "myimage"
        assert ref.tag == "latest"

    def test_registry_with_port_and_tag(self):
        ref = parse_image_reference("registry.local:5000/org/myimage:v2")
        assert ref.registry == "registry.local:5000"
        assert ref.repository == "org/myimage"
        assert ref.tag == "v2"

    def test_localhost(self):
        ref = parse_image_reference("localhost/myimage:dev")
        assert ref.registry == "localhost"
        assert ref.repository == "myimage"
        assert ref.tag == "dev"

    def test_transport_prefix(self):
        ref = parse_image_reference("docker://quay.io/myorg/myimage:tag")
        assert ref.registry == "quay.io"
        assert ref.repository == "myorg/myimage"
        assert ref.tag == "tag"

    def test_digest(self):
        digest = "sha256:" + "a" * 64
        ref = parse_image_reference(f"quay.io/myorg/myimage@{digest}")
        assert ref.registry == "quay.io"
        assert ref.repository == "myorg/myimage"
        assert ref.digest == digest
        assert ref.tag == "latest"

    def test_tag_and_digest(self):
        digest = "sha256:" + "b" * 64
        ref = parse_image_reference(f"quay.io/myorg/myimage:1.0@{digest}")
        assert ref.tag == "1.0"
        assert ref.digest == digest


class TestDockerHub:
    """References that resolve to Docker Hub."""

    @pytest.mark.parametrize(
        "ref,repository,tag",
        [
            ("nginx", "library/nginx", "latest"),
            ("nginx:1.25", "library/nginx", "1.25"),
            ("bitnami/redis:7.2", "bitnami/redis", "7.2"),
            ("docker.io/nginx", "library/nginx", "latest"),
            ("docker.io/bitnami/redis", "bitnami/redis", "latest"),
            ("https://hub.docker.com/_/nginx", "library/nginx", "latest"),
            (
                "https://hub.docker.com/r/nginxinc/nginx-unprivileged",
                "nginxinc/nginx-unprivileged",
                "latest",
            ),
            ("https://hub.docker.com/r/bitnami/redis:7.2", "bitnami/redis", "7.2"),
        ],
    )
    def test_docker_hub(self, ref, repository, tag):
        parsed = parse_image_reference(ref)
        assert parsed.registry == DOCKER_HUB_REGISTRY
        assert parsed.repository == repository
        assert parsed.tag == tag

    def test_coordinate(self):
        ref = parse_image_reference("nginx:latest")
        assert ref.coordinate == "registry-1.docker.io/library/nginx"


class TestInvalid:
    """References that cannot be parsed."""

    @pytest.mark.parametrize(
        "ref",
        ["", "   ", "docker://", "@sha256:abc", "https://quay.io/", "https://quay.io"],
    )
    def test_raises(self, ref):
        with pytest.raises(ValueError, match="Cannot extract repository"):
            parse_image_reference(ref)

    def test_empty_digest(self):
        with pytest.raises(ValueError, match="Empty digest"):
            parse_image_reference("quay.io/myorg/myimage@")


class TestUrls:
    """References given as URLs with a scheme."""

    def test_url_keeps_registry_port(self):
        ref = parse_image_reference("https://registry.local:5000/org/myimage:v2")
        assert ref.registry == "registry.local:5000"
        assert ref.repository == "org/myimage"
        assert ref.tag == "v2"

    def test_url_host_is_registry(self):
        """A single path segment on a URL is the repository, not a registry."""
        ref = parse_image_reference("https://quay.io/myimage")
        assert ref.registry == "quay.io"
        assert ref.repository == "myimage"

    def test_package_exports_parser(self):
        import preflight_checks

        assert preflight_checks.parse_image_reference is parse_image_reference
