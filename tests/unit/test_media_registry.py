"""Tests for MediaRegistry playable references."""

import pytest

from src.services.audio.media import MediaRegistry


@pytest.fixture
def registry():
    return MediaRegistry()


def test_create_and_resolve(registry):
    url = registry.create_url(b"abc", "audio/wav")

    assert url.startswith("media://")
    assert registry.resolve(url) == (b"abc", "audio/wav")
    assert url in registry
    assert len(registry) == 1


def test_urls_are_unique_per_blob(registry):
    first = registry.create_url(b"same")
    second = registry.create_url(b"same")
    assert first != second
    assert len(registry) == 2


def test_revoked_url_no_longer_resolves(registry):
    url = registry.create_url(b"abc")
    registry.revoke(url)

    assert url not in registry
    with pytest.raises(KeyError):
        registry.resolve(url)


def test_revoke_twice_is_harmless(registry):
    url = registry.create_url(b"abc")
    registry.revoke(url)
    registry.revoke(url)
    registry.revoke("media://never-issued")
    assert len(registry) == 0
