"""shared fixtures for gemfetch tests."""
import sys
from pathlib import Path

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gemfetch.registry.client import RegistryClient


@pytest.fixture
def gem_payload():
    """a trimmed copy of what rubygems.org returns for /api/v1/gems/ffi.json."""
    return {
        "name": "ffi",
        "downloads": 1064389219,
        "version": "1.17.0",
        "version_downloads": 15431112,
        "authors": "Wayne Meissner",
        "info": "Ruby FFI library",
        "licenses": ["BSD-3-Clause"],
        "project_uri": "https://rubygems.org/gems/ffi",
        "gem_uri": "https://rubygems.org/gems/ffi-1.17.0.gem",
        "homepage_uri": "https://github.com/ffi/ffi/wiki",
        "wiki_uri": "https://github.com/ffi/ffi/wiki",
        "documentation_uri": "https://github.com/ffi/ffi/wiki",
        "mailing_list_uri": None,
        "source_code_uri": "https://github.com/ffi/ffi/",
        "bug_tracker_uri": "https://github.com/ffi/ffi/issues",
        "changelog_uri": "https://github.com/ffi/ffi/blob/master/CHANGELOG.md",
        "sha": "07139e5e0d7e5b2c5ea3a0b1d6c4e3a1e5c5ab1f0ff3e1c6e0a4e2d0c9b8a7f6",
        "metadata": {"bug_tracker_uri": "https://github.com/ffi/ffi/issues"},
        "dependencies": {
            "development": [
                {"name": "bundler", "requirements": ">= 1.16, < 3"},
                {"name": "rake", "requirements": ">= 12.1, < 14"},
            ],
            "runtime": [],
        },
    }


@pytest.fixture
def make_client():
    """build a RegistryClient whose requests are answered by `handler`."""
    clients = []

    def _make(handler, base_url="https://rubygems.org/api/v1/gems/"):
        transport = httpx.MockTransport(handler)
        client = RegistryClient(base_url, client=httpx.Client(transport=transport))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.client.close()
