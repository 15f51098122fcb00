"""Shared pytest fixtures for pkgsentinel tests."""

import json

import pytest


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def unity_project(tmp_path):
    """A Unity-style project: package.json manifest + Packages/packages-lock.json."""
    (tmp_path / "package.json").write_text(
        json.dumps(
            {
                "name": "com.example.collection",
                "version": "1.0.0",
                "dependencies": {
                    "com.unity.a": "1.0.0",
                    "com.unity.b": "2.1.0",
                    "com.unity.c": "3.0.0",
                },
            },
            indent=2,
        )
    )
    packages = tmp_path / "Packages"
    packages.mkdir()
    (packages / "packages-lock.json").write_text(
        json.dumps(
            {
                "dependencies": {
                    "com.unity.a": {"version": "1.0.0", "depth": 0, "source": "registry"},
                    "com.unity.b": {"version": "2.2.0", "depth": 0, "source": "registry"},
                    "com.unity.modules.ui": {"version": "1.0.0", "depth": 1},
                }
            }
        )
    )
    return tmp_path
