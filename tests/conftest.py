"""Shared pytest fixtures for wesl-metadata tests."""

import copy
import json
import logging
import sys

import pytest
import structlog

APP_ID = "app 0.1.0 (path+file:///work/app)"
UTIL_ID = "util 1.2.3 (registry+https://registry.npmjs.org)"
NOISE_ID = "noise 0.4.0-beta.1 (path+file:///work/noise)"

_SAMPLE = {
    "package_manager": "Npm",
    "packages": [
        {
            "name": "app",
            "version": "0.1.0",
            "authors": ["Jane Doe <jane@example.com>"],
            "id": APP_ID,
            "description": "A demo WESL package",
            "dependencies": [
                {"name": "util", "rename": "helpers", "path": None},
                {"name": "noise", "rename": None, "path": "../noise"},
            ],
            "license": "MIT",
            "license_file": "LICENSE.txt",
            "manifest_path": "/work/app/wesl.toml",
            "categories": ["graphics"],
            "keywords": ["shader"],
            "readme": "docs/README.md",
            "repository": "https://github.com/example/app",
            "homepage": None,
            "documentation": None,
            "edition": "WESL",
            "metadata": {"docs": {"features": ["full"]}},
        },
        {
            "name": "util",
            "version": "1.2.3",
            "id": UTIL_ID,
            "dependencies": [],
            "manifest_path": "/cache/util-1.2.3/wesl.toml",
        },
        {
            "name": "noise",
            "version": "0.4.0-beta.1",
            "id": NOISE_ID,
            "dependencies": [],
            "manifest_path": "/work/noise/wesl.toml",
            "edition": "WGSL",
        },
    ],
    "resolve": {
        "nodes": [
            {
                "id": APP_ID,
                "dependencies": [UTIL_ID, NOISE_ID],
                "renamed_dependencies": [
                    {"name": "helpers", "pkg": UTIL_ID},
                    {"name": "noise", "pkg": NOISE_ID},
                ],
            },
            {"id": UTIL_ID, "dependencies": [], "renamed_dependencies": []},
            {"id": NOISE_ID, "dependencies": []},
        ],
        "root": APP_ID,
    },
    "target_directory": "/work/app/target",
    "version": 1,
    "root_package_directory": "/work/app",
}


@pytest.fixture
def sample_dict():
    """A full metadata document with a resolve graph, as wesl emits it."""
    return copy.deepcopy(_SAMPLE)


@pytest.fixture
def sample_json(sample_dict):
    return json.dumps(sample_dict)


@pytest.fixture
def no_deps_dict(sample_dict):
    """The same document as a ``--no-dependencies`` run would produce it."""
    sample_dict["resolve"] = None
    sample_dict["packages"] = sample_dict["packages"][:1]
    return sample_dict


_FAKE_WESL = """#!{python}
import json
import logging
import os
import sys
from pathlib import Path

here = Path(__file__).parent
(here / "argv.json").write_text(json.dumps({{"argv": sys.argv[1:], "cwd": os.getcwd(), "env": dict(os.environ)}}))

mode = os.environ.get("FAKE_WESL_MODE", "ok")
if mode == "fail":
    sys.stderr.write("error: manifest not found\\n")
    sys.exit(1)
if mode == "bad-stderr":
    sys.stderr.buffer.write(b"\\xff\\xfe broken")
    sys.exit(2)
if mode == "nojson":
    print("   Resolving dependencies")
    sys.exit(0)
print("warning: unused dependency `noise`")
print((here / "payload.json").read_text().strip())
print("    Finished metadata")
"""


@pytest.fixture
def restore_logging():
    """setup_logging() reconfigures the root logger; undo that after the test."""
    root, lib = logging.getLogger(), logging.getLogger("wesl_metadata")
    handlers, level, lib_level = root.handlers[:], root.level, lib.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    lib.setLevel(lib_level)
    structlog.reset_defaults()


@pytest.fixture
def fake_wesl(tmp_path, sample_json):
    """An executable standing in for ``wesl``.

    It prints diagnostics around the sample JSON line, records its argv,
    cwd and environment to ``argv.json`` next to itself, and changes
    behaviour based on ``FAKE_WESL_MODE``.
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "wesl"
    script.write_text(_FAKE_WESL.format(python=sys.executable))
    script.chmod(0o755)
    (bin_dir / "payload.json").write_text(sample_json)
    return script
