"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides small document trees shared across test modules.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import pygit2
import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local specscope package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of specscope modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("specscope"):
        del sys.modules[module_name]


MANIFEST = """\
= Service Spec
:api-p99-latency: 100ms
:service-name: orders

== Overview
The {service-name} service.

include::chapters/perf.adoc[]
include::chapters/api.adoc[]
"""

PERF = """\
== Performance
Target: {api-p99-latency}

=== Caching
include::caching.adoc[]
"""

CACHING = """\
:cache-ttl: 30s
Entries live {cache-ttl}, well under {api-p99-latency}.
"""

API = """\
== API
Responses within {api-p99-latency}.
"""


def _write_tree(base: Path, files: dict[str, str]) -> None:
    for rel, content in files.items():
        path = base / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


@pytest.fixture
def write_tree() -> Callable[[Path, dict[str, str]], None]:
    """Write {relative path: content} under a base directory."""
    return _write_tree


@pytest.fixture
def spec_files() -> dict[str, str]:
    return {
        "MANIFEST.adoc": MANIFEST,
        "chapters/perf.adoc": PERF,
        "chapters/caching.adoc": CACHING,
        "chapters/api.adoc": API,
    }


@pytest.fixture
def spec_tree(tmp_path: Path, spec_files: dict[str, str]) -> Path:
    """Root document with two chapters, one of which nests a third file.

    Layout:
        MANIFEST.adoc -> chapters/perf.adoc -> chapters/caching.adoc
                      -> chapters/api.adoc
    """
    _write_tree(tmp_path, spec_files)
    return tmp_path / "MANIFEST.adoc"


@pytest.fixture
def cyclic_tree(tmp_path: Path) -> Path:
    """a.adoc includes b.adoc, which includes a.adoc back."""
    _write_tree(
        tmp_path,
        {
            "a.adoc": "= A\ninclude::b.adoc[]\n",
            "b.adoc": "== B\ninclude::a.adoc[]\n",
        },
    )
    return tmp_path / "a.adoc"


@pytest.fixture
def commit_all() -> Callable[[pygit2.Repository, str], pygit2.Oid]:
    """Stage the whole working tree and commit it on main."""

    def _commit(repo: pygit2.Repository, message: str) -> pygit2.Oid:
        repo.index.add_all()
        repo.index.write()
        tree = repo.index.write_tree()
        sig = pygit2.Signature("Test User", "test@example.com")
        parents = [] if repo.head_is_unborn else [repo.head.target]
        return repo.create_commit("refs/heads/main", sig, sig, message, tree, parents)

    return _commit


@pytest.fixture
def spec_repo(
    tmp_path: Path,
    spec_files: dict[str, str],
    commit_all: Callable[[pygit2.Repository, str], pygit2.Oid],
) -> pygit2.Repository:
    """Repository with the spec tree committed twice.

    The second commit adds one line to the Performance section.
    """
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    repo = pygit2.init_repository(str(repo_path), initial_head="main")
    repo.config["user.name"] = "Test User"
    repo.config["user.email"] = "test@example.com"

    _write_tree(repo_path, spec_files)
    commit_all(repo, "Initial spec")
    repo.set_head("refs/heads/main")

    perf = repo_path / "chapters" / "perf.adoc"
    perf.write_text(PERF.replace("Target: {api-p99-latency}\n", "Target: {api-p99-latency}\nBudget: 5ms\n"))
    commit_all(repo, "Add latency budget")
    return repo
