"""Git access via pygit2 - historical file trees for compiled-output diffs.

Only read operations: resolve refs, list changed files between commits and
export a commit's files to a scratch directory so the same renderer can run
on both points in time.
"""

from __future__ import annotations

import os
from pathlib import Path

import pygit2

from specscope.core.errors import GitError

_FILEMODE_LINK = 0o120000


class SpecRepository:
    """Thin wrapper around pygit2.Repository with domain errors."""

    def __init__(self, path: Path | str) -> None:
        discovered = pygit2.discover_repository(str(path))
        if discovered is None:
            raise GitError.not_a_repository(str(path))
        try:
            self._repo = pygit2.Repository(discovered)
        except pygit2.GitError as e:
            raise GitError.not_a_repository(str(path)) from e
        if self._repo.workdir is None:
            raise GitError.not_a_repository(str(path))

    @property
    def repo(self) -> pygit2.Repository:
        return self._repo

    @property
    def workdir(self) -> Path:
        return Path(self._repo.workdir).resolve()

    def resolve_commit(self, ref: str) -> pygit2.Commit:
        try:
            obj = self._repo.revparse_single(ref)
        except (pygit2.GitError, KeyError, ValueError) as e:
            raise GitError.ref_not_found(ref) from e
        try:
            commit = obj.peel(pygit2.Commit)
        except (pygit2.GitError, ValueError) as e:
            raise GitError.ref_not_found(f"{ref} is not a commit") from e
        return commit

    def head_commit(self) -> pygit2.Commit:
        if self._repo.head_is_unborn:
            raise GitError.ref_not_found("HEAD")
        return self._repo.head.peel(pygit2.Commit)

    @staticmethod
    def short_id(commit: pygit2.Commit) -> str:
        return str(commit.id)[:7]

    def changed_files(
        self,
        old: pygit2.Commit,
        new: pygit2.Commit,
        suffixes: tuple[str, ...] | list[str] = (),
    ) -> list[str]:
        """Paths that differ between two commits, optionally filtered by suffix."""
        diff = old.tree.diff_to_tree(new.tree)
        paths: dict[str, None] = {}
        for delta in diff.deltas:
            path = delta.new_file.path or delta.old_file.path
            if suffixes and not path.endswith(tuple(suffixes)):
                continue
            paths.setdefault(path, None)
        return list(paths)

    def export_tree(self, commit: pygit2.Commit, dest: Path) -> int:
        """Write every regular file of commit's tree under dest.

        Symlinks and submodules are skipped. Returns the number of files
        written.
        """
        return self._export(commit.tree, dest)

    def _export(self, tree: pygit2.Tree, dest: Path) -> int:
        written = 0
        dest.mkdir(parents=True, exist_ok=True)
        for entry in tree:
            target = dest / entry.name
            if entry.type_str == "tree":
                written += self._export(self._repo[entry.id], target)
            elif entry.type_str == "blob" and entry.filemode != _FILEMODE_LINK:
                target.write_bytes(self._repo[entry.id].data)
                written += 1
        return written

    def relative_path(self, path: Path | str) -> str:
        """Path relative to the working directory, with forward slashes."""
        rel = os.path.relpath(Path(path).resolve(), self.workdir)
        if rel.startswith(".."):
            raise GitError.not_a_repository(str(path))
        return Path(rel).as_posix()
