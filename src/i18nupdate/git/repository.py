"""Read revisions of the base locale file with dulwich (no git binary required).

Each :class:`~i18nupdate.models.DiffSource` maps to an *old* and a *new*
snapshot of the file.  The patch between them is rendered with ``difflib`` in
the same layout ``git diff`` prints.
"""

from __future__ import annotations

import difflib
import logging
from pathlib import Path

from dulwich.errors import NotGitRepository
from dulwich.object_store import tree_lookup_path
from dulwich.repo import Repo

from ..exceptions import GitError
from ..models.diff import LocaleDiff
from ..models.options import DiffSource

logger = logging.getLogger(__name__)


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def render_patch(old: str, new: str, rel_path: str) -> str:
    """Return a unified diff of *old* → *new* for *rel_path*."""
    return "\n".join(
        difflib.unified_diff(
            old.splitlines(),
            new.splitlines(),
            fromfile=f"a/{rel_path}",
            tofile=f"b/{rel_path}",
            lineterm="",
        )
    )


class LocaleRepository:
    """Snapshots of one locale file inside a git repository.

    The repository is discovered from the file's directory unless
    *repo_path* is given.  The constructor does no I/O.
    """

    def __init__(self, locale_file: Path, *, repo_path: Path | None = None) -> None:
        self.locale_file = locale_file.absolute()
        self.repo_path = repo_path.resolve() if repo_path is not None else None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _open(self) -> Repo:
        try:
            if self.repo_path is not None:
                return Repo(str(self.repo_path))
            return Repo.discover(str(self.locale_file.parent))
        except NotGitRepository as exc:
            raise GitError(f"Not inside a git repository: {self.locale_file}") from exc

    def _relative_path(self, repo: Repo) -> str:
        root = Path(repo.path).resolve()
        try:
            return self.locale_file.resolve().relative_to(root).as_posix()
        except ValueError as exc:
            raise GitError(f"{self.locale_file} is outside repository {root}") from exc

    @staticmethod
    def _commit_blob(repo: Repo, rel_path: str, *, parents: int) -> str:
        try:
            commit = repo[repo.head()]
        except KeyError as exc:
            raise GitError("Repository has no commits (HEAD is missing)") from exc

        for _ in range(parents):
            if not commit.parents:
                logger.debug("Commit %s has no parent", commit.id.decode("ascii")[:8])
                return ""
            commit = repo[commit.parents[0]]

        try:
            _mode, sha = tree_lookup_path(repo.__getitem__, commit.tree, rel_path.encode())
        except KeyError:
            logger.debug("%s not present in commit %s", rel_path, commit.id.decode("ascii")[:8])
            return ""
        return _decode(repo[sha].data)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def read_working_tree(self) -> str:
        """Return the file as it is on disk, or ``""`` if it does not exist."""
        try:
            return _decode(self.locale_file.read_bytes())
        except FileNotFoundError:
            return ""
        except OSError as exc:
            raise GitError(f"Failed to read {self.locale_file}: {exc}") from exc

    def read_index(self) -> str:
        """Return the staged version of the file, or ``""`` if it is not staged."""
        with self._open() as repo:
            rel_path = self._relative_path(repo)
            try:
                entry = repo.open_index()[rel_path.encode()]
                return _decode(repo[entry.sha].data)
            except KeyError:
                return ""
            except Exception as exc:
                raise GitError(f"Failed to read index entry for {rel_path}: {exc}") from exc

    def read_commit(self, *, parents: int = 0) -> str:
        """Return the file at ``HEAD`` (or ``HEAD~parents``)."""
        with self._open() as repo:
            rel_path = self._relative_path(repo)
            try:
                return self._commit_blob(repo, rel_path, parents=parents)
            except GitError:
                raise
            except Exception as exc:
                raise GitError(f"Failed to read {rel_path} from history: {exc}") from exc

    # ------------------------------------------------------------------
    # Diff
    # ------------------------------------------------------------------

    def compare(self, source: DiffSource) -> LocaleDiff:
        """Return the old/new snapshots and patch for *source*."""
        if source is DiffSource.STAGED:
            old, new = self.read_commit(), self.read_index()
        elif source is DiffSource.LAST_COMMIT:
            old, new = self.read_commit(parents=1), self.read_commit()
        else:
            old, new = self.read_commit(), self.read_working_tree()

        with self._open() as repo:
            rel_path = self._relative_path(repo)

        logger.info("Comparing %s (%s)", rel_path, source.value)
        return LocaleDiff(old=old, new=new, patch=render_patch(old, new, rel_path))
