"""Shared fixtures for i18nupdate tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from dulwich import porcelain

from i18nupdate.models import DiffSource, UpdateOptions

AUTHOR = b"Test <test@example.com>"

BASE_LOCALE = (
    "en:\n"
    "  errors:\n"
    "    not_found:\n"
    "      title: Not found\n"
    "      body: The page is gone\n"
    "  greeting: Hello\n"
    "  footer:\n"
    "    copyright: All rights reserved\n"
)


@pytest.fixture
def repo_dir(tmp_path: Path) -> Path:
    """An empty git repository."""
    path = tmp_path / "app"
    path.mkdir()
    porcelain.init(str(path)).close()
    return path


@pytest.fixture
def locale_file(repo_dir: Path) -> Path:
    path = repo_dir / "config" / "locales" / "en.yml"
    path.parent.mkdir(parents=True)
    return path


@pytest.fixture
def stage(repo_dir: Path) -> Callable[[Path, str], None]:
    """Write *content* to *path* and add it to the index."""

    def _stage(path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")
        porcelain.add(str(repo_dir), paths=[str(path)])

    return _stage


@pytest.fixture
def commit(repo_dir: Path, stage: Callable[[Path, str], None]) -> Callable[..., None]:
    """Write, stage and commit *content* at *path*."""

    def _commit(path: Path, content: str, message: str = "Update locale") -> None:
        stage(path, content)
        porcelain.commit(
            str(repo_dir),
            message=message.encode("utf-8"),
            author=AUTHOR,
            committer=AUTHOR,
        )

    return _commit


@pytest.fixture
def committed_locale(locale_file: Path, commit: Callable[..., None]) -> Path:
    """The base locale file committed once with :data:`BASE_LOCALE`."""
    commit(locale_file, BASE_LOCALE, "Initial locale")
    return locale_file


@pytest.fixture
def options(locale_file: Path) -> UpdateOptions:
    return UpdateOptions(base_locale_file=locale_file, diff_source=DiffSource.WORKING_TREE)


@pytest.fixture
def base_locale() -> str:
    return BASE_LOCALE
