"""Filesystem side of a conversion run."""

import shutil
from pathlib import Path


class FileWriter:
    """Writes documents under root.

    Paths handed in by the converter are rooted at "/" and are
    resolved relative to root. With append=True existing files are
    extended instead of replaced.
    """

    def __init__(self, root: Path, append: bool = False):
        self.root = root
        self.append = append

    def resolve(self, path: str) -> Path:
        return self.root / path.lstrip("/")

    def ensure_folder(self, path: str) -> Path:
        folder = self.resolve(path)
        folder.mkdir(parents=True, exist_ok=True)
        return folder

    def write_document(self, path: str, content: str) -> Path:
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("a" if self.append else "w", encoding="utf-8") as f:
            f.write(content)
        return target


def is_empty(root: Path) -> bool:
    return not root.exists() or next(root.iterdir(), None) is None


def clear(root: Path) -> None:
    """Delete everything inside root, keeping root itself."""
    for child in root.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()
