"""Group rendered blocks into output documents and place them on disk."""

from pydantic import BaseModel, ConfigDict

from openapi_to_http.config import BLOCK_SEPARATOR, DOCUMENT_SUFFIX
from openapi_to_http.resolver.names import PathIdentity


class OutputDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str  # rooted at "/", e.g. "/users.http"
    blocks: tuple[str, ...]

    @property
    def content(self) -> str:
        return BLOCK_SEPARATOR.join(self.blocks)


class FileAggregator:
    """Collects blocks per file_path, then decides file-vs-folder placement.

    Placement needs every endpoint's folders first, so blocks are only
    added while collecting and documents are built once at the end.
    """

    def __init__(self):
        self._groups: dict[str, tuple[PathIdentity, list[str]]] = {}
        self._folders: dict[str, None] = {}

    def add(self, identity: PathIdentity, block: str) -> None:
        if identity.file_path not in self._groups:
            self._groups[identity.file_path] = (identity, [])
        self._groups[identity.file_path][1].append(block)
        self._folders.update(dict.fromkeys(identity.folders))

    def build(self) -> tuple[list[OutputDocument], list[str]]:
        """Return (documents, folders); folders are ordered parents first."""
        placed: dict[str, list[str]] = {}
        folders = dict(self._folders)
        for file_path, (identity, blocks) in self._groups.items():
            if len(blocks) > 1 or file_path in self._folders:
                # shares its name with a folder or holds several requests
                folders[file_path] = None
                path = f"{file_path}/{identity.file_name}{DOCUMENT_SUFFIX}"
            else:
                path = f"{file_path}{DOCUMENT_SUFFIX}"
            # "/a" with several requests and "/a/a" both land on "/a/a.http"
            placed.setdefault(path, []).extend(blocks)
        documents = [OutputDocument(path=path, blocks=tuple(blocks)) for path, blocks in placed.items()]
        return documents, sorted(folders, key=lambda f: f.count("/"))
