"""Import path resolution for route files.

``<project>/src/routes/users/[id].tsx`` with root ``<project>/src/routes``:

    alias ""    -> ``./routes/users/[id]``
    alias "@/"  -> ``@/routes/users/[id]``

Paths are computed relative to the parent of the routes root, so the
generated module is expected to import them from that directory or through
the alias.
"""

import os
from pathlib import Path, PurePath

from burrow.routes.conventions import split_extension


def resolve_import_path(file_path: Path, root: Path, alias: str = "") -> str:
    """Translate an absolute route file path into an import reference.

    Pure: no filesystem access.  The result uses forward slashes on every
    platform and carries no route extension.

    """
    rel = PurePath(os.path.relpath(file_path, root.parent)).as_posix()
    no_ext, _ = split_extension(rel)
    if alias:
        return alias + no_ext.removeprefix("src/")
    return "./" + no_ext
