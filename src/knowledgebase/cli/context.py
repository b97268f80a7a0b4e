"""Per-invocation state for the ``knowledgebase`` command line.

Each command runs against its own ``Storage`` and closes it in its
``finally`` block, so the embedded store file is never held open between
invocations.
"""

import os
from dataclasses import dataclass, field

from knowledgebase import Storage

DEFAULT_CLI_URL = "sqlite:///./knowledgebase.db"


def get_database_url(url: str | None) -> str:
    """Pick the store the command should open.

    ``--database`` wins over ``KNOWLEDGEBASE_URL``; with neither set the
    store is ``knowledgebase.db`` in the working directory. Bare paths and
    ``:memory:`` are accepted and normalized by the connection layer.
    """
    if url:
        return url
    if env_url := os.getenv("KNOWLEDGEBASE_URL"):
        return env_url
    return DEFAULT_CLI_URL


@dataclass
class CLIContext:
    """Options from the root callback, shared with the ``types`` commands.

    The storage is built on first ``get_storage()`` and does not connect
    until a command issues its first operation, so ``version`` and
    ``--help`` never touch the store file.
    """

    database_url: str
    echo: bool
    json_output: bool
    _storage: Storage | None = field(default=None, init=False, repr=False)

    def get_storage(self) -> Storage:
        if self._storage is None:
            self._storage = Storage(self.database_url, echo=self.echo)
        return self._storage

    def close(self) -> None:
        """Dispose of the storage built for this invocation, if any."""
        if self._storage is not None:
            self._storage.close()
            self._storage = None
