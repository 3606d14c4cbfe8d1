from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Protocol, Sequence


class Snapshotable(Protocol):
    def snapshot(self) -> Any:
        raise NotImplementedError

    def restore(self, state: Any) -> None:
        raise NotImplementedError


class InMemoryUnitOfWork:
    """All-or-nothing scope over several in-memory repositories.

    On any exception raised inside the block every participating repository is
    rolled back to the state it had when the block was entered.
    """

    def __init__(self, repositories: Sequence[Snapshotable]):
        self._repositories = list(repositories)

    @contextmanager
    def __call__(self) -> Iterator[None]:
        states = [repo.snapshot() for repo in self._repositories]
        try:
            yield
        except BaseException:
            for repo, state in zip(self._repositories, states):
                repo.restore(state)
            raise
