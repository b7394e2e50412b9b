"""In-memory repository holding a chain of commits."""

import logging
from typing import Iterator, Optional

from repo_ledger.config import DEFAULT_SETTINGS, LedgerSettings
from repo_ledger.core.ids import CommitIdGenerator, shared_generator
from repo_ledger.errors import InvalidArgument
from repo_ledger.models.commit import Clock, Commit, utc_now

logger = logging.getLogger(__name__)


class Repository:
    """A named history of commits, most recent first.

    The repository only keeps a reference to its head; every other commit is
    reached by following ``Commit.past`` links. Identifiers come from the
    process-wide generator unless one is passed in.
    """

    def __init__(
        self,
        name: str,
        *,
        id_generator: Optional[CommitIdGenerator] = None,
        clock: Optional[Clock] = None,
        settings: Optional[LedgerSettings] = None,
    ):
        if not isinstance(name, str) or not name:
            raise InvalidArgument("Repository name must be a non-empty string")

        self._name = name
        self._head: Optional[Commit] = None
        self._id_generator = id_generator or shared_generator()
        self._clock = clock or utc_now
        self.settings = settings or DEFAULT_SETTINGS

    @property
    def name(self) -> str:
        return self._name

    def head(self) -> Optional[str]:
        """Get the id of the current head, or None if there are no commits."""
        if self._head is None:
            return None
        return self._head.id

    def commits(self) -> Iterator[Commit]:
        """Iterate over the chain from the head back to the oldest commit."""
        current = self._head
        while current is not None:
            yield current
            current = current.past

    def size(self) -> int:
        """Count the commits reachable from the head."""
        return sum(1 for _ in self.commits())

    def __len__(self) -> int:
        return self.size()

    def describe(self) -> str:
        if self._head is None:
            return f"{self._name} - No commits"
        return f"{self._name} - Current head: {self._describe_commit(self._head)}"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Repository(name={self._name!r}, head={self.head()!r})"

    def get(self, target_id: str) -> Optional[Commit]:
        """Find the commit with the given id."""
        return next((c for c in self.commits() if c.id == target_id), None)

    def contains(self, target_id: str) -> bool:
        """Check whether a commit with the given id is in this repository."""
        return self.get(target_id) is not None

    def __contains__(self, target_id: object) -> bool:
        return isinstance(target_id, str) and self.contains(target_id)

    def history(self, n: int) -> str:
        """Describe the ``n`` most recent commits, one per line, newest first.

        Returns every commit when ``n`` exceeds the size of the repository and
        an empty string when there are no commits.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise InvalidArgument(f"History length must be a positive integer, got {n!r}")

        lines = []
        for commit in self.commits():
            if len(lines) == n:
                break
            lines.append(self._describe_commit(commit))
        return self.settings.history_separator.join(lines)

    def commit(self, message: str) -> str:
        """Add a commit on top of the current head and return its id."""
        new_commit = Commit.create(
            message,
            self._head,
            id_generator=self._id_generator,
            clock=self._clock,
        )
        self._head = new_commit
        logger.debug("Committed %s to %s", new_commit.id, self._name)
        return new_commit.id

    def drop(self, target_id: str) -> bool:
        """Remove the commit with the given id, keeping the rest of the history.

        Returns False if there is no such commit in this repository.
        """
        if self._head is None:
            logger.debug("Nothing to drop from empty repository %s", self._name)
            return False

        if self._head.id == target_id:
            self._head = self._head.past
            logger.debug("Dropped head %s from %s", target_id, self._name)
            return True

        current = self._head
        while current.past is not None:
            if current.past.id == target_id:
                current._relink(current.past.past)
                logger.debug("Dropped %s from %s", target_id, self._name)
                return True
            current = current.past

        logger.debug("Commit %s not found in %s", target_id, self._name)
        return False

    def synchronize(self, other: "Repository") -> None:
        """Move every commit of ``other`` into this repository.

        If this repository is empty it takes over the other chain as is.
        Otherwise the other chain is attached behind this repository's oldest
        commit; commits are not interleaved by timestamp. ``other`` is left
        without commits either way.
        """
        if other is self:
            logger.debug("Ignoring synchronize of %s with itself", self._name)
            return

        if self._head is None:
            self._head = other._head
        elif other._head is not None:
            tail = self._head
            while tail.past is not None:
                tail = tail.past
            tail._relink(other._head)

        logger.debug("Synchronized %s into %s", other._name, self._name)
        other._head = None

    def _describe_commit(self, commit: Commit) -> str:
        return commit.describe(self.settings.timestamp_format)
