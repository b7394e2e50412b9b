"""Commit model for the ledger."""

from datetime import datetime, timezone
from typing import Callable, Optional

from pydantic import BaseModel, Field, PrivateAttr

from repo_ledger.config import DEFAULT_TIMESTAMP_FORMAT
from repo_ledger.core.ids import CommitIdGenerator, shared_generator
from repo_ledger.errors import InvalidArgument

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Commit(BaseModel):
    """Represents a single commit in a repository chain.

    ``id``, ``message`` and ``timestamp`` are frozen once the commit exists.
    The link to the previous commit is kept outside the validated fields and
    is only rewritten by the owning repository when it splices its chain.
    """

    id: str
    message: str = Field(min_length=1)
    timestamp: datetime

    _past: Optional["Commit"] = PrivateAttr(default=None)

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls,
        message: str,
        past: Optional["Commit"] = None,
        *,
        id_generator: Optional[CommitIdGenerator] = None,
        clock: Optional[Clock] = None,
    ) -> "Commit":
        """Create a commit on top of ``past`` with a fresh id and timestamp."""
        if not isinstance(message, str) or not message:
            raise InvalidArgument("Commit message must be a non-empty string")

        generator = id_generator or shared_generator()
        commit = cls(
            id=generator.next_id(),
            message=message,
            timestamp=(clock or utc_now)(),
        )
        commit._past = past
        return commit

    @property
    def past(self) -> Optional["Commit"]:
        """The commit made immediately before this one, if any."""
        return self._past

    def _relink(self, past: Optional["Commit"]) -> None:
        # Chain maintenance, called by Repository.drop and Repository.synchronize.
        self._past = past

    def describe(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
        """Format as ``"<id> at <timestamp>: <message>"``."""
        return f"{self.id} at {self.timestamp.strftime(timestamp_format)}: {self.message}"

    def __str__(self) -> str:
        return self.describe()
