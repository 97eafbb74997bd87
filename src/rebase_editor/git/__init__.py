"""Repository access used by the show-commit screen."""

from .commit_loader import CommitDetails, CommitLoader, FileChange, GitCommitLoader

__all__ = ["CommitDetails", "CommitLoader", "FileChange", "GitCommitLoader"]
