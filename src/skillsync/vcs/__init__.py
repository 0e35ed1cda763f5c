"""Version-control collaborators used for author fallback."""

from .git import AuthorLookup, GitAuthorLookup, NullAuthorLookup

__all__ = ["AuthorLookup", "GitAuthorLookup", "NullAuthorLookup"]
