"""
Path Resolver Module

Validates registry paths before lookup.

Registry paths are slash-separated, unrooted and already clean:
no leading or trailing slash, no empty element and no '.' or '..'
element. The single path '.' names the root.

Version: 1.0.0
"""

from typing import Any, Optional

from memfs.exceptions import InvalidPathError


ROOT = '.'
SEPARATOR = '/'


class PathResolver:
    """
    Checks paths against the path-validity rule.

    Handles:
    - The '.' root special case
    - Leading, trailing and doubled slashes
    - '.' and '..' elements
    """

    @staticmethod
    def check(path: Any) -> Optional[str]:
        """
        Check a path against the validity rule.

        Returns:
            None if the path is valid, otherwise the reason it is not
        """
        if not isinstance(path, str):
            return "not a string"
        if path == ROOT:
            return None
        if not path:
            return "empty path"
        if path.startswith(SEPARATOR):
            return "leading slash"
        if path.endswith(SEPARATOR):
            return "trailing slash"

        for element in path.split(SEPARATOR):
            if element == '':
                return "empty element"
            if element == '.':
                return "'.' element"
            if element == '..':
                return "'..' element"

        return None

    @staticmethod
    def is_valid(path: Any) -> bool:
        """Check if a path satisfies the validity rule."""
        return PathResolver.check(path) is None

    @staticmethod
    def validate(path: Any) -> str:
        """
        Return the path unchanged if it is valid.

        Raises:
            InvalidPathError: With the failing reason in its context
        """
        reason = PathResolver.check(path)
        if reason is not None:
            raise InvalidPathError(path, reason=reason)
        return path
