"""Configuration system for JSONNav.

This module defines how users describe a navigation up front: which paths
to follow, how they are delimited, and how failing paths are handled.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .core.path import DEFAULT_DELIMITER
from .error_policies import FailurePolicy, FailFastPolicy, CollectErrorsPolicy


class ConfigurationError(ValueError):
    """Raised when a NavigationConfig does not validate."""
    pass


@dataclass
class NavigationConfig:
    """Complete configuration for a navigation.

    Pass it to JSONNavigator.from_config, which validates it before any
    tree is touched.
    """

    # Paths to navigate, in order. None and "" entries are skipped.
    paths: List[Optional[str]] = field(default_factory=list)

    # Segment separator inside each path
    delimiter: str = DEFAULT_DELIMITER

    # Failure handling installed on the action (None keeps the action's own)
    policy: Optional[FailurePolicy] = None

    # Convenience constructors for common configurations

    @classmethod
    def strict(cls, paths: List[str], delimiter: str = DEFAULT_DELIMITER) -> 'NavigationConfig':
        """Create config that aborts on the first failing path.

        Returns:
            NavigationConfig with a FailFastPolicy
        """
        return cls(paths=list(paths), delimiter=delimiter, policy=FailFastPolicy())

    @classmethod
    def best_effort(cls, paths: List[str], delimiter: str = DEFAULT_DELIMITER) -> 'NavigationConfig':
        """Create config that skips failing paths and keeps going.

        Errors are collected quietly on the policy for later inspection.

        Returns:
            NavigationConfig with a CollectErrorsPolicy
        """
        return cls(paths=list(paths), delimiter=delimiter, policy=CollectErrorsPolicy())

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.delimiter, str) or not self.delimiter:
            errors.append("delimiter must be a non-empty string")

        if isinstance(self.paths, str):
            errors.append("paths must be a list of strings, not a single string")
        elif self.paths is not None:
            for index, path in enumerate(self.paths):
                if path is not None and not isinstance(path, str):
                    errors.append(f"path at index {index} is not a string: {path!r}")

        if self.policy is not None and not isinstance(self.policy, FailurePolicy):
            errors.append("policy must be a FailurePolicy")

        return errors
