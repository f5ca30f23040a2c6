"""
Failure policies for JSONNav.

When navigating one path raises (a nested array, a strict action refusing
a missing branch, a bug in a callback), the navigator asks the action what
to do. DefaultNavigateAction delegates that decision to one of these
policies, so the same action can run strict or best-effort.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
import sys

from .core.action import PathFailure


class FailurePolicy(ABC):
    """
    Base class for per-path failure policies.

    Subclasses map an exception raised while navigating a path to a
    PathFailure decision.
    """

    @abstractmethod
    def decide(self, path: str, error: Exception) -> PathFailure:
        """
        Decide how a failed path is handled.

        Args:
            path: The path string being navigated when the error occurred
            error: The exception that was raised

        Returns:
            ABORT_SILENTLY to stop the remaining paths, FAIL_FAST to re-raise,
            or CONTINUE to move on to the next path.
        """
        pass


class FailFastPolicy(FailurePolicy):
    """
    Policy that re-raises any error, stopping the navigation.

    This is the default - useful when a partial result is worse than none.
    """

    def decide(self, path: str, error: Exception) -> PathFailure:
        return PathFailure.FAIL_FAST


class AbortSilentlyPolicy(FailurePolicy):
    """
    Policy that stops at the first failing path without raising.

    Paths navigated before the failure keep their results.
    """

    def decide(self, path: str, error: Exception) -> PathFailure:
        return PathFailure.ABORT_SILENTLY


def _error_record(path: str, error: Exception) -> Dict[str, Any]:
    return {
        'path': path,
        'error': error,
        'error_type': type(error).__name__,
        'error_message': str(error)
    }


class ContinueOnErrorsPolicy(FailurePolicy):
    """
    Policy that records errors and continues with the next path.

    Useful when you want as many paths as possible processed despite
    some failures.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors: List[Dict[str, Any]] = []
        self.failed_paths: List[str] = []
        self.verbose = verbose

    def decide(self, path: str, error: Exception) -> PathFailure:
        self.errors.append(_error_record(path, error))
        self.failed_paths.append(path)

        if self.verbose:
            print(f"\nWARNING: Skipping path '{path}': {type(error).__name__}: {error}",
                  file=sys.stderr)

        return PathFailure.CONTINUE

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        by_type: Dict[str, int] = {}
        for record in self.errors:
            by_type[record['error_type']] = by_type.get(record['error_type'], 0) + 1
        return {
            'total_errors': len(self.errors),
            'failed_paths': len(set(self.failed_paths)),
            'by_type': by_type,
            'errors': self.errors  # Full error details
        }


class CollectErrorsPolicy(ContinueOnErrorsPolicy):
    """
    Policy that collects all errors without printing, for batch processing.

    Present the collected errors once the navigation is done.
    """

    def __init__(self):
        super().__init__(verbose=False)


class ThresholdPolicy(FailurePolicy):
    """
    Policy that tolerates failures up to a threshold, then fails fast.

    Useful when a few missing branches are expected but many indicate
    the wrong document or the wrong paths.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum failures to tolerate before re-raising
            verbose: If True, print warnings for tolerated failures
        """
        if max_errors < 0:
            raise ValueError("max_errors cannot be negative")
        self.max_errors = max_errors
        self.error_count = 0
        self.verbose = verbose
        self.errors: List[Exception] = []

    def decide(self, path: str, error: Exception) -> PathFailure:
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            return PathFailure.FAIL_FAST

        if self.verbose:
            print(f"\nWARNING [{self.error_count}/{self.max_errors}]: Skipping path '{path}': {error}",
                  file=sys.stderr)
        return PathFailure.CONTINUE
