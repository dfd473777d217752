"""Registry mapping component kinds to their checkers."""

import logging

from quaystatus.errors import UnknownComponentError
from quaystatus.models.quay import ComponentKind

from .base import Checker
from .deployments import Clair, ClairPostgres, Postgres, Quay, Redis
from .hpa import HPA
from .mirror import Mirror

logger = logging.getLogger(__name__)

BUILTIN_CHECKERS = [Quay, Postgres, Clair, ClairPostgres, Redis, HPA, Mirror]


class CheckerRegistry:
    """Holds one checker instance per component kind."""

    def __init__(self):
        self._checkers = {}

    @classmethod
    def with_builtin_checkers(cls, accessor):
        """Build a registry holding every built-in checker, sharing one accessor."""
        registry = cls()
        for checker_class in BUILTIN_CHECKERS:
            registry.register_checker(checker_class(accessor))
        logger.info(f"Registered {len(registry)} component checkers")
        return registry

    def register_checker(self, checker):
        """Register a checker instance.

        Returns:
            bool: True if registration successful, False otherwise
        """
        if not isinstance(checker, Checker):
            logger.error(f"Checker must inherit from Checker: {type(checker)}")
            return False

        if checker.kind in self._checkers:
            existing = type(self._checkers[checker.kind]).__name__
            logger.warning(
                f"Checker for {checker.kind.value} already registered ({existing})"
            )
            return False

        self._checkers[checker.kind] = checker
        logger.debug(f"Registered checker {type(checker).__name__} for {checker.kind.value}")
        return True

    def get_checker(self, kind):
        try:
            return self._checkers[ComponentKind(kind)]
        except (KeyError, ValueError):
            raise UnknownComponentError(f"No checker registered for component {kind}")

    def has_checker(self, kind):
        try:
            return ComponentKind(kind) in self._checkers
        except ValueError:
            return False

    def list_kinds(self):
        return list(self._checkers.keys())

    def __len__(self):
        return len(self._checkers)
