"""Configuration classes for bfsgraph traversals."""

from dataclasses import dataclass


@dataclass
class TraversalConfig:
    """Tunables for breadth-first traversal diagnostics."""

    # Emit a DEBUG progress line every N discovered nodes; 0 disables it
    progress_interval: int = 10_000

    def should_report(self, discovered: int) -> bool:
        """Return True when ``discovered`` lands on a progress boundary."""
        if self.progress_interval <= 0:
            return False
        return discovered % self.progress_interval == 0


# Global configuration instance
TRAVERSAL_CONFIG = TraversalConfig()
