"""
Runtime Configuration.

Projection parameters are fixed per instance and need no configuration;
the only tunable behaviour is how batch operations spread their work.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from common.errors import ConfigurationError


@dataclass(frozen=True)
class BatchConfig:
    """Configuration for batch projection.

    Attributes
    ----------
    max_workers : Optional[int]
        Number of worker threads. ``None`` lets
        `concurrent.futures.ThreadPoolExecutor` choose; ``1`` forces a
        serial loop.
    parallel_threshold : int
        Batches shorter than this are always processed serially, since
        thread start-up dominates for small inputs.
    """
    max_workers: Optional[int] = None
    parallel_threshold: int = 1024

    def __post_init__(self):
        """Validate configuration values."""
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError(
                f"max_workers must be None or >= 1, got {self.max_workers}",
                parameter="max_workers",
                value=self.max_workers
            )
        if self.parallel_threshold < 0:
            raise ConfigurationError(
                f"parallel_threshold must be >= 0, got {self.parallel_threshold}",
                parameter="parallel_threshold",
                value=self.parallel_threshold
            )

    @property
    def is_serial(self) -> bool:
        """Whether batches never use a thread pool."""
        return self.max_workers == 1

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'BatchConfig':
        """Build a configuration from a plain mapping.

        Unknown keys are rejected so that typos do not go unnoticed.

        Parameters
        ----------
        config : dict
            Mapping with any of the dataclass field names.

        Returns
        -------
        BatchConfig
            Validated configuration.
        """
        known = {"max_workers", "parallel_threshold"}
        unknown = set(config) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown batch configuration keys: {sorted(unknown)}"
            )
        return cls(**config)


DEFAULT_BATCH_CONFIG = BatchConfig()
