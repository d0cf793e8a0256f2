"""In-memory storage of saved kitchen designs."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from kitchens.web.exceptions import SavedConfigNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedConfig:
    """A stored kitchen configuration and the modules generated from it."""

    config_id: str
    config: dict[str, Any]
    modules: list[dict[str, Any]]
    description: str
    timestamp: str


class ConfigStorage:
    """Process-local store of saved designs, keyed by generated id.

    Contents are lost when the process exits.
    """

    def __init__(self) -> None:
        self._configs: dict[str, SavedConfig] = {}

    def save(
        self,
        config: dict[str, Any],
        modules: list[dict[str, Any]],
        description: str,
    ) -> SavedConfig:
        """Store a design and return its record."""
        config_id = f"kitchen-{uuid4().hex[:12]}"
        saved = SavedConfig(
            config_id=config_id,
            config=config,
            modules=modules,
            description=description,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
        self._configs[config_id] = saved
        logger.info(f"Saved kitchen configuration: {config_id}")
        return saved

    def get(self, config_id: str) -> SavedConfig:
        """Fetch a stored design.

        Raises:
            SavedConfigNotFoundError: If the id is unknown.
        """
        try:
            return self._configs[config_id]
        except KeyError:
            raise SavedConfigNotFoundError(config_id) from None

    def __len__(self) -> int:
        return len(self._configs)
