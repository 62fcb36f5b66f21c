from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from leader_lexis.config.model import GlobalConfig
from leader_lexis.core.dataset import Dataset
from leader_lexis.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Shared, read-only context for layout + callback registration: config,
    the loaded Dataset and the view registry. Passed around instead of
    module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    dataset: Optional[Dataset] = None
    registry: Optional[ViewRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.dataset is None:
            raise RuntimeError("AppConfig.dataset must be initialized.")
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
