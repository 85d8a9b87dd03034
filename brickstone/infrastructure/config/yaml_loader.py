"""YAML configuration loader."""

from pathlib import Path
from typing import Any

import yaml


class YAMLConfigLoader:
    """Reads the site's raw settings from a YAML file.

    A missing file is not an error: every setting has a default.
    """

    def __init__(self, config_path: Path | str = "config.yaml") -> None:
        self._path = Path(config_path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> dict[str, Any]:
        """Parse the file into a plain mapping.

        Raises:
            ValueError: If the document is not a mapping.
            yaml.YAMLError: If the file is not valid YAML.
        """
        if not self.exists:
            return {}

        data = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {self._path}")
        return data
