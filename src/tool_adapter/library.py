import logging
from pathlib import Path

import yaml

from .types import UniversalTool

logger = logging.getLogger(__name__)


class ToolsLibrary:
    """Tool definitions loaded from a directory of YAML files.

    One tool per `*.yaml` file. Files are read once, in filename order.
    """

    def __init__(self, directory: str) -> None:
        self._tools: dict[str, UniversalTool] = {}
        logger.info("Initializing ToolsLibrary from directory: %s", directory)
        self._load_all(Path(directory))
        logger.info("Loaded %d tools", len(self._tools))

    def get(self, name: str) -> UniversalTool:
        logger.debug("Getting tool: %s", name)
        try:
            return self._tools[name]
        except KeyError:
            logger.error("Tool not found: %s", name)
            raise KeyError(f"Tool '{name}' not found")

    def names(self) -> list[str]:
        return list(self._tools.keys())

    def list(self) -> dict[str, UniversalTool]:
        # shallow copy, the library stays read-only
        return dict(self._tools)

    def _load_all(self, directory: Path) -> None:
        for file_path in sorted(directory.glob("*.yaml")):
            tool = self._load_tool(file_path)
            if tool.name in self._tools:
                raise ValueError(f"Tool '{tool.name}' already registered")
            self._tools[tool.name] = tool
            logger.debug("Loaded tool: %s from %s", tool.name, file_path)

    def _load_tool(self, file_path: Path) -> UniversalTool:
        with open(file_path) as f:
            data = yaml.safe_load(f)
        return UniversalTool.model_validate(data)
