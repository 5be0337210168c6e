"""Load named Simplex expressions from a YAML pattern library.

    patterns:
      pair:
        expression: "pairName=[x,y]"
        description: Query-string style pairs
        global: true
      date:
        expression: year/month/day
        weakParse: true
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from simplex.errors import PatternLibraryError
from simplex.matcher import Simplex
from simplex.options import SimplexOptions

logger = logging.getLogger(__name__)


@dataclass
class PatternDefinition:
    """A named expression and its options."""

    name: str
    expression: str
    description: str | None = None
    options: SimplexOptions = field(default_factory=SimplexOptions)

    def build(self) -> Simplex:
        return Simplex(self.expression, self.options)


class PatternLibrary:
    """Loads pattern definitions from a YAML file."""

    def __init__(self, path: Path):
        self.path = path
        self.patterns: dict[str, PatternDefinition] = {}

    def load_all(self) -> None:
        """Load every pattern in the library file, if the file exists."""
        if not self.path.exists():
            logger.debug("Pattern library %s not found", self.path)
            return

        with open(self.path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise PatternLibraryError(f"Cannot parse {self.path}: {e}") from e

        if not data:
            return
        if not isinstance(data, dict) or not isinstance(data.get("patterns", {}), dict):
            raise PatternLibraryError(f"{self.path}: expected a 'patterns' mapping")

        for name, entry in (data.get("patterns") or {}).items():
            self.patterns[str(name)] = self._parse_pattern(str(name), entry)

        logger.debug("Loaded %d pattern(s) from %s", len(self.patterns), self.path)

    def _parse_pattern(self, name: str, data: Any) -> PatternDefinition:
        """Parse one library entry into a PatternDefinition."""
        if not isinstance(data, dict) or not isinstance(data.get("expression"), str):
            raise PatternLibraryError(
                f"{self.path}: pattern '{name}' needs a string 'expression'"
            )
        return PatternDefinition(
            name=name,
            expression=data["expression"],
            description=data.get("description"),
            options=SimplexOptions.from_mapping(data),
        )

    def get(self, name: str) -> PatternDefinition | None:
        """Get a pattern by name."""
        return self.patterns.get(name)

    def list_patterns(self) -> list[PatternDefinition]:
        """List all loaded patterns."""
        return list(self.patterns.values())

    def build(self, name: str) -> Simplex:
        """Compile the named pattern.

        Raises:
            PatternLibraryError: If no pattern has that name.
        """
        definition = self.get(name)
        if definition is None:
            raise PatternLibraryError(f"Unknown pattern '{name}' in {self.path}")
        return definition.build()
