"""
Template loader - discovers progression templates.

Templates can come from:
1. Built-in library (shipped with package)
2. Project templates (YAML files in the user's templates directory)

A project file looks like:

    templates:
      - name: ii-V-I
        degrees: [1, 4, 0]
        description: Jazz cadence
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chord_studio.config import check_filename
from chord_studio.models import ProgressionTemplate
from chord_studio.templates.library import COMMON_PROGRESSIONS

logger = logging.getLogger(__name__)


class TemplateLoader:
    """
    Discovers and loads progression templates.

    Project templates override built-in templates with the same name.
    """

    def __init__(
        self,
        project_path: Path | None = None,
        builtins: Sequence[ProgressionTemplate] = COMMON_PROGRESSIONS,
    ):
        """
        Initialize the template loader.

        Args:
            project_path: Directory of project template YAML files
            builtins: Built-in templates
        """
        self.project_path = project_path
        self.builtins = tuple(builtins)
        self._cache: list[ProgressionTemplate] | None = None

    def list_templates(self) -> list[ProgressionTemplate]:
        """All templates, built-ins first, project overrides applied."""
        if self._cache is not None:
            return list(self._cache)

        templates: dict[str, ProgressionTemplate] = {t.name: t for t in self.builtins}

        if self.project_path and self.project_path.exists():
            for path in sorted(self.project_path.glob("*.yaml")):
                for template in self._load_template_file(path):
                    templates[template.name] = template

        self._cache = list(templates.values())
        return list(self._cache)

    def get_template(self, name: str) -> ProgressionTemplate | None:
        """Get a template by name."""
        for template in self.list_templates():
            if template.name == name:
                return template
        return None

    def save_template(self, template: ProgressionTemplate) -> Path:
        """
        Add a template to the project directory.

        Args:
            template: Template to write

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        dest_file = self.project_path / f"{check_filename(template.name)}.yaml"
        self.project_path.mkdir(parents=True, exist_ok=True)
        data = {"templates": [template.model_dump(mode="json")]}
        dest_file.write_text(yaml.safe_dump(data, sort_keys=False))

        self.clear_cache()
        return dest_file

    def _load_template_file(self, path: Path) -> list[ProgressionTemplate]:
        """Load templates from a YAML file, skipping ones that fail validation."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Skipping unreadable template file {path}: {e}")
            return []

        if not isinstance(data, dict):
            logger.warning(f"Skipping template file {path}: expected a mapping")
            return []

        return self._parse_templates(data, path)

    def _parse_templates(self, data: dict[str, Any], path: Path) -> list[ProgressionTemplate]:
        """Parse the 'templates' list from YAML data."""
        entries = data.get("templates") or []
        if not isinstance(entries, list):
            logger.warning(f"Skipping template file {path}: 'templates' must be a list")
            return []

        templates: list[ProgressionTemplate] = []
        for entry in entries:
            try:
                templates.append(ProgressionTemplate.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Skipping invalid template in {path}: {e}")
        return templates

    def clear_cache(self) -> None:
        """Clear the template cache."""
        self._cache = None
