"""
Game Database.

Handles loading and validation of static game data documents.
"""

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema


class DataError(Exception):
    """A static data document is missing or does not match its schema."""


class Database:
    """
    Central loader for static JSON data.

    Layout under data_path:
        schemas/<name>.schema.json
        <category>/<document>.json
    """

    def __init__(self, data_path: Path | str):
        self._data_path = Path(data_path)
        self._schemas: dict[str, Any] = {}
        self._schemas_loaded = False

        self.logger = logging.getLogger(__name__)

    @property
    def data_path(self) -> Path:
        return self._data_path

    def load_schemas(self) -> None:
        """Load JSON schemas."""
        self._schemas_loaded = True
        schema_dir = self._data_path / "schemas"
        if not schema_dir.exists():
            self.logger.warning(f"Schema directory not found: {schema_dir}")
            return

        for schema_file in schema_dir.glob("*.schema.json"):
            try:
                with open(schema_file, 'r', encoding='utf-8') as f:
                    self._schemas[schema_file.name] = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                self.logger.error(f"Failed to load schema {schema_file}: {e}")

    def get_schema(self, schema_name: str) -> dict[str, Any] | None:
        if not self._schemas_loaded:
            self.load_schemas()
        return self._schemas.get(schema_name)

    def load_document(self, relative_path: str, schema_name: str) -> Any:
        """
        Load one JSON document and validate it.

        Args:
            relative_path: Path below data_path, e.g. "curriculum/alberta_curriculum.json"
            schema_name: File name of the schema, e.g. "curriculum.schema.json"

        Raises:
            DataError: If the file, its schema, or its contents are invalid
        """
        return self.load_file(self._data_path / relative_path, schema_name)

    def load_file(self, file_path: Path | str, schema_name: str) -> Any:
        """Load a JSON file from any location, validated against a known schema."""
        file_path = Path(file_path)
        schema = self.get_schema(schema_name)
        if schema is None:
            self.logger.warning(f"No schema found for {file_path.name} ({schema_name})")
            raise DataError(f"No schema named {schema_name}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.logger.error(f"Failed to load {file_path}: {e}")
            raise DataError(f"Failed to load {file_path}: {e}") from e

        try:
            jsonschema.validate(instance=data, schema=schema)
        except jsonschema.ValidationError as e:
            self.logger.error(f"Validation error in {file_path}: {e.message}")
            raise DataError(f"Validation error in {file_path}: {e.message}") from e

        return data

    def load_category(self, folder: Path | str, schema_name: str) -> dict[str, Any]:
        """
        Load all JSON files in a folder, keyed by file stem.

        Relative folders resolve below data_path. Files that fail to parse
        or validate are logged and skipped.
        """
        category_dir = Path(folder)
        if not category_dir.is_absolute():
            category_dir = self._data_path / category_dir
        data_store: dict[str, Any] = {}

        if not category_dir.exists():
            self.logger.warning(f"Data directory not found: {category_dir}")
            return data_store

        for file_path in sorted(category_dir.glob("*.json")):
            try:
                data_store[file_path.stem] = self.load_file(file_path, schema_name)
            except DataError:
                continue

        return data_store
