"""Shared utilities for Pydantic model persistence.

Loads and saves Pydantic models to/from JSON files and validates raw JSON
text (e.g. an imported mapping file). Models are always written with their
aliases, so camelCase snapshots round-trip unchanged.

Error Handling:
    Low-level Pydantic/IO errors are converted into StateError subclasses
    with recovery hints (see exceptions/handlers.py).

Safety Features:
    - Automatic .bak backups before overwriting files
    - Atomic writes using temp file + rename
    - A failed load never touches the file or the caller's current state
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from palette_bridge.exceptions import (
    StateError,
    StateFileInvalidError,
    wrap_pydantic_error,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class PydanticPersistence:
    """
    Stateless Pydantic persistence operations.

    Example Usage:
        ```python
        state = PydanticPersistence.load_json(Path("state.json"), AppState)
        PydanticPersistence.save_json(state, Path("state.json"))
        ```
    """

    @staticmethod
    def parse_json(text: str, model_type: type[T], source: str = "<input>") -> T:
        """
        Validate JSON text against a Pydantic model.

        Args:
            text: Raw JSON document
            model_type: The Pydantic model class to validate against
            source: Label used in error messages (file path or "<input>")

        Raises:
            StateFileInvalidError: If the text is empty or not valid JSON
            StateValidationError: If the JSON content fails validation
        """
        if not text or not text.strip():
            raise StateFileInvalidError(source, "File is empty")

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {source}: {e}")
            raise wrap_pydantic_error(e, source) from e

        logger.debug(f"Loaded {model_type.__name__} from {source}")
        return model

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """
        Load and validate a Pydantic model from a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            StateFileInvalidError: If the JSON syntax is invalid
            StateValidationError: If the JSON content fails Pydantic validation
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            json_content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Unexpected error reading {path}: {e}")
            raise StateFileInvalidError(str(path), f"Unexpected error: {e}") from e

        return PydanticPersistence.parse_json(json_content, model_type, source=str(path))

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True,
        backup: bool = True,
    ) -> None:
        """
        Save a Pydantic model to a JSON file with automatic backup and atomic write.

        Args:
            data: The Pydantic model instance to save
            path: Path where the file should be saved
            indent: JSON indentation level (default: 2 spaces)
            create_parents: Create parent directories if they don't exist (default: True)
            backup: Create .bak backup before overwriting existing file (default: True)

        Raises:
            OSError: If the file cannot be written (permission denied, disk full, etc.)
        """
        try:
            if create_parents and path.parent:
                path.parent.mkdir(parents=True, exist_ok=True)

            if backup and path.exists():
                backup_path = path.with_suffix(path.suffix + ".bak")
                shutil.copy2(path, backup_path)
                logger.debug(f"Created backup: {backup_path}")

            json_content = data.model_dump_json(indent=indent, by_alias=True)

            # Atomic write: write to temp file first, then rename
            temp_path = path.with_suffix(path.suffix + ".tmp")
            try:
                temp_path.write_text(json_content, encoding="utf-8")
                temp_path.replace(path)
                logger.debug(f"Saved {type(data).__name__} to {path}")
            finally:
                if temp_path.exists():
                    temp_path.unlink()

        except OSError as e:
            logger.error(f"OS error saving {type(data).__name__} to {path}: {e}")
            raise

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[T], default_factory: Callable[[], T] | None = None
    ) -> T:
        """
        Load a model from JSON, or return a default if the file doesn't exist.

        Only a missing file triggers the default; a corrupted file raises a
        StateError so it is never silently replaced.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"File not found: {path}, creating default {model_type.__name__}")
            if default_factory:
                return default_factory()
            return model_type()

    @staticmethod
    def validate_json(path: Path, model_type: type[T]) -> tuple[bool, str | None]:
        """
        Validate a JSON file against a Pydantic model.

        Returns:
            Tuple of (is_valid, error_message)
        """
        try:
            PydanticPersistence.load_json(path, model_type)
            return True, None
        except FileNotFoundError:
            return False, f"File not found: {path}"
        except StateError as e:
            return False, e.user_message
