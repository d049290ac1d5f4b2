#!/usr/bin/env python3
"""
validators.py
--------------------
Validation and normalization of configuration values.

Config files and front-matter allow loose shapes (a single locator or a
list, a boolean or a mapping for ``toc``). These helpers normalize them
into the strict types the theme layer expects.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .exceptions import ValidationError


class DataValidator:
    """Centralized validation for configuration and metadata values."""

    @staticmethod
    def validate_required_fields(
        data: Dict[str, Any], required_fields: List[str]
    ) -> None:
        """
        Validate that required fields are present and non-empty.

        Args:
            data: Data dictionary to validate
            required_fields: List of required field names

        Raises:
            ValidationError: If validation fails
        """
        for field in required_fields:
            if field not in data or not data[field]:
                raise ValidationError(f"Required field '{field}' missing or empty")

    @staticmethod
    def normalize_locators(value: Any, field: str = "theme") -> List[str]:
        """
        Normalize a theme field into a list of locator strings.

        ``None`` becomes an empty list and a single string becomes a
        one-element list. Empty strings are kept; the theme parser treats
        them as "no theme".

        Args:
            value: Raw field value
            field: Field name used in error messages

        Returns:
            List of locator strings

        Raises:
            ValidationError: If the value is neither a string nor a list of strings
        """
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            for item in value:
                if not isinstance(item, str):
                    raise ValidationError(
                        f"Field '{field}' must contain only strings, got {type(item).__name__}"
                    )
            return list(value)
        raise ValidationError(
            f"Field '{field}' must be a string or list of strings, got {type(value).__name__}"
        )

    @staticmethod
    def normalize_vars(value: Any) -> Dict[str, Any]:
        """
        Normalize an entry ``vars`` field into a dictionary.

        Raises:
            ValidationError: If the value is not a mapping
        """
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValidationError(
                f"Field 'vars' must be a mapping, got {type(value).__name__}"
            )
        return {str(k): v for k, v in value.items()}

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """Strip a string value, returning None for empty or missing values."""
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @staticmethod
    def normalize_bool(value: Any) -> Optional[bool]:
        """
        Convert various inputs to boolean.

        Raises:
            ValidationError: If conversion fails
        """
        if isinstance(value, bool):
            return value
        elif isinstance(value, (int, float)):
            if value == 0:
                return False
            elif value == 1:
                return True
            raise ValidationError(f"Cannot convert numeric '{value}' to boolean")
        elif isinstance(value, str):
            if value.lower() in ("true", "1", "yes", "on"):
                return True
            elif value.lower() in ("false", "0", "no", "off"):
                return False
            raise ValidationError(f"Cannot convert '{value}' to boolean")
        elif value is not None:
            return bool(value)
        return None
