#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Quire project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in theme resolution, configuration
loading, and workspace materialization.

Exception Hierarchy:
    Exception (built-in)
    └── QuireError - Base for all Quire errors
        ├── ThemeError - Theme resolution failures
        │   └── InvalidStyleFileError - Package manifest declares no style
        ├── ConfigError - Configuration file loading failures
        ├── ValidationError - Data validation failures
        ├── EntryParseError - Document front-matter parsing failures
        └── ThemeBuildError - Build driver failures

Usage:
    from quire.core.exceptions import ConfigError, InvalidStyleFileError

    try:
        config = load_config(path)
    except ConfigError as e:
        logger.log_error(e, {"config": str(path)})
"""


class QuireError(Exception):
    """
    Base exception for all Quire errors.

    Catch this to handle any error raised by the project itself. Errors
    coming from the filesystem or the Sass engine are not wrapped and keep
    their original type.
    """

    pass


class ThemeError(QuireError):
    """
    Exception for theme resolution failures.

    Raised when a locator resolves to something that cannot be turned
    into a usable theme.
    """

    pass


class InvalidStyleFileError(ThemeError):
    """
    Exception for package manifests without a usable style declaration.

    Raised when a locator resolves to a package whose manifest declares
    none of the theme style field, the ``style`` field or the ``main``
    field. This aborts the resolution call; it is never retried.

    Attributes:
        locator: The locator string being parsed
        package_root: Package root directory holding the manifest

    Examples:
        >>> raise InvalidStyleFileError(
        ...     "invalid style file: None while parsing my-theme",
        ...     locator="my-theme",
        ... )
    """

    def __init__(
        self, message: str, locator: str = "", package_root: str = ""
    ) -> None:
        super().__init__(message)
        self.locator = locator
        self.package_root = package_root


class ConfigError(QuireError):
    """
    Exception for configuration file loading failures.

    Raised when:
    - The configuration file does not exist
    - The file is not valid YAML
    - The top-level value is not a mapping

    Examples:
        >>> raise ConfigError("Config file not found: quire.config.yaml")
    """

    pass


class ValidationError(QuireError):
    """
    Exception for data validation failures.

    Raised when configuration values have the wrong shape:
    - Theme locators that are not strings
    - Entry ``vars`` that are not mappings
    - Entries without a ``path``

    Examples:
        >>> raise ValidationError("Field 'theme' must be a string or list of strings")
    """

    pass


class EntryParseError(QuireError):
    """
    Exception for document front-matter parsing failures.

    Raised when a Markdown document's YAML front-matter is malformed or
    is not a mapping.
    """

    pass


class ThemeBuildError(QuireError):
    """
    Exception for theme build failures.

    Raised by the build driver when resolution or materialization fails.
    The original exception is always chained as ``__cause__``.

    Examples:
        >>> raise ThemeBuildError("Theme build failed: missing style.css") from e
    """

    pass
