#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdinline library.

The inline conversion itself is total: ``convert`` never raises for string
input, and malformed markup always degrades to literal text. The exceptions
defined here cover the edges around it, where a context is resolved from
caller-supplied options and reference definitions, and where the command
line tool reads its inputs.

Exception Hierarchy
-------------------
- MdInlineError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class given to the resolver)
    - ReferenceDefinitionError (malformed link table entry)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - MalformedFileError (unreadable or invalid reference definition file)

  - DependencyError (optional package missing)

"""

from typing import Any


class MdInlineError(Exception):
    """Base exception class for all mdinline-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdInlineError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object of the wrong type is supplied.

    Parameters
    ----------
    expected_type : type
        The expected options class type
    received_type : type
        The actual type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(self, expected_type: type, received_type: type, message: str | None = None):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"Expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.expected_type = expected_type
        self.received_type = received_type


class ReferenceDefinitionError(ValidationError):
    """Exception raised when a link table entry cannot be interpreted.

    Parameters
    ----------
    identifier : str
        Reference identifier of the offending entry
    value : any
        The value that could not be turned into a reference definition
    message : str, optional
        Custom error message

    """

    def __init__(self, identifier: Any, value: Any, message: str | None = None):
        """Initialize the reference definition error."""
        if message is None:
            message = f"Invalid reference definition for {identifier!r}: {value!r}"
        super().__init__(message, parameter_name="links", parameter_value=value)
        self.identifier = identifier


class FileError(MdInlineError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when a file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class MalformedFileError(FileError):
    """Exception raised when a file has invalid structure."""

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed file error."""
        super().__init__(message, file_path=file_path, original_error=original_error)


class DependencyError(MdInlineError):
    """Exception raised when an optional dependency is not installed.

    Parameters
    ----------
    feature : str
        Name of the feature requiring the dependency
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The import failure that revealed the missing package

    """

    def __init__(
        self,
        feature: str,
        missing_packages: list[tuple[str, str]],
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        if message is None:
            pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
            message = f"{feature} requires the following packages: {pkg_list}"
        super().__init__(message, original_error=original_import_error)
        self.feature = feature
        self.missing_packages = missing_packages
