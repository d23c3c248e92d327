# motion_acceptance/exceptions.py
"""
Custom exceptions for the motion acceptance library.
"""


class AcceptanceError(Exception):
    """Base exception class for all motion acceptance errors."""
    def __init__(self, message, *args, test_name=None, version=None):
        super().__init__(message, *args)
        self.message = message
        self.test_name = test_name
        self.version = version

    def __str__(self):
        base_message = self.message

        details = []
        if self.test_name is not None:
            details.append(f"Test: {self.test_name}")
        if self.version is not None:
            details.append(f"Version: {self.version}")

        if details:
            return f"{base_message} ({', '.join(details)})"
        return base_message


class CaptureReadError(AcceptanceError, OSError):
    """Capture file is missing, unreadable or too short for a window."""

    def __init__(self, message, path=None, offset=None):
        super().__init__(message)
        self.path = path
        self.offset = offset


class CorruptDataError(AcceptanceError):
    """Capture window content does not match the expected layout."""

    def __init__(self, message, offset=None, found=None):
        super().__init__(message)
        self.offset = offset
        self.found = found

    def __str__(self):
        parts = [self.message]
        if self.offset is not None:
            parts.append(f"offset: 0x{self.offset:X}")
        if self.found is not None:
            parts.append(f"found: 0x{self.found:08X}")
        if len(parts) > 1:
            return " - ".join(parts)
        return self.message


class DescriptionLoadError(AcceptanceError):
    """A test description could not be parsed or validated."""

    def __init__(self, message, source=None):
        super().__init__(message, test_name=source)
        self.source = source


class ComparisonError(AcceptanceError, TypeError):
    """Error metric requested for non-numeric operands."""


class DatasetError(AcceptanceError):
    """Malformed or unusable time-series data."""


class ConfigurationError(AcceptanceError):
    """Errors related to evaluation configuration."""


class BatchEvaluationError(AcceptanceError):
    """One or more test/version pairs failed during an isolating batch run."""

    def __init__(self, message, individual_errors=None, results=None):
        super().__init__(message)
        self.individual_errors = individual_errors or {}
        self.results = results or []

    def __str__(self):
        base_msg = super().__str__()
        if self.individual_errors:
            err_details = "; ".join(
                f"{test_name}@{version or '*'}: {err}"
                for (test_name, version), err in self.individual_errors.items()
            )
            return f"{base_msg} - Individual Errors: [{err_details}]"
        return base_msg


class KinematicsError(AcceptanceError):
    """Errors related to the kinematic motion model."""
