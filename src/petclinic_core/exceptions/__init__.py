"""
Custom exceptions for the petclinic-core package.

This module defines the exception hierarchy and custom exceptions
used throughout the clinic domain model.
"""

from .core_exceptions import (  # Utility functions
    BusinessRuleException,
    ConfigurationException,
    DatabaseException,
    FileTooLargeException,
    InvalidArgumentException,
    InvalidFilenameException,
    PetClinicException,
    PhotoUploadException,
    TransactionException,
    UnsupportedFileTypeException,
    ValidationException,
    create_error_response,
    format_validation_errors,
    log_exception_context,
)

__all__ = [
    # Exception classes
    "PetClinicException",
    "ValidationException",
    "InvalidArgumentException",
    "BusinessRuleException",
    "PhotoUploadException",
    "FileTooLargeException",
    "UnsupportedFileTypeException",
    "InvalidFilenameException",
    "DatabaseException",
    "TransactionException",
    "ConfigurationException",
    # Utility functions
    "format_validation_errors",
    "create_error_response",
    "log_exception_context",
]
