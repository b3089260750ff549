"""Licensing engine exceptions.

Business-rule failures are never raised; they are reported as errors and
warnings on CheckResult. These exceptions cover the infrastructure side only.
"""


class LicenseValidationError(Exception):
    """Base class for faults that prevent a validation from running"""
    pass


class ValidationContextError(LicenseValidationError):
    """Raised when the pre-fetched validation context is missing or inconsistent"""
    pass
