"""Exception types raised by the job-shop GA package."""


class JobShopError(Exception):
    """Base class for all package errors."""


class ValidationError(JobShopError, ValueError):
    """Malformed problem instance (or instance file / config value)."""


class InvalidGenomeError(JobShopError, ValueError):
    """Genome whose job occurrence counts do not match the problem."""
