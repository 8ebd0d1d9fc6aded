"""Exception types for javamodule-deps.

Only genuine configuration problems are raised. A module name that cannot be
resolved is a normal result (see ``resolution.results.Unresolved``), never an error.
"""


class JavaModuleDependenciesError(Exception):
    """Base class for all javamodule-deps errors."""


class ConfigurationError(JavaModuleDependenciesError):
    """Build or settings input is malformed or internally inconsistent."""


class CatalogError(ConfigurationError):
    """Project catalog violates the unique naming convention."""


class InvalidCoordinateError(ConfigurationError):
    """A 'group:artifact[:version]' notation could not be parsed."""


class RegistryFrozenError(JavaModuleDependenciesError):
    """A contribution arrived after the coordinate registry was built."""
