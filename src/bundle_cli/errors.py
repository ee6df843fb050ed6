"""Exceptions raised while running a build cycle."""


class BuildError(Exception):
    """Base class for errors that abort a build cycle."""


class ConfigurationError(BuildError):
    """Missing or unparseable build configuration."""


class TypeCheckError(BuildError):
    """The type checker reported diagnostics."""


class UnknownImportError(BuildError):
    """An externalized import has no usable global name."""

    def __init__(self, path: str):
        super().__init__(f"Unknown import: {path}")
        self.path = path


class BundleError(BuildError):
    """The bundler process exited with an error."""
