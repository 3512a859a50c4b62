"""Exceptions raised while building and drawing from seeders."""


class SeedingError(Exception):
    pass


class ConfigurationError(SeedingError, ValueError):
    """Invalid construction parameters for a seeder."""


class DataError(SeedingError, ValueError):
    """Input volume unusable for seeding (bad weights, empty mask)."""


class InternalInconsistencyError(SeedingError, RuntimeError):
    """A rejection loop exceeded its hard trial cap."""
