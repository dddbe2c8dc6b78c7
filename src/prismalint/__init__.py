"""prismalint: naming-convention linting for Prisma schemas."""

__version__ = "0.1.0"
