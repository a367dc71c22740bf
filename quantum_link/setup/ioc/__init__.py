"""
Dependency injection wiring.

`handlers` holds the storage-agnostic providers; `container` adds the
Prisma (and optional Redis) storage and builds the production container.
"""
