"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Database implementations (Prisma repositories)
- cache/: Redis caching implementations (CachedMessageRepository)

Submodules are imported directly; the Prisma client only exists after
`prisma generate`.
"""
