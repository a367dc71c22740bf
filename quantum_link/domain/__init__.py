"""
DOMAIN LAYER

This layer contains:
- Entities: Identity, ConnectionRequest, Message
- Value Objects: IdentityId, RequestId, MessageId, RoomId
- Services: pure rules (quantum ID policy, room addressing)
- Ports: repository interfaces that infrastructure implements
- Exceptions: the externally visible failure taxonomy

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
