"""
DOMAIN LAYER

This layer contains:
- Entities: Animal, Chat, Message and the UserSummary projection
- Value Objects: UserId, AnimalId, ChatId, MessageId
- Ports: Repository interfaces that infrastructure implements
- Exceptions: Domain-specific errors
- Outcome: Success/Failure result for expected business rejections

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
