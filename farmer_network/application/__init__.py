"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS)
- queries/   → Read operations (CQRS)
- services/  → Orchestration shared by several handlers (avatar resolution)
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only (plus injected infrastructure services)
- No HTTP/framework code here
- Coordinates entities, repositories, external services
"""
