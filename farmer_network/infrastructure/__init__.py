"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Database implementations (Prisma repositories)
- storage/: File system operations (FileStorageService)
- external/: External service integrations (OpenWeather)
- security/: Password hashing and bearer tokens
"""
