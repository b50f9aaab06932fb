"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- conversations/ → list_conversations
- messages/      → list_messages
- users/         → list_users, get_user
- posts/         → list_posts, list_comments
- resources/     → list_resources
- weather/       → get_hourly_forecast
"""
