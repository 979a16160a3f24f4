"""Core app package.

Cross-cutting pieces shared by every domain app: the API error taxonomy
and its exception handler, pagination, and operational management
commands such as seeding sample content.
"""
