"""Infrastructure layer.

Settings, database engine/session management, and logging setup.
"""
