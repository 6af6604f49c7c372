"""
Core infrastructure shared by the rest of the application.

Settings, logging setup, the in-memory user store and the HTTP
middleware that runs on every request.
"""
