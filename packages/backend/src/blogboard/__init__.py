"""Blogboard — a small blog board backend.

Users join, log in with a server-side session, and manage board posts
and replies. Protected routes are gated by the session login check.
"""

__version__ = "0.1.0"
