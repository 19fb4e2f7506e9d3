"""Authentication: session login state, the login gate, password hashing.

Learn: login is server-side session based. The login route stores a
typed SessionUser under the "sessionUser" session key; the gate
(require_login) only reads that key and rejects with 401 when it is
missing. Nothing else in the app touches the raw session dict.
"""
