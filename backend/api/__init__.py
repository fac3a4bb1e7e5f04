"""
A-Safe API package.

HTTP surface of the backend. The application object lives in api.app.
"""
