"""
Passage API.

FastAPI application running the request and callback phases of configured
authentication strategies.
"""
