"""
HTTP adapter: FastAPI application, routers, request/response schemas and the
mapping from domain errors to status codes.
"""
