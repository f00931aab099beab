"""
HTTP surface for the storefront.

Thin FastAPI handlers: validate input, call `data.service`, shape the response.
"""
