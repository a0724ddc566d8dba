"""
Schemas module - stored document shapes and API request/response schemas.
"""
