"""
JobPortal
A job board backend with an AI career assistant.

Architecture:
- Document store: JSON collections (jobs, users, applications, companies)
  over a key/value storage shim
- FastAPI routes for search, candidate and recruiter dashboards
- OpenAI-compatible AI client for descriptions, resume tips and chat
"""

__version__ = "1.0.0"
