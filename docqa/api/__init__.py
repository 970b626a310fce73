"""FastAPI endpoints for document question answering.

Endpoints:
    - GET /health: Service health status
    - POST /documents: PDF upload and ingestion
    - GET /documents/{session_id}: Summary of the session's document
    - POST /ask: Questions about the session's document
"""

from docqa.api.app import app, create_app

__all__ = ["app", "create_app"]
