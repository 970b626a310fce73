"""Integration tests for the HTTP API.

Uploads run through FastAPI, pypdf and the ingestion pipeline with
generated PDF documents. Only the completion service is replaced, so no
API key is required.
"""
