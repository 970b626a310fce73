"""DocQA - question answering over uploaded PDF documents.

Combines FastAPI for HTTP, pypdf for page extraction, httpx for the
completion service and Pydantic for data validation.

Components:
    - api: HTTP endpoints for upload and questions
    - ingestion: Page extraction, page filtering and chunking
    - retrieval: Keyword relevance ranking
    - completion: Gemini client with classified errors
    - assistant: Prompt construction and question answering
    - models: Index and request/response schemas
"""

__version__ = "0.1.0"
