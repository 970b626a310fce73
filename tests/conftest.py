"""Pytest fixtures and shared test configuration.

Fixtures:
    - ingestion_config: Production thresholds with the env-driven fields pinned
    - fake_completion: Completion service returning a canned answer
    - qa_service: QAService wired to the fake completion service
    - async_client: HTTPX client for API testing against a fresh app
    - sample_pdf: Seven-page PDF with two content pages
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from docqa.api.app import create_app
from docqa.assistant.config import AssistantConfig
from docqa.assistant.service import QAService, get_qa_service
from docqa.ingestion.config import ChunkerConfig, IngestionConfig
from docqa.ingestion.pipeline import IngestionPipeline, NullObserver
from tests.helpers import FakeCompletion, build_pdf, make_prose


@pytest.fixture
def ingestion_config() -> IngestionConfig:
    """Return default ingestion thresholds independent of the environment."""
    return IngestionConfig(
        max_content_pages=30,
        chunker=ChunkerConfig(chunk_size=1000, overlap=100),
    )


@pytest.fixture
def fake_completion() -> FakeCompletion:
    return FakeCompletion()


@pytest.fixture
def qa_service(ingestion_config: IngestionConfig, fake_completion: FakeCompletion) -> QAService:
    """QAService using pypdf and a fake completion service."""
    return QAService(
        config=AssistantConfig(context_chunks=5),
        pipeline=IngestionPipeline(config=ingestion_config, observer=NullObserver()),
        completion=fake_completion,
    )


@pytest.fixture
async def async_client(qa_service: QAService) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app = create_app()
    app.dependency_overrides[get_qa_service] = lambda: qa_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_pdf() -> bytes:
    """Five front-matter pages followed by two prose pages."""
    front = ["Title page", "Copyright 2024", "Contents", "Preface", "Acknowledgements"]
    body = [
        make_prose(700, keyword="lighthouse"),
        make_prose(650, keyword="glacier"),
    ]
    return build_pdf(front + body)
