"""Test package for DocQA.

Structure:
    - unit/: Page filter, chunker, ranker, pipeline, renderer, completion
      client and QA service tests
    - integration/: HTTP endpoint tests through the real ingestion pipeline
    - helpers.py: Generated PDFs and fake collaborators

Leverages pytest with pytest-check for soft assertions.
"""
