"""Unit tests for individual components in isolation.

Uses an in-memory renderer, httpx.MockTransport and fake completion
services in place of external collaborators.
"""
