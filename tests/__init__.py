"""Unit tests for deepl_bindings.

Tests use pytest with asyncio support and replace the aiohttp session via monkeypatch, so no
network access is needed.
"""
