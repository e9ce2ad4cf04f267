"""Shared pytest fixtures for the name generator test suite."""

import pytest

from name_generator import NameGenerator


class FakeBackend:
    """
    Stand-in for the Gemini backend.

    Queue replies with set_response(); a queued exception is raised instead
    of returned. Every prompt received is kept in ``prompts``.
    """

    def __init__(self):
        self._responses = []
        self.prompts = []

    def set_response(self, response) -> None:
        self._responses.append(response)

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._responses:
            raise RuntimeError("FakeBackend has no queued responses. Use set_response() first.")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def generator(backend):
    return NameGenerator(backend)
