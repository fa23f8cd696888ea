"""Shared fixtures: scripted generator, seeded RNG and an API client."""

import random

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.middleware.rate_limit import get_quota
from app.routes.resume import get_rng
from app.services.generator import GeneratorError, TextGenerator, get_generator


class ScriptedGenerator(TextGenerator):
    """Returns a fixed reply (or raises) and records the prompts it saw."""

    name = "scripted"

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def generator():
    return ScriptedGenerator()


@pytest.fixture
def failing_generator():
    return ScriptedGenerator(error=GeneratorError("timed out"))


@pytest.fixture
def client(generator):
    app.dependency_overrides[get_generator] = lambda: generator
    app.dependency_overrides[get_rng] = lambda: random.Random(7)
    app.dependency_overrides[get_quota] = lambda: None
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def strong_resume():
    # every section signal, 320 words, tiny vocabulary
    line = "experience education skills summary email python kubernetes docker"
    return " ".join([line] * 40)


@pytest.fixture
def matching_jd():
    return "Python Kubernetes Docker experience, education, skills, summary, email."
