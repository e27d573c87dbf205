# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-10
# Description: conftest.py
# -----------------------------------------------------------------------------

import csv
import io
import json
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import httpx
import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from embedding.EmbeddingClient import EmbeddingClient  # noqa: E402
from storage.FileProcessor import FileProcessor  # noqa: E402

TEST_API_BASE = "https://embeddings.test/v1"
TEST_API_KEY = "sk-test"


def default_vector(text: str) -> List[float]:
    """Deterministic 3-d vector derived from the text."""
    return [float(len(text)), float(text.count("a")), 1.0]


class FakeEmbeddingProvider:
    """
    Stands in for the /embeddings endpoint behind an httpx.MockTransport.

    Records every request it sees. ``fail_on_call`` makes the n-th call
    (1-based) answer with ``error_status`` and an OpenAI style error body.
    """

    def __init__(
        self,
        vectors: Optional[Dict[str, List[float]]] = None,
        *,
        fail_on_call: Optional[int] = None,
        error_status: int = 429,
    ):
        self.vectors = vectors or {}
        self.fail_on_call = fail_on_call
        self.error_status = error_status
        self.requests: List[httpx.Request] = []
        self.bodies: List[dict] = []

    def vector_for(self, text: str) -> List[float]:
        return self.vectors.get(text) or default_vector(text)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = json.loads(request.content)
        self.bodies.append(body)

        if self.fail_on_call is not None and len(self.requests) == self.fail_on_call:
            return httpx.Response(
                self.error_status,
                json={
                    "error": {
                        "message": "Rate limit reached for requests",
                        "type": "requests",
                        "param": None,
                        "code": "rate_limit_exceeded",
                    }
                },
            )

        inputs = body["input"] if isinstance(body["input"], list) else [body["input"]]
        return httpx.Response(
            200,
            json={
                "object": "list",
                "data": [
                    {"object": "embedding", "index": i, "embedding": self.vector_for(text)}
                    for i, text in enumerate(inputs)
                ],
                "model": body["model"],
                "usage": {"prompt_tokens": 1, "total_tokens": 1},
            },
        )


def make_client(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> EmbeddingClient:
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    kwargs.setdefault("api_base", TEST_API_BASE)
    return EmbeddingClient(TEST_API_KEY, http_client=http_client, **kwargs)


def input_csv(rows: Sequence[Sequence[str]], header: Sequence[str] = ("name", "header", "body")) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return buf.getvalue()


@pytest.fixture
def provider() -> FakeEmbeddingProvider:
    return FakeEmbeddingProvider()


@pytest.fixture
def client(provider: FakeEmbeddingProvider) -> EmbeddingClient:
    return make_client(provider)


@pytest.fixture
def file_processor(tmp_path: Path) -> FileProcessor:
    return FileProcessor(tmp_path)
