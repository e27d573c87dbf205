# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-13
# Description: test_semantic_search_service.py
# -----------------------------------------------------------------------------
import threading

import pytest

from conftest import FakeEmbeddingProvider, input_csv, make_client
from cost import CostEstimator
from search.SimilarityRanker import RankedSuggestion
from services.SemanticSearchService import SemanticSearchService
from storage.EmbeddingStore import EmbeddingStore
from utility.errors import (
    EmbeddingApiError,
    GenerationInProgressError,
    InvalidBatchCountError,
    StoreNotFoundError,
)

NOTES = [
    ["cats.md", "# Cats", "cats purr"],
    ["dogs.md", "# Dogs", "dogs bark"],
    ["fish.md", "# Fish", "fish swim"],
    ["birds.md", "# Birds", "birds sing"],
    ["trees.md", "# Trees", "trees grow"],
    ["rocks.md", "# Rocks", "rocks sit"],
]

VECTORS = {
    "cats purr": [1.0, 0.0, 0.0],
    "dogs bark": [0.8, 0.6, 0.0],
    "fish swim": [0.0, 1.0, 0.0],
    "birds sing": [0.0, 0.6, 0.8],
    "trees grow": [0.0, 0.0, 1.0],
    "rocks sit": [-1.0, 0.0, 0.0],
    "kittens": [0.9, 0.1, 0.0],
}


def _service(file_processor, provider, num_batches=3) -> SemanticSearchService:
    return SemanticSearchService(
        file_processor=file_processor,
        client=make_client(provider),
        num_batches=num_batches,
    )


@pytest.fixture
def notes_dir(file_processor):
    file_processor.write_to_path("input.csv", input_csv(NOTES))
    return file_processor


def test_generate_writes_every_record(notes_dir):
    provider = FakeEmbeddingProvider(VECTORS)
    svc = _service(notes_dir, provider)

    assert svc.embedding_file_exists() is False
    assert svc.generate_embeddings() == 6
    assert svc.embedding_file_exists() is True
    assert len(provider.requests) == 3

    stored = EmbeddingStore(notes_dir).load()
    assert [(r.name, r.header) for r in stored] == [(n, h) for n, h, _ in NOTES]
    assert stored[1].vector.tolist() == pytest.approx(VECTORS["dogs bark"])


def test_generate_replaces_previous_store(notes_dir):
    notes_dir.write_to_path("embedding.csv", "name,header,embedding\nstale.md,old,\"1.0,2.0\"\n")
    svc = _service(notes_dir, FakeEmbeddingProvider(VECTORS))

    svc.generate_embeddings()

    names = [r.name for r in EmbeddingStore(notes_dir).load()]
    assert "stale.md" not in names
    assert len(names) == 6


def test_failure_on_second_batch_keeps_only_first_batch(notes_dir):
    notes_dir.write_to_path("embedding.csv", "name,header,embedding\nstale.md,old,\"1.0,2.0\"\n")
    provider = FakeEmbeddingProvider(VECTORS, fail_on_call=2)
    svc = _service(notes_dir, provider, num_batches=3)

    with pytest.raises(EmbeddingApiError):
        svc.generate_embeddings()

    stored = EmbeddingStore(notes_dir).load()
    assert [r.name for r in stored] == ["cats.md", "dogs.md"]
    assert len(provider.requests) == 2


def test_empty_input_leaves_empty_store(file_processor):
    file_processor.write_to_path("input.csv", input_csv([]))
    file_processor.write_to_path("embedding.csv", "name,header,embedding\nstale.md,old,\"1.0\"\n")
    provider = FakeEmbeddingProvider()
    svc = _service(file_processor, provider)

    assert svc.generate_embeddings() == 0
    assert svc.embedding_file_exists() is True
    assert EmbeddingStore(file_processor).load() == []
    assert provider.requests == []


def test_missing_input_deletes_store_and_raises(file_processor):
    file_processor.write_to_path("embedding.csv", "name,header,embedding\n")
    svc = _service(file_processor, FakeEmbeddingProvider())

    with pytest.raises(StoreNotFoundError):
        svc.generate_embeddings()
    assert svc.embedding_file_exists() is False


def test_concurrent_generation_is_refused(notes_dir):
    entered = threading.Event()
    release = threading.Event()
    inner = FakeEmbeddingProvider(VECTORS)

    def slow_handler(request):
        entered.set()
        release.wait(timeout=5)
        return inner(request)

    svc = SemanticSearchService(file_processor=notes_dir, client=make_client(slow_handler), num_batches=1)
    worker = threading.Thread(target=svc.generate_embeddings)
    worker.start()
    try:
        assert entered.wait(timeout=5)
        assert svc.generation_in_progress
        with pytest.raises(GenerationInProgressError):
            svc.generate_embeddings()
    finally:
        release.set()
        worker.join(timeout=5)

    assert not svc.generation_in_progress


def test_query_is_refused_while_generation_is_running(notes_dir):
    second_batch = threading.Event()
    release = threading.Event()
    inner = FakeEmbeddingProvider(VECTORS)

    def blocks_on_second_batch(request):
        if len(inner.requests) == 1:
            second_batch.set()
            release.wait(timeout=5)
        return inner(request)

    svc = SemanticSearchService(
        file_processor=notes_dir,
        client=make_client(blocks_on_second_batch),
        num_batches=2,
    )
    worker = threading.Thread(target=svc.generate_embeddings)
    worker.start()
    try:
        assert second_batch.wait(timeout=5)
        # first batch is already on disk; a query now would see half the store
        assert [r.name for r in EmbeddingStore(notes_dir).load()] == ["cats.md", "dogs.md", "fish.md"]
        with pytest.raises(GenerationInProgressError):
            svc.get_suggestions(None, "kittens")
        assert len(inner.requests) == 1
    finally:
        release.set()
        worker.join(timeout=5)

    suggestions = svc.get_suggestions(None, "kittens", top_k=10)
    assert len(suggestions) == len(NOTES)


def test_zero_batches_rejected_at_construction(file_processor):
    with pytest.raises(InvalidBatchCountError):
        _service(file_processor, FakeEmbeddingProvider(), num_batches=0)


def test_get_suggestions_ranks_by_similarity(notes_dir):
    provider = FakeEmbeddingProvider(VECTORS)
    svc = _service(notes_dir, provider)
    svc.generate_embeddings()

    suggestions = svc.get_suggestions(None, "kittens", top_k=3)

    assert suggestions == [
        RankedSuggestion(name="cats.md", header="# Cats"),
        RankedSuggestion(name="dogs.md", header="# Dogs"),
        RankedSuggestion(name="fish.md", header="# Fish"),
    ]
    assert provider.bodies[-1]["input"] == ["kittens"]


def test_get_suggestions_default_top_k_returns_all_when_store_is_small(notes_dir):
    svc = _service(notes_dir, FakeEmbeddingProvider(VECTORS))
    svc.generate_embeddings()
    suggestions = svc.get_suggestions(None, "kittens")
    assert len(suggestions) == 6
    assert suggestions[-1].name == "rocks.md"


def test_get_suggestions_uses_per_call_api_key(notes_dir):
    provider = FakeEmbeddingProvider(VECTORS)
    svc = _service(notes_dir, provider)
    svc.generate_embeddings()

    svc.get_suggestions("sk-per-call", "kittens")
    assert provider.requests[-1].headers["authorization"] == "Bearer sk-per-call"


def test_get_suggestions_without_store_raises(file_processor):
    provider = FakeEmbeddingProvider(VECTORS)
    svc = _service(file_processor, provider)
    with pytest.raises(StoreNotFoundError):
        svc.get_suggestions(None, "kittens")
    assert provider.requests == []


def test_get_suggestions_rejects_blank_query(notes_dir):
    svc = _service(notes_dir, FakeEmbeddingProvider(VECTORS))
    with pytest.raises(ValueError):
        svc.get_suggestions(None, "   ")


def test_estimate_input_cost_reads_input_table(notes_dir, monkeypatch):
    captured = {}

    def fake_estimate(text):
        captured["text"] = text
        return 0.5

    monkeypatch.setattr(CostEstimator, "estimate_cost", fake_estimate)
    svc = _service(notes_dir, FakeEmbeddingProvider())

    assert svc.estimate_input_cost() == 0.5
    assert captured["text"] == "".join(body for _, _, body in NOTES)
