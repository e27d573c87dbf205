# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-15
# Description: test_embedding_integration.py
# -----------------------------------------------------------------------------
import os

import pytest

from config.Config import Config
from embedding.EmbeddingClient import EmbeddingClient
from search.SimilarityRanker import cosine_similarity


def _skip_if_missing_prereqs():
    if not os.getenv(Config.ENV_VARS["openai_api_key"]):
        pytest.skip("Missing env var for OpenAI: OPENAI_API_KEY")


@pytest.mark.integration
def test_real_provider_embeds_and_ranks():
    """
    Integration: embed two related texts and one unrelated text against the
    real provider and check the related pair scores higher.
    """
    _skip_if_missing_prereqs()

    cfg = Config.from_env()
    with EmbeddingClient.from_config(cfg) as client:
        response = client.get_embedding([
            "How do I water a cactus?",
            "Watering succulents and cacti",
            "Quarterly tax filing deadlines",
        ])

    assert len(response.data) == 3
    vectors = [d.embedding for d in response.data]
    assert len({len(v) for v in vectors}) == 1, "All vectors must share one dimension"

    related = cosine_similarity(vectors[0], vectors[1])
    unrelated = cosine_similarity(vectors[0], vectors[2])
    print(f"related={related:.4f} unrelated={unrelated:.4f} dim={len(vectors[0])}")
    assert related > unrelated
