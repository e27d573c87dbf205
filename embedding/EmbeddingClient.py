# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: EmbeddingClient
# -----------------------------------------------------------------------------
import logging
import time
from typing import Dict, Optional

import httpx
from pydantic import ValidationError

import settings
from config.Config import Config
from embedding.types import (
    EmbeddingInput,
    EmbeddingRequest,
    EmbeddingResponse,
    WrappedError,
)
from utility.errors import (
    EmbeddingApiError,
    EmbeddingRequestError,
    EmbeddingTransportError,
    ResponseDeserializeError,
)
from utility.logging_utils import get_class_logger


class EmbeddingClient:
    """
    Thin client for the OpenAI-style ``POST /embeddings`` endpoint.

    Holds the api key, base url and organization id explicitly; nothing is
    read from module state. One call to :meth:`submit` is one HTTP round
    trip: no retries, no backoff and no timeout are applied here, callers
    that need bounded latency must wrap the call themselves.
    """

    def __init__(
            self,
            api_key: str,
            *,
            api_base: str = settings.DEFAULT_API_BASE,
            org_id: str = "",
            model: str = settings.EMBEDDING_MODEL,
            http_client: Optional[httpx.Client] = None,
            logger: Optional[logging.Logger] = None,
    ):
        self.api_key = api_key
        self.api_base = api_base.rstrip("/")
        self.org_id = org_id or ""
        self.model = model
        self.logger = logger or get_class_logger(self.__class__)

        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.Client(timeout=None)

        self.logger.debug(
            "EmbeddingClient initialised (api_base=%s, model=%s, org=%s)",
            self.api_base,
            self.model,
            self.org_id or None,
        )

    @classmethod
    def from_config(cls, cfg: Config, **kwargs) -> "EmbeddingClient":
        return cls(
            cfg.openai_api_key,
            api_base=cfg.openai_base_url,
            org_id=cfg.openai_org,
            **kwargs,
        )

    def with_api_key(self, api_key: str) -> "EmbeddingClient":
        """Same endpoint and transport, different credentials."""
        return EmbeddingClient(
            api_key,
            api_base=self.api_base,
            org_id=self.org_id,
            model=self.model,
            http_client=self.http_client,
            logger=self.logger,
        )

    @property
    def embeddings_url(self) -> str:
        return f"{self.api_base}/embeddings"

    def headers(self) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self.api_key}"}
        if self.org_id:
            headers[settings.ORGANIZATION_HEADER] = self.org_id
        return headers

    def create_request(self, input: EmbeddingInput) -> EmbeddingRequest:
        if not self.api_key:
            raise EmbeddingRequestError("api key is not set")
        if not self.model:
            raise EmbeddingRequestError("embedding model is not set")
        if not isinstance(input, str) and len(input) == 0:
            raise EmbeddingRequestError("embedding input must not be empty")

        try:
            return EmbeddingRequest(model=self.model, input=input, user=None)
        except ValidationError as e:
            raise EmbeddingRequestError(f"Invalid embedding request: {e}") from e

    def submit(self, request: EmbeddingRequest) -> EmbeddingResponse:
        n_inputs = len(request.input_list())
        self.logger.debug("POST %s (%d inputs)", self.embeddings_url, n_inputs)

        start = time.time()
        try:
            response = self.http_client.post(
                self.embeddings_url,
                json=request.model_dump(),
                headers=self.headers(),
            )
        except httpx.RequestError as e:
            self.logger.error("Embedding request to %s failed: %s", self.embeddings_url, e)
            raise EmbeddingTransportError(f"Embedding request failed: {e}") from e

        elapsed_ms = (time.time() - start) * 1000.0
        status = response.status_code
        body = response.content

        if not response.is_success:
            try:
                wrapped = WrappedError.model_validate_json(body)
            except ValidationError as e:
                self.logger.error("Undecodable error payload (status=%d): %s", status, e)
                raise ResponseDeserializeError(
                    f"Could not deserialize error response (status {status}): {e}",
                    status_code=status,
                    body=response.text,
                ) from e

            err = wrapped.error
            self.logger.error(
                "Embedding API error (status=%d, type=%s, code=%s): %s",
                status, err.type, err.code, err.message,
            )
            raise EmbeddingApiError(
                status,
                err.message,
                error_type=err.type,
                param=err.param,
                code=str(err.code) if err.code is not None else None,
            )

        try:
            parsed = EmbeddingResponse.model_validate_json(body)
        except ValidationError as e:
            self.logger.error("Undecodable embedding response (status=%d): %s", status, e)
            raise ResponseDeserializeError(
                f"Could not deserialize embedding response: {e}",
                status_code=status,
                body=response.text,
            ) from e

        self.logger.debug(
            "Embedding response: %d vectors in %.1f ms", len(parsed.data), elapsed_ms
        )
        return parsed

    def get_embedding(self, input: EmbeddingInput) -> EmbeddingResponse:
        request = self.create_request(input)
        return self.submit(request)

    def close(self) -> None:
        if self._owns_http_client:
            self.http_client.close()

    def __enter__(self) -> "EmbeddingClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
