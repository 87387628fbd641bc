"""FastAPI application entrypoint for docable service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Literal

from fastapi import Depends, FastAPI
from pydantic import BaseModel, Field

from ..config import POLICY_HALT
from ..models import InputFile, RunResult
from ..orchestrator import Docable
from ..output import document_to_dict


class SourcePayload(BaseModel):
    path: str
    content: str


class ExtractRequest(BaseModel):
    files: List[SourcePayload] = Field(default_factory=list)
    on_failure: Literal["halt", "continue"] = POLICY_HALT


class FailurePayload(BaseModel):
    path: str
    reason: str
    message: str


class ExtractResponse(BaseModel):
    document: Dict[str, Dict[str, Any]]
    failures: List[FailurePayload]
    halted: bool


class HealthResponse(BaseModel):
    status: str


def _default_extractor(on_failure: str) -> Docable:
    return Docable(on_failure=on_failure)


def create_app(
    extractor_factory: Callable[[str], Docable] = _default_extractor,
) -> FastAPI:
    """Create the FastAPI application exposing docable extraction."""

    app = FastAPI(title="Docable Service", version="1.0.0")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    def get_factory() -> Callable[[str], Docable]:
        return extractor_factory

    @app.post("/extract", response_model=ExtractResponse)
    async def extract(
        payload: ExtractRequest,
        factory: Callable[[str], Docable] = Depends(get_factory),
    ) -> ExtractResponse:
        # Contents arrive inline; the service never reads its own filesystem.
        extractor = factory(payload.on_failure)
        sources = [InputFile(path=item.path, content=item.content) for item in payload.files]

        def _run() -> RunResult:
            return extractor.run_sources(sources)

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, _run)

        return ExtractResponse(
            document=document_to_dict(result.document),
            failures=[
                FailurePayload(path=f.path, reason=f.reason, message=f.message)
                for f in result.failures
            ],
            halted=result.halted,
        )

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
