"""FastAPI application entrypoint for uipreview service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import PreviewConfig
from ..models import BuildArtifact, ValidationResult
from ..prompting import RepairPromptBuilder
from ..transform import SourceTransformer
from ..validators import validate_source


class SourceRequest(BaseModel):
    code: str


class BindingModel(BaseModel):
    source_module: str
    imported_name: Optional[str] = None
    local_name: str
    is_default_or_namespace: bool = False
    is_type_only: bool = False


class TransformResponse(BaseModel):
    ok: bool
    document: str
    error: Optional[str] = None
    has_entry: bool = False
    bindings: List[BindingModel] = []


class ValidateResponse(BaseModel):
    valid: bool
    messages: List[str]


class RepairRequest(BaseModel):
    code: str
    messages: Optional[List[str]] = None


class MessageModel(BaseModel):
    role: str
    content: str


class RepairResponse(BaseModel):
    messages: List[MessageModel]


class HealthResponse(BaseModel):
    status: str


def _default_config() -> PreviewConfig:
    return PreviewConfig()


def create_app(
    config_factory: Callable[[], PreviewConfig] = _default_config,
) -> FastAPI:
    """Create the FastAPI application exposing transform and validation."""

    app = FastAPI(title="UI Preview Service", version="0.1.0")

    async def get_config() -> PreviewConfig:
        return config_factory()

    async def run_blocking(func: Callable[[], Any]) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func)

    def _validate(code: str, config: PreviewConfig) -> ValidationResult:
        return validate_source(code, config.validation.enabled)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/transform", response_model=TransformResponse)
    async def transform_source(
        payload: SourceRequest,
        config: PreviewConfig = Depends(get_config),
    ) -> TransformResponse:
        def _run_transform() -> BuildArtifact:
            return SourceTransformer(config).transform(payload.code)

        artifact: BuildArtifact = await run_blocking(_run_transform)
        return TransformResponse(
            ok=artifact.ok,
            document=artifact.document,
            error=artifact.error,
            has_entry=artifact.has_entry,
            bindings=[BindingModel(**binding.to_dict()) for binding in artifact.bindings],
        )

    @app.post("/validate", response_model=ValidateResponse)
    async def validate_code(
        payload: SourceRequest,
        config: PreviewConfig = Depends(get_config),
    ) -> ValidateResponse:
        result: ValidationResult = await run_blocking(lambda: _validate(payload.code, config))
        return ValidateResponse(valid=result.valid, messages=list(result.messages))

    @app.post("/repair-prompt", response_model=RepairResponse)
    async def repair_prompt(
        payload: RepairRequest,
        config: PreviewConfig = Depends(get_config),
    ) -> RepairResponse:
        messages = payload.messages
        if messages is None:
            messages = list(_validate(payload.code, config).messages)
        builder = RepairPromptBuilder(modules=list(config.transform.tracked_modules))
        request = builder.build(payload.code, messages)
        return RepairResponse(
            messages=[MessageModel(role=m.role, content=m.content) for m in request.messages]
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(
        _: Any, exc: ValueError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(
        _: Any, exc: RuntimeError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000, config: PreviewConfig | None = None
) -> None:  # pragma: no cover - integration path
    import uvicorn

    resolved = config or PreviewConfig()
    app = create_app(lambda: resolved)
    uvicorn.run(app, host=host, port=port)
