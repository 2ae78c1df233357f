# ============================================================
# Vault Scribe FastAPI App
# ------------------------------------------------------------
# HTTP surface over the generate layer:
#   - POST /summarize, POST /flashcards  -> generated text
#   - health checks
# Completion failures answer 502, bad configuration 400.
# ============================================================

from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from scribe import __version__
from scribe.generate import ConfigurationError, NoteGenerator, NoteTask
from scribe.settings import settings

app = FastAPI(title="Vault Scribe API", version=__version__)


@lru_cache(maxsize=1)
def get_generator() -> NoteGenerator:
    return NoteGenerator.from_settings(settings)


# ------------------------------------------------------------
# Pydantic models
# ------------------------------------------------------------
class GenerateRequest(BaseModel):
    content: str
    prompt_template: Optional[str] = None
    model: Optional[str] = None
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    frequency_penalty: Optional[float] = None


class GeneratePayload(BaseModel):
    text: str
    task: str
    model: str


def _run(task: NoteTask, req: GenerateRequest, generator: NoteGenerator) -> GeneratePayload:
    try:
        config = generator.generation_config(
            task,
            prompt_template=req.prompt_template,
            model=req.model,
            max_tokens=req.max_tokens,
            temperature=req.temperature,
            frequency_penalty=req.frequency_penalty,
        )
        result = generator.generate(req.content, task, config)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.describe())
    return GeneratePayload(text=result.text, task=task.value, model=config.model)


@app.post("/summarize", response_model=GeneratePayload)
def summarize(req: GenerateRequest, generator: NoteGenerator = Depends(get_generator)):
    return _run(NoteTask.SUMMARY, req, generator)


@app.post("/flashcards", response_model=GeneratePayload)
def flashcards(req: GenerateRequest, generator: NoteGenerator = Depends(get_generator)):
    return _run(NoteTask.FLASHCARDS, req, generator)


# ------------------------------------------------------------
# Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
    }


@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}


@app.get("/")
def hello():
    return {"message": "Vault Scribe service running."}
