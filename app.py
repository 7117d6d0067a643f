from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from core.config import Settings, get_settings
from core.metrics import MetricsLogger, Timer, TurnMetrics
from core.selector import RequestMalformed, generate_response
from core.suggestions import suggestions_payload

GENERIC_ERROR = "Failed to generate response"
ERROR_STATUS = 500
UI_PATH = Path(__file__).parent / "web" / "index.html"

logger = logging.getLogger("dbt_assistant")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="[%(asctime)s] %(levelname)s - %(message)s",
    )

    app = FastAPI(title="DBT Proposal Research Assistant", version="1.0.0")
    metrics = MetricsLogger(settings.metrics_path)
    app.state.metrics = metrics

    # CORS: allow local frontend during development
    if settings.is_dev:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/")
    def home():
        return {"status": "ok", "endpoint": "/api/chat"}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/ui", response_class=HTMLResponse)
    def ui():
        return UI_PATH.read_text(encoding="utf-8")

    @app.get("/api/suggestions")
    def suggestions():
        return {"suggestions": suggestions_payload()}

    @app.post("/api/chat")
    async def chat(request: Request):
        message_count = 0
        prompt_chars = 0
        with Timer() as t:
            try:
                body: Any = await request.json()
                if not isinstance(body, dict):
                    raise RequestMalformed("body must be a JSON object")
                raw = body.get("messages")
                if isinstance(raw, list):
                    message_count = len(raw)
                    if raw and isinstance(raw[-1], dict):
                        prompt_chars = len(str(raw[-1].get("content") or ""))
                template, response = generate_response(raw)
            except (RequestMalformed, ValueError) as e:
                # ValueError covers undecodable JSON bodies
                logger.warning("Malformed chat request: %s", e)
                return _error(metrics, t, message_count, prompt_chars, f"malformed: {type(e).__name__}")
            except Exception as e:
                logger.exception("Chat processing failed: %s", e)
                return _error(metrics, t, message_count, prompt_chars, f"internal: {type(e).__name__}")

        logger.info("Chat reply: messages=%s template=%s", message_count, template)
        metrics.log(
            TurnMetrics(
                ts=time.time(),
                template=template,
                message_count=message_count,
                prompt_chars=prompt_chars,
                latency_ms=t.ms,
            )
        )
        return {"response": response}

    return app


def _error(metrics: MetricsLogger, t: Timer, message_count: int, prompt_chars: int, reason: str) -> JSONResponse:
    metrics.log(
        TurnMetrics(
            ts=time.time(),
            template="",
            message_count=message_count,
            prompt_chars=prompt_chars,
            latency_ms=t.ms,
            error=True,
            error_reason=reason,
        )
    )
    body: Dict[str, str] = {"error": GENERIC_ERROR}
    return JSONResponse(body, status_code=ERROR_STATUS)


app = create_app()
