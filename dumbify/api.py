import logging
import dumbify.config as config
import dumbify.database as database

from functools import lru_cache
from typing import Optional
from fastapi import Cookie, Depends, FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from dumbify.constants import TONE_EMOJIS
from dumbify.dispatcher import LLMConfig, PromptDispatcher
from dumbify.errors import DumbifyError, PersistenceError, UpstreamError, ValidationError
from dumbify.formatting import render_explanation
from dumbify.history import HistoryStore, select_history_store
from dumbify.models import (
    CodeRequest,
    ExplainResponse,
    HistoryEntryModel,
    RenderRequest,
    RenderResponse,
    ShareCardsRequest,
    ShareCardsResponse,
    SocialContentResponse,
    Tone,
)
from dumbify.parsing import parse_social_content
from dumbify.share import TEMPLATES, build_fallback_content, build_share_cards, get_template

@lru_cache
def get_settings():
    return config.Settings()

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL)

# Initialize DB
database.init_db(settings.HISTORY_DB)

# Session cookie carrying the caller's user id
COOKIE_NAME = "dumbify_session"

# Initialize Limiter
limiter = Limiter(key_func=get_remote_address)

app = FastAPI(
    title="Dumbify API",
    description="Explains code snippets in a chosen tone and turns the result into shareable cards.",
    version="1.0.0",
)

# Register Limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DumbifyError)
async def dumbify_error_handler(request: Request, exc: DumbifyError):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Invalid request"})


def get_dispatcher() -> PromptDispatcher:
    return PromptDispatcher(LLMConfig.from_settings(settings))


def get_user_id(session: Optional[str] = Cookie(None, alias=COOKIE_NAME)) -> Optional[str]:
    """Extract user ID from session cookie."""
    return session


def require_user_id(user_id: Optional[str] = Depends(get_user_id)) -> str:
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user_id


def get_history_store(user_id: str = Depends(require_user_id)) -> HistoryStore:
    return select_history_store(user_id)


# ============ Explain Endpoints ============

@app.post("/explain", tags=["Explain"], response_model=ExplainResponse)
@limiter.limit(settings.RATE_LIMIT)
async def explain(
    request: Request,
    request_data: CodeRequest,
    dispatcher: PromptDispatcher = Depends(get_dispatcher),
    user_id: Optional[str] = Depends(get_user_id),
):
    explanation = await run_in_threadpool(dispatcher.explain, request_data.code, request_data.tone)

    # A failed save is logged; the explanation is still returned.
    store = select_history_store(user_id)
    if store is not None:
        try:
            store.add(request_data.code.strip(), request_data.tone, explanation)
        except PersistenceError as e:
            logging.error(f"Failed to save explanation for {user_id}: {e}")

    return {"explanation": explanation}


@app.post("/social-content", tags=["Share"], response_model=SocialContentResponse)
@limiter.limit(settings.RATE_LIMIT)
async def social_content(
    request: Request,
    request_data: CodeRequest,
    dispatcher: PromptDispatcher = Depends(get_dispatcher),
):
    content = await run_in_threadpool(dispatcher.social_content, request_data.code, request_data.tone)
    return {"socialMediaContent": content}


@app.post("/share-cards", tags=["Share"], response_model=ShareCardsResponse)
@limiter.limit(settings.RATE_LIMIT)
async def share_cards(
    request: Request,
    request_data: ShareCardsRequest,
    dispatcher: PromptDispatcher = Depends(get_dispatcher),
):
    template = get_template(request_data.template)

    try:
        content = await run_in_threadpool(dispatcher.social_content, request_data.code, request_data.tone)
    except UpstreamError as e:
        if not (request_data.explanation and request_data.explanation.strip()):
            raise
        logging.warning(f"Social content generation failed, using the explanation instead: {e}")
        overview, breakdowns = build_fallback_content(request_data.explanation, Tone.from_value(request_data.tone))
        source = "explanation"
    else:
        social = parse_social_content(content, request_data.tone)
        overview, breakdowns = social.overview, social.breakdowns
        source = "social"

    cards = build_share_cards(request_data.code.strip(), overview, breakdowns, template.id)
    return {"overview": overview, "cards": [card.to_dict() for card in cards], "source": source}


@app.post("/render", tags=["Explain"], response_model=RenderResponse)
async def render(request_data: RenderRequest):
    if not request_data.explanation or not request_data.explanation.strip():
        raise ValidationError("Explanation is required")
    return render_explanation(request_data.explanation).to_dict()


@app.get("/tones", tags=["Explain"])
async def list_tones():
    return {"tones": [{"id": tone.value, "emoji": TONE_EMOJIS[tone.value]} for tone in Tone]}


@app.get("/templates", tags=["Share"])
async def list_templates():
    return {"templates": [template.to_dict() for template in TEMPLATES.values()]}


# ============ History Endpoints ============

@app.get("/history", tags=["History"])
async def get_history(
    store: HistoryStore = Depends(get_history_store),
    limit: int = Query(default=settings.HISTORY_LIMIT, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
):
    """List the caller's saved explanations, newest first."""
    entries = store.list(limit=limit, offset=offset)
    return {"history": [entry.to_dict() for entry in entries]}


@app.get("/history/latest", tags=["History"], response_model=Optional[HistoryEntryModel])
async def get_latest_history(store: HistoryStore = Depends(get_history_store)):
    entry = store.get_latest()
    return entry.to_dict() if entry else None


@app.delete("/history/{entry_id}", tags=["History"])
async def delete_history_entry(entry_id: str, store: HistoryStore = Depends(get_history_store)):
    return {"deleted": store.delete(entry_id)}
