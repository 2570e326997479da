"""FastAPI entrypoint wiring session tokens and the chat command dispatcher."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from moviemood.core.auth import get_current_session
from moviemood.core.config import get_settings
from moviemood.core.logging_config import configure_logging
from moviemood.core.sessions import Session, SessionRegistry, get_session_registry
from moviemood.services.dispatcher import CommandDispatcher, OutcomeKind

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Welcome to MovieMood.\n"
    "Here are the comands you can use: "
    "{Movie [MOVIE_NAME], Actor/Actress [ACTOR_NAME/ACTRESS_NAME], Suggest}"
)
ROUTES_LISTING = (
    "Available Routes:\n\n"
    "  GET  /welcome -> welcome\n"
    "  POST /chat    -> chat\n"
    "  GET  /        -> list_routes   (current)\n"
)


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Configure logging before serving."""

    configure_logging()
    yield


app = FastAPI(title="MovieMood", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ChatRequest(BaseModel):
    message: str = Field(default="", description="Command such as 'Movie Inception'")


class ChatResponse(BaseModel):
    message: str


class WelcomeResponse(BaseModel):
    message: str
    uuid: str


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_error(_: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(f"{exc.detail}\n", status_code=exc.status_code, headers=exc.headers)


def get_dispatcher() -> CommandDispatcher:
    return CommandDispatcher()


async def read_chat_message(request: Request) -> str:
    """Decode the chat body leniently; an unreadable body counts as an empty message."""

    raw = await request.body()
    try:
        return ChatRequest.model_validate_json(raw).message
    except ValidationError:
        logger.debug("Undecodable chat body treated as empty message")
        return ""


@app.get("/", response_class=PlainTextResponse)
def list_routes() -> str:
    return ROUTES_LISTING


@app.get("/welcome", response_model=WelcomeResponse)
def welcome(registry: SessionRegistry = Depends(get_session_registry)) -> WelcomeResponse:
    """Mint a session token the client must send back on /chat."""

    session = registry.issue()
    return WelcomeResponse(message=WELCOME_MESSAGE, uuid=session.token)


@app.post("/chat", response_model=ChatResponse)
def chat(
    message: str = Depends(read_chat_message),
    _: Session = Depends(get_current_session),
    dispatcher: CommandDispatcher = Depends(get_dispatcher),
) -> ChatResponse:
    """Answer a chat command; body shape is ``{"message": "Movie Inception"}``."""

    outcome = dispatcher.resolve(message)
    if outcome.kind is OutcomeKind.VALIDATION_ERROR:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=outcome.message)
    if outcome.kind is OutcomeKind.UPSTREAM_ERROR:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=outcome.message,
        )
    return ChatResponse(message=outcome.message)
