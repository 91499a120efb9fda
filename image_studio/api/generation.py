"""Generation endpoints: catalog, sessions, and one-shot generation."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..core.orchestrator import Orchestrator
from ..core.session import GenerationSession, SessionStore
from ..models.catalog import CatalogOption, STYLE_OPTIONS, ASPECT_RATIO_OPTIONS
from ..models.enums import ImageStyle, AspectRatio, GenerationState
from ..models.schemas import GenerationResult, ImageHandle
from ..utils.errors import GenerationError
from ..utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


# ============================================================================
# REQUEST / RESPONSE MODELS
# ============================================================================

class SubmitRequest(BaseModel):
    """Body of a submission; a blank prompt is accepted and ignored."""
    prompt: str = ""
    style: ImageStyle = ImageStyle.NONE
    aspect_ratio: AspectRatio = AspectRatio.SQUARE


class GenerateRequest(BaseModel):
    prompt: str
    style: ImageStyle = ImageStyle.NONE
    aspect_ratio: AspectRatio = AspectRatio.SQUARE


class ImageView(BaseModel):
    data_uri: str
    mime_type: str
    width: int
    height: int
    prompt_used: str


class SessionView(BaseModel):
    session_id: str
    state: GenerationState
    loading: bool
    error: Optional[str] = None
    current_prompt: Optional[str] = None
    image: Optional[ImageView] = None


class SubmitResponse(BaseModel):
    accepted: bool
    session: SessionView


class CatalogResponse(BaseModel):
    styles: List[CatalogOption]
    aspect_ratios: List[CatalogOption]


# ============================================================================
# HELPERS
# ============================================================================

def image_view(image: ImageHandle) -> ImageView:
    return ImageView(
        data_uri=image.data_uri,
        mime_type=image.mime_type,
        width=image.width,
        height=image.height,
        prompt_used=image.prompt_used,
    )


def session_view(session: GenerationSession) -> SessionView:
    result: GenerationResult = session.result
    return SessionView(
        session_id=session.session_id,
        state=result.state,
        loading=result.loading,
        error=result.error,
        current_prompt=result.current_prompt,
        image=image_view(result.image) if result.image else None,
    )


def get_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_session(request: Request, session_id: str) -> GenerationSession:
    session = get_store(request).get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    return session


# ============================================================================
# ROUTES
# ============================================================================

@router.get("/catalog", response_model=CatalogResponse)
async def catalog():
    """Supported styles and aspect ratios with display labels."""
    return CatalogResponse(
        styles=list(STYLE_OPTIONS),
        aspect_ratios=list(ASPECT_RATIO_OPTIONS),
    )


@router.post("/sessions", response_model=SessionView, status_code=201)
async def create_session(request: Request):
    session = get_store(request).create()
    return session_view(session)


@router.get("/sessions/{session_id}", response_model=SessionView)
async def read_session(session_id: str, request: Request):
    return session_view(get_session(request, session_id))


@router.post("/sessions/{session_id}/submit", response_model=SubmitResponse, status_code=202)
async def submit(session_id: str, body: SubmitRequest, request: Request):
    """
    Start a generation for the session.

    Returns immediately; poll GET /sessions/{id} for the outcome. Blank
    prompts and submissions while loading are ignored (accepted=false).
    """
    session = get_session(request, session_id)
    accepted = session.start(body.prompt, body.style, body.aspect_ratio)
    return SubmitResponse(accepted=accepted, session=session_view(session))


@router.get("/sessions/{session_id}/image")
async def session_image(session_id: str, request: Request):
    """Raw bytes of the session's current image."""
    session = get_session(request, session_id)
    image = session.result.image
    if session.state != GenerationState.SUCCESS or image is None:
        raise HTTPException(status_code=404, detail="No image available")
    return Response(content=image.image_bytes, media_type=image.mime_type)


@router.post("/generate", response_model=ImageView)
async def generate(body: GenerateRequest, request: Request):
    """One-shot generation without a session."""
    if not body.prompt.strip():
        raise HTTPException(status_code=422, detail="Prompt must not be empty")

    orchestrator: Orchestrator = request.app.state.orchestrator

    try:
        image = await orchestrator.generate(body.prompt, body.style, body.aspect_ratio)
    except GenerationError as e:
        return JSONResponse(status_code=502, content={"error": str(e)})

    return image_view(image)
