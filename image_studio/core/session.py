"""Generation session lifecycle: idle -> loading -> success | error."""

import asyncio
import time
import uuid
from typing import Dict, Optional

from .orchestrator import Orchestrator
from .image_generator import DEFAULT_FAILURE_MESSAGE
from ..models.enums import ImageStyle, AspectRatio, GenerationState
from ..models.schemas import GenerationRequest, GenerationResult
from ..utils.logger import get_logger
from ..utils.errors import GenerationError

logger = get_logger(__name__)


class GenerationSession:
    """
    Owns the result of one user's generation requests.

    Only one request may be in flight: submissions while loading, and
    submissions with a blank prompt, are ignored. There is no cancellation
    and no timeout; a hung transport leaves the session loading.
    """

    def __init__(self, orchestrator: Orchestrator, session_id: Optional[str] = None):
        self.orchestrator = orchestrator
        self.session_id = session_id or uuid.uuid4().hex
        self.result = GenerationResult()
        self.last_activity = time.time()
        self._task: Optional[asyncio.Task] = None

    @property
    def state(self) -> GenerationState:
        return self.result.state

    def start(
        self,
        prompt: str,
        style: ImageStyle = ImageStyle.NONE,
        aspect_ratio: AspectRatio = AspectRatio.SQUARE,
    ) -> bool:
        """
        Accept a submission and schedule it on the running event loop.

        Returns:
            True if the submission was accepted, False if it was a no-op
        """
        if not prompt or not prompt.strip():
            logger.info("Ignoring blank prompt", extra={"session_id": self.session_id})
            return False

        if self.state == GenerationState.LOADING:
            logger.info(
                "Ignoring submission while a generation is in flight",
                extra={"session_id": self.session_id}
            )
            return False

        request = GenerationRequest(prompt=prompt, style=style, aspect_ratio=aspect_ratio)

        self.result = GenerationResult(
            state=GenerationState.LOADING,
            current_prompt=request.prompt,
        )
        self.last_activity = time.time()
        self._task = asyncio.get_running_loop().create_task(self._run(request))

        logger.info(
            "Generation started",
            extra={
                "session_id": self.session_id,
                "style": request.style.value,
                "aspect_ratio": request.aspect_ratio.value,
            }
        )
        return True

    async def submit(
        self,
        prompt: str,
        style: ImageStyle = ImageStyle.NONE,
        aspect_ratio: AspectRatio = AspectRatio.SQUARE,
    ) -> bool:
        """Start a generation and wait for it to finish."""
        accepted = self.start(prompt, style, aspect_ratio)
        if accepted:
            await self.wait()
        return accepted

    async def wait(self):
        """Wait for the in-flight generation, if any."""
        if self._task is not None:
            await asyncio.shield(self._task)

    async def _run(self, request: GenerationRequest):
        try:
            image = await self.orchestrator.generate_image(request)
        except GenerationError as e:
            self._finish(error=str(e) or DEFAULT_FAILURE_MESSAGE)
        except Exception as e:
            logger.error(
                f"Unexpected generation failure: {e}",
                extra={"session_id": self.session_id, "error": str(e)},
                exc_info=True
            )
            self._finish(error=str(e) or DEFAULT_FAILURE_MESSAGE)
        else:
            self.result = GenerationResult(
                state=GenerationState.SUCCESS,
                image=image,
                current_prompt=request.prompt,
            )
            self.last_activity = time.time()
            logger.info("Generation succeeded", extra={"session_id": self.session_id})

    def _finish(self, error: str):
        self.result = GenerationResult(
            state=GenerationState.ERROR,
            error=error,
            current_prompt=self.result.current_prompt,
        )
        self.last_activity = time.time()
        logger.info(
            "Generation failed",
            extra={"session_id": self.session_id, "error": error}
        )


class SessionStore:
    """In-memory registry of sessions with idle-TTL eviction."""

    def __init__(self, orchestrator: Orchestrator, ttl_seconds: int = 3600):
        self.orchestrator = orchestrator
        self.ttl_seconds = ttl_seconds
        self._sessions: Dict[str, GenerationSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> GenerationSession:
        self.cleanup_stale_sessions()
        session = GenerationSession(self.orchestrator)
        self._sessions[session.session_id] = session
        logger.info(
            "Session created",
            extra={"session_id": session.session_id, "active_sessions": len(self._sessions)}
        )
        return session

    def get(self, session_id: str) -> Optional[GenerationSession]:
        session = self._sessions.get(session_id)
        if session is not None:
            session.last_activity = time.time()
        return session

    def cleanup_stale_sessions(self) -> int:
        """
        Remove sessions idle for longer than the TTL.

        Loading sessions are never evicted.

        Returns:
            Number of sessions removed
        """
        now = time.time()
        stale = [
            session_id for session_id, session in self._sessions.items()
            if session.state != GenerationState.LOADING
            and now - session.last_activity > self.ttl_seconds
        ]

        for session_id in stale:
            del self._sessions[session_id]

        if stale:
            logger.info(
                f"Cleaned up {len(stale)} stale sessions",
                extra={"removed": len(stale), "remaining": len(self._sessions)}
            )

        return len(stale)
