import logging
import threading
from dataclasses import dataclass
from typing import Optional

from dumbify.dispatcher import PromptDispatcher
from dumbify.errors import PersistenceError
from dumbify.formatting import RenderedExplanation, render_explanation
from dumbify.history import HistoryEntry, HistoryStore
from dumbify.models import Tone


@dataclass(frozen=True)
class ExplainResult:
    request_id: int
    code: str
    tone: Tone
    explanation: str
    rendered: RenderedExplanation
    entry: Optional[HistoryEntry] = None


class ExplainSession:
    """
    Client-side controller for the explain action.

    Each call takes the next number in a request sequence. If a newer call
    has started by the time a response arrives, that response is discarded:
    the session state and history are left untouched and ``None`` is
    returned. History is written without holding the lock, so a response
    that goes stale during its own write stays in history but never becomes
    ``current``. Errors from the dispatcher propagate unchanged.
    """

    def __init__(self, dispatcher: PromptDispatcher, history: HistoryStore):
        self.dispatcher = dispatcher
        self.history = history
        self.current: Optional[ExplainResult] = None
        self._sequence = 0
        self._lock = threading.Lock()

    def _next_request_id(self) -> int:
        with self._lock:
            self._sequence += 1
            return self._sequence

    def is_latest(self, request_id: int) -> bool:
        with self._lock:
            return request_id == self._sequence

    def explain(self, code: str, tone) -> Optional[ExplainResult]:
        request_id = self._next_request_id()
        code = (code or "").strip()

        explanation = self.dispatcher.explain(code, tone)

        if not self.is_latest(request_id):
            self._discard(request_id)
            return None

        # History I/O happens outside the lock.
        tone = Tone.from_value(tone)
        try:
            entry = self.history.add(code, tone.value, explanation)
        except PersistenceError as e:
            logging.error(f"Failed to save explanation to history: {e}")
            entry = None

        result = ExplainResult(
            request_id=request_id,
            code=code,
            tone=tone,
            explanation=explanation,
            rendered=render_explanation(explanation),
            entry=entry,
        )

        with self._lock:
            if request_id == self._sequence:
                self.current = result
                return result
        self._discard(request_id)
        return None

    def _discard(self, request_id: int) -> None:
        logging.warning(f"Discarding stale explanation for request {request_id} (latest is {self._sequence})")
