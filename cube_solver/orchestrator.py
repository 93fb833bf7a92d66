import asyncio
import logging
from concurrent.futures import Executor
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from . import validator
from .errors import SolveError, ValidationError
from .facelet import to_facelet_string
from .solver import validate_moves
from .state import CubeStore

logger = logging.getLogger(__name__)

ALREADY_SOLVED_MESSAGE = "The cube is already solved"


class SolveStatus(Enum):
    IDLE = 'idle'
    VALIDATING = 'validating'
    SERIALIZING = 'serializing'
    SOLVING = 'solving'
    SOLVED = 'solved'
    ALREADY_SOLVED = 'already_solved'
    FAILED = 'failed'


BUSY_STATUSES = frozenset({SolveStatus.VALIDATING, SolveStatus.SERIALIZING, SolveStatus.SOLVING})


@dataclass
class SolveResult:
    """Outcome of one solve request"""
    status: SolveStatus
    moves: List[str] = field(default_factory=list)
    move_string: str = ''
    message: str = ''

    @property
    def move_count(self) -> int:
        return len(self.moves)

    @property
    def ok(self) -> bool:
        return self.status is not SolveStatus.FAILED

    @classmethod
    def solved(cls, move_string: str) -> 'SolveResult':
        moves = move_string.split()
        return cls(SolveStatus.SOLVED, moves, move_string.strip(), f"Solution found in {len(moves)} moves")

    @classmethod
    def already_solved(cls) -> 'SolveResult':
        return cls(SolveStatus.ALREADY_SOLVED, message=ALREADY_SOLVED_MESSAGE)

    @classmethod
    def failed(cls, reason: str) -> 'SolveResult':
        return cls(SolveStatus.FAILED, message=reason)


class SolveOrchestrator:
    """Runs validation, serialization and the delegated solve for the store's cube.

    Only one request runs at a time; requests made while busy are ignored.
    The facelet string is snapshotted before the solver is called, and the
    result is dropped if the store changed before the solver returned.
    """

    def __init__(self, store: CubeStore, solver, executor: Optional[Executor] = None):
        self.store = store
        self.solver = solver
        self.executor = executor
        self.status = SolveStatus.IDLE
        self.result: Optional[SolveResult] = None

    @property
    def is_busy(self) -> bool:
        return self.status in BUSY_STATUSES

    def clear(self):
        """Discard the displayed result after an edit, scramble or reset"""
        self.result = None
        if not self.is_busy:
            self.status = SolveStatus.IDLE

    async def solve(self) -> Optional[SolveResult]:
        """Solve the current cube; returns None if ignored or superseded"""
        if self.is_busy:
            logger.info("Solve already in progress, ignoring request")
            return None
        request = self._prepare()
        if isinstance(request, SolveResult):
            return request

        facelets, generation = request
        self.status = SolveStatus.SOLVING
        loop = asyncio.get_running_loop()
        try:
            result = await loop.run_in_executor(self.executor, self._call_solver, facelets)
        except asyncio.CancelledError:
            logger.info("Solve cancelled")
            self.status = SolveStatus.IDLE
            raise
        except Exception as e:
            logger.error("Solve error: %s", e)
            return self._fail(str(e) or SolveError().args[0])
        return self._finish(result, generation)

    def solve_now(self) -> Optional[SolveResult]:
        """Blocking variant of solve for callers without an event loop"""
        if self.is_busy:
            logger.info("Solve already in progress, ignoring request")
            return None
        request = self._prepare()
        if isinstance(request, SolveResult):
            return request

        facelets, generation = request
        self.status = SolveStatus.SOLVING
        return self._finish(self._call_solver(facelets), generation)

    def _prepare(self):
        self.result = None
        self.status = SolveStatus.VALIDATING
        state = self.store.state
        try:
            validator.check(state)
        except ValidationError as e:
            return self._fail(str(e))

        self.status = SolveStatus.SERIALIZING
        facelets = to_facelet_string(state)
        logger.debug("Cube string: %s", facelets)
        return facelets, self.store.generation

    def _call_solver(self, facelets: str) -> SolveResult:
        try:
            if self.solver.is_solved(facelets):
                return SolveResult.already_solved()
            move_string = self.solver.solve(facelets) or ''
            if not move_string.strip():
                return SolveResult.already_solved()
            if not validate_moves(move_string.split()):
                raise SolveError(f"solver returned unrecognized moves: {move_string}")
            return SolveResult.solved(move_string)
        except Exception as e:
            logger.error("Solve error: %s", e)
            return SolveResult.failed(str(e) or SolveError().args[0])

    def _finish(self, result: SolveResult, generation: int) -> Optional[SolveResult]:
        if generation != self.store.generation:
            logger.info("Cube changed while solving, discarding stale result")
            self.status = SolveStatus.IDLE
            self.result = None
            return None
        self.status = result.status
        self.result = result
        return result

    def _fail(self, reason: str) -> SolveResult:
        result = SolveResult.failed(reason)
        self.status = SolveStatus.FAILED
        self.result = result
        return result
