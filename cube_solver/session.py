import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Optional

from .colors import Color
from .errors import ScrambleError
from .facelet import to_facelet_string
from .orchestrator import SolveOrchestrator, SolveResult
from .scramble import ScrambleGenerator
from .solver import CubeSolver, SolverConfig
from .state import CubeState, CubeStore

logger = logging.getLogger(__name__)


class CubeSession:
    """Entry point for a user interface: edit, scramble, reset and solve one cube.

    Holds the palette color used for painting stickers, the last solve result
    and the error message to show. Any edit, scramble or reset clears both.
    """

    def __init__(self, solver=None, config: Optional[SolverConfig] = None, executor: Optional[Executor] = None):
        self.solver = solver if solver is not None else CubeSolver(config)
        self.executor = executor or ThreadPoolExecutor(max_workers=1)
        self.store = CubeStore()
        self.orchestrator = SolveOrchestrator(self.store, self.solver, self.executor)
        self.scrambler = ScrambleGenerator(self.solver, self.store)
        self.selected_color = Color.WHITE
        self.error: Optional[str] = None

    def start(self):
        self.solver.initialize()

    def close(self):
        self.executor.shutdown(wait=True)

    @property
    def state(self) -> CubeState:
        return self.store.state

    @property
    def result(self) -> Optional[SolveResult]:
        """The solution to display, if any"""
        result = self.orchestrator.result
        return result if result is not None and result.ok else None

    @property
    def is_busy(self) -> bool:
        return self.orchestrator.is_busy

    @property
    def is_solved(self) -> bool:
        return self.store.is_solved()

    def select_color(self, color):
        self.selected_color = Color(color)

    def paint(self, face, index: int):
        """Color one sticker with the selected palette color"""
        self.set_sticker(face, index, self.selected_color)

    def set_sticker(self, face, index: int, color):
        self.store.set_sticker(face, index, color)
        self._changed()

    def reset(self):
        logger.info("Resetting cube")
        self.store.reset()
        self._changed()

    def scramble(self) -> bool:
        try:
            self.scrambler.scramble()
        except ScrambleError as e:
            return self._scramble_failed(e)
        self._changed()
        return True

    async def scramble_async(self) -> bool:
        try:
            await self.scrambler.scramble_async(self.executor)
        except ScrambleError as e:
            return self._scramble_failed(e)
        self._changed()
        return True

    async def solve(self) -> Optional[SolveResult]:
        self.error = None
        return self._solved(await self.orchestrator.solve())

    def solve_now(self) -> Optional[SolveResult]:
        self.error = None
        return self._solved(self.orchestrator.solve_now())

    def _solved(self, result: Optional[SolveResult]) -> Optional[SolveResult]:
        if result is not None and not result.ok:
            self.error = result.message
        return result

    def _scramble_failed(self, error: ScrambleError) -> bool:
        self.orchestrator.clear()
        self.error = str(error)
        return False

    def _changed(self):
        self.orchestrator.clear()
        self.error = None
        logger.debug("Cube string: %s", to_facelet_string(self.store.state))
