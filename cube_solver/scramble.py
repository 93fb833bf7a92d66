import asyncio
import logging
from concurrent.futures import Executor
from typing import Optional

from .errors import ScrambleError
from .facelet import from_facelet_string
from .state import CubeState, CubeStore

logger = logging.getLogger(__name__)


class ScrambleGenerator:
    """Replaces the store's cube with a random scramble from the solving collaborator.

    The new state is fully built before it is committed, so a failing
    randomizer leaves the store untouched.
    """

    def __init__(self, solver, store: CubeStore):
        self.solver = solver
        self.store = store

    def generate(self) -> CubeState:
        try:
            facelets = self.solver.randomize()
            return from_facelet_string(facelets)
        except Exception as e:
            logger.error("Scramble error: %s", e)
            raise ScrambleError() from e

    def scramble(self) -> CubeState:
        state = self.generate()
        self.store.replace_all(state)
        return state

    async def scramble_async(self, executor: Optional[Executor] = None) -> CubeState:
        """Run the randomizer off the event loop and commit on completion"""
        loop = asyncio.get_running_loop()
        state = await loop.run_in_executor(executor, self.generate)
        self.store.replace_all(state)
        return state
