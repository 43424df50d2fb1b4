"""Service wrapping the fractal jigsaw generator for the HTTP API."""

import logging
import random
from functools import lru_cache

from fractal_jigsaw import InvalidDimensions, InvalidPieceBounds, JigsawResult, generate_jigsaw
from fractal_jigsaw.rng import LCG_MODULUS

from app.config import Settings, get_settings
from app.models.jigsaw_model import GenerateJigsawRequest

logger = logging.getLogger(__name__)


class JigsawService:
    """Runs one independent generator instance per request."""

    def __init__(self, settings: Settings) -> None:
        """Initialize the service.

        Args:
            settings: Limits and geometry defaults.
        """
        self.settings = settings
        self._seed_source = random.SystemRandom()

    def draw_seed(self) -> int:
        """Draw a fresh seed covering the full state space of the generator."""
        return self._seed_source.randrange(LCG_MODULUS)

    def check_limits(self, request: GenerateJigsawRequest) -> None:
        """Enforce the configured ceilings before any generation work.

        Raises:
            InvalidDimensions: If a dimension exceeds MAX_GRID_DIMENSION.
            InvalidPieceBounds: If max_piece_length exceeds MAX_PIECE_LENGTH.
        """
        limit = self.settings.MAX_GRID_DIMENSION
        if request.ncols > limit or request.nrows > limit:
            raise InvalidDimensions(
                f"Grid {request.ncols}x{request.nrows} exceeds the maximum dimension of {limit}"
            )
        if request.max_piece_length > self.settings.MAX_PIECE_LENGTH:
            raise InvalidPieceBounds(
                f"max_piece_length {request.max_piece_length} exceeds the limit of {self.settings.MAX_PIECE_LENGTH}"
            )

    def generate(self, request: GenerateJigsawRequest) -> JigsawResult:
        """Generate a jigsaw for the request.

        Args:
            request: Validated generation parameters.

        Returns:
            The generation result with every exported document.

        Raises:
            InvalidDimensions: If the grid is outside the allowed range.
            InvalidPieceBounds: If the piece bounds are outside the allowed range.
        """
        self.check_limits(request)
        seed = request.seed if request.seed is not None else self.draw_seed()
        radius = request.radius if request.radius is not None else self.settings.DEFAULT_RADIUS
        frame = request.frame if request.frame is not None else self.settings.DEFAULT_FRAME

        result = generate_jigsaw(
            request.ncols,
            request.nrows,
            seed,
            request.min_piece_length,
            request.max_piece_length,
            radius=radius,
            frame=frame,
            shape=request.shape,
            laser_frame=self.settings.LASER_FRAME,
            fill_iterations=self.settings.FILL_ITERATIONS,
        )
        logger.info(
            "Generated jigsaw %dx%d seed=%d shape=%s pieces=%d",
            request.ncols,
            request.nrows,
            seed,
            request.shape,
            result.piece_count,
        )
        return result


@lru_cache()
def get_jigsaw_service() -> JigsawService:
    """Get cached jigsaw service instance."""
    return JigsawService(get_settings())
