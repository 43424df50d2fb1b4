"""Data models for jigsaw generation requests."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

ShapeName = Literal["circle", "square", "octagon"]


class GenerateJigsawRequest(BaseModel):
    """Request model for generating a jigsaw partition."""

    ncols: int = Field(default=20, ge=2, description="Number of tile columns")
    nrows: int = Field(default=15, ge=2, description="Number of tile rows")
    seed: Optional[int] = Field(
        default=None, ge=0, description="Seed for reproducible generation (random when omitted)"
    )
    min_piece_length: int = Field(default=1, ge=1, description="Minimum tile count of a grown piece")
    max_piece_length: int = Field(default=3, ge=1, description="Maximum target tile count of a piece")
    radius: Optional[float] = Field(default=None, gt=0, description="Tile corner radius in output units")
    frame: Optional[float] = Field(default=None, ge=0, description="Margin around the lattice")
    shape: ShapeName = Field(default="circle", description="Corner style of the piece outlines")

    @model_validator(mode="after")
    def check_piece_bounds(self) -> "GenerateJigsawRequest":
        """Reject a minimum piece length above the maximum."""
        if self.min_piece_length > self.max_piece_length:
            raise ValueError("min_piece_length must not exceed max_piece_length")
        return self


class GenerateJigsawResponse(BaseModel):
    """Response model for a generated jigsaw."""

    seed: int = Field(..., description="Seed used, pass it back to reproduce the jigsaw")
    ncols: int
    nrows: int
    shape: ShapeName
    piece_count: int = Field(..., description="Number of pieces in the partition")
    difficulty: str = Field(..., description="Difficulty tier derived from the piece count")
    width: float = Field(..., description="Document width in output units")
    height: float = Field(..., description="Document height in output units")
    design_svg: str = Field(..., description="Multi-path SVG document, one outline per piece")
    laser_svg: str = Field(..., description="Single de-duplicated path SVG for cutting")
    paths: List[str] = Field(..., description="Raw path data per piece")
