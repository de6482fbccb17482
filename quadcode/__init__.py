from .config import Limits
from .encoding import encode_grid, encode_region
from .errors import GridError
from .grid import PixelGrid

__all__ = ["GridError", "Limits", "PixelGrid", "encode_grid", "encode_region"]
