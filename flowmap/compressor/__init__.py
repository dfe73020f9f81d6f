"""Session Compressor

時刻順に並べた観測から、同じ場所での連続滞在を1つのセッションにまとめる。
"""

from .domain.observation import Observation
from .usecase.compress_movement import compress_movement, compress_observations

__all__ = [
    "Observation",
    "compress_movement",
    "compress_observations",
]
