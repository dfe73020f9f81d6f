"""複数エンティティのバッチ処理と入出力"""

from .domain.pipeline_result import EntityResult, PipelineResult
from .usecase.run_pipeline import run_pipeline
from .run import run_flowmap

__all__ = [
    "EntityResult",
    "PipelineResult",
    "run_pipeline",
    "run_flowmap",
]
