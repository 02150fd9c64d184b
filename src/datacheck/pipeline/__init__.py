"""Pipeline integration."""

from datacheck.pipeline.stage import (
    DATASET_KEYS,
    OUTPUT_KEY,
    Stage,
    StageOutput,
    ValidationStage,
)

__all__ = [
    "DATASET_KEYS",
    "OUTPUT_KEY",
    "Stage",
    "StageOutput",
    "ValidationStage",
]
