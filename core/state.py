from enum import Enum


class AnalysisStage(str, Enum):
    IDLE = "idle"
    SEGMENTING = "segmenting"
    EXTRACTING = "extracting"
    FAN_OUT_ANALYZING = "fan_out_analyzing"
    MERGING = "merging"
    DONE = "done"
    EMPTY_SHORT_CIRCUIT = "empty_short_circuit"
