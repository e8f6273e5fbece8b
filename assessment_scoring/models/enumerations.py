from enum import Enum


class ScoringMethod(str, Enum):
    WEIGHTED_SUM = "weighted_sum"            # rating value × weight
    FORCED_CHOICE = "forced_choice"          # one weighted unit per answer
    MULTISELECT_COUNT = "multiselect_count"  # one weighted unit per selected option


class Normalization(str, Enum):
    PERCENTAGE = "percentage"
    RAW = "raw"
    STANDARDIZED = "standardized"  # mean per bank question, one decimal


class AssessmentType(str, Enum):
    DOMINANT_INTELLIGENCE = "dominant-intelligence"  # Gardner multiple intelligences
    PERSONALITY_PATTERN = "personality-pattern"      # DISC
    VARK = "vark"                                    # learning modalities


class SkipReason(str, Enum):
    UNKNOWN_QUESTION = "unknown_question"
    UNCONFIGURED_CATEGORY = "unconfigured_category"
