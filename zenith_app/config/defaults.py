"""Default configuration parameters for the wellness application."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SequenceParams:
    """Guided sequence timer parameters shared by every routine."""
    transition_duration: int = 0                     # Gap between consecutive items (s)
    min_item_duration: int = 1                       # Input floor for new items (s)
    default_item_duration: int = 60                  # Pre-filled duration for new items (s)
    tick_interval_seconds: float = 1.0               # Wall-clock length of one tick


@dataclass(frozen=True)
class BreathingParams:
    """Breathing exercise parameters."""
    session_minutes: int = 1
    min_session_minutes: int = 1
    max_session_minutes: int = 10
    breath_cycle_seconds: int = 8                    # 4s inhale, 4s exhale


@dataclass(frozen=True)
class WaterParams:
    """Water intake parameters."""
    daily_goal_ml: int = 2000
    cup_sizes_ml: tuple = (250, 500, 750)
    cap_multiplier: int = 2                          # Intake capped at goal * multiplier
    min_goal_ml: int = 500
    goal_step_ml: int = 250                          # Goal +/- button increment


@dataclass(frozen=True)
class SleepParams:
    """Sleep tracker parameters."""
    min_hours: float = 0.5
    max_hours: float = 24.0
    chart_days: int = 7


@dataclass(frozen=True)
class WeightParams:
    """Weight tracker parameters."""
    min_kg: float = 1.0
    max_kg: float = 500.0
    min_height_cm: float = 50.0
    max_height_cm: float = 300.0


@dataclass(frozen=True)
class JournalParams:
    """Mood journal parameters."""
    min_text_length: int = 10
    suggested_tag_count: int = 5


@dataclass(frozen=True)
class SuggestionParams:
    """External language model parameters."""
    endpoint: str = "https://generativelanguage.googleapis.com/"
    model: str = "gemini-2.0-flash"
    timeout_seconds: float = 30.0
    api_key_env: str = "GEMINI_API_KEY"
    api_key: str = ""                                # Empty means read api_key_env
    safety_threshold: str = "BLOCK_MEDIUM_AND_ABOVE"


@dataclass(frozen=True)
class StorageParams:
    """Key-value store parameters."""
    backend: str = "sqlite"                          # "sqlite" or "memory"
    db_path: str = "zenith.db"


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    stretch: SequenceParams
    fitness: SequenceParams
    breathing_sequence: SequenceParams
    breathing: BreathingParams
    water: WaterParams
    sleep: SleepParams
    weight: WeightParams
    journal: JournalParams
    suggestions: SuggestionParams
    storage: StorageParams
    logging: LoggingParams = field(default_factory=LoggingParams)


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        stretch=SequenceParams(transition_duration=3, min_item_duration=5,
                               default_item_duration=30),
        fitness=SequenceParams(transition_duration=0, min_item_duration=1,
                               default_item_duration=60),
        breathing_sequence=SequenceParams(transition_duration=0, min_item_duration=60,
                                          default_item_duration=60),
        breathing=BreathingParams(),
        water=WaterParams(),
        sleep=SleepParams(),
        weight=WeightParams(),
        journal=JournalParams(),
        suggestions=SuggestionParams(),
        storage=StorageParams(),
        logging=LoggingParams(),
    )
