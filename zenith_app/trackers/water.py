"""Daily water intake counter."""

from typing import Optional

import structlog

from ..config.defaults import WaterParams
from ..errors import OutOfRangeError
from ..persistence import KeyValueStore

logger = structlog.get_logger(__name__)

WATER_INTAKE_KEY = "water_intake"
WATER_GOAL_KEY = "water_goal"

CUP_LABELS = {
    250: "Small Cup (250ml)",
    500: "Medium Bottle (500ml)",
    750: "Large Bottle (750ml)",
}


class WaterIntakeTracker:
    """Running total of water drunk against an adjustable daily goal."""

    def __init__(self, store: KeyValueStore, params: Optional[WaterParams] = None):
        self.store = store
        self.params = params or WaterParams()

    @property
    def intake_ml(self) -> int:
        return int(self.store.get(WATER_INTAKE_KEY, 0))

    @property
    def goal_ml(self) -> int:
        return int(self.store.get(WATER_GOAL_KEY, self.params.daily_goal_ml))

    def cups(self) -> list[tuple[int, str]]:
        """Quick-add buttons as (size, label) pairs."""
        return [(size, CUP_LABELS.get(size, f"{size}ml")) for size in self.params.cup_sizes_ml]

    def add(self, amount_ml: int) -> int:
        """
        Add a drink. The total is capped at a multiple of the goal.

        Raises:
            OutOfRangeError: If the amount is not a positive whole number of ml
        """
        if isinstance(amount_ml, bool) or not isinstance(amount_ml, int) or amount_ml <= 0:
            raise OutOfRangeError("Amount must be a positive number of ml.", minimum=1,
                                  field="amount_ml", value=amount_ml)

        cap = self.goal_ml * self.params.cap_multiplier
        total = min(self.intake_ml + amount_ml, cap)
        self.store.put(WATER_INTAKE_KEY, total)
        logger.info("Water logged", amount_ml=amount_ml, intake_ml=total, capped=total == cap)
        return total

    def reset(self) -> None:
        self.store.put(WATER_INTAKE_KEY, 0)
        logger.info("Water intake reset")

    def set_goal(self, goal_ml: int) -> int:
        floor = self.params.min_goal_ml
        if isinstance(goal_ml, bool) or not isinstance(goal_ml, int) or goal_ml < floor:
            raise OutOfRangeError(f"Daily goal must be at least {floor}ml.", minimum=floor,
                                  field="goal_ml", value=goal_ml)
        self.store.put(WATER_GOAL_KEY, goal_ml)
        return goal_ml

    def increase_goal(self) -> int:
        return self.set_goal(self.goal_ml + self.params.goal_step_ml)

    def decrease_goal(self) -> int:
        return self.set_goal(max(self.params.min_goal_ml, self.goal_ml - self.params.goal_step_ml))

    def progress_percentage(self) -> float:
        return min(self.intake_ml / self.goal_ml * 100, 100.0)

    def goal_reached(self) -> bool:
        return self.intake_ml >= self.goal_ml
