"""
Boundary Monitor: диагностика выхода за границы safe integer

Включается настройкой enable_check_boundary. Каждое масштабированное
значение и результат сравниваются с MAX_SAFE_INTEGER / MIN_SAFE_INTEGER;
выход за границы не останавливает вычисление и не меняет результат,
а только сообщается:
- в injected callback, если он передан
- иначе WARNING в logger "precise_calc.boundary"
"""

import logging
from typing import Optional

from src.core.math.numerical_safeguards import is_safe_integer_magnitude
from src.core.math.scaled_arithmetic import BoundaryHook

logger = logging.getLogger("precise_calc.boundary")


class BoundaryMonitor:
    """Наблюдатель за масштабированными значениями."""

    def __init__(self, enabled: bool = False, callback: Optional[BoundaryHook] = None):
        self.enabled = enabled
        self._callback = callback
        self.exceeded_count = 0

    @property
    def hook(self) -> Optional[BoundaryHook]:
        """Hook для scaled arithmetic; None когда диагностика выключена."""
        return self if self.enabled else None

    def __call__(self, value: float) -> None:
        if not self.enabled or is_safe_integer_magnitude(value):
            return

        self.exceeded_count += 1

        if self._callback is not None:
            self._callback(value)
            return

        logger.warning(
            "%r is out of the safe integer boundary, the result may be not accurate",
            value,
        )
