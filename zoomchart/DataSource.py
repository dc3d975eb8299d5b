import logging
import random
from typing import Iterable, List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 200
DEFAULT_LOW = 50.0
DEFAULT_HIGH = 200.0


def random_values(count: int,
                  low: float = DEFAULT_LOW,
                  high: float = DEFAULT_HIGH,
                  rng: Optional[random.Random] = None) -> List[float]:
    """output count pseudo-random values in [low, high)"""
    if rng is None:
        rng = random.Random()
    span = high - low
    return [low + rng.random() * span for _ in range(count)]


class DataSource(QObject):
    """
    Values shown by a chart.
    A DataSource is just like a list, but the values can only be replaced as a whole.
    Supported operations are:
    set_values(), regenerate(), __len__(), __getitem__(), __iter__()
    """
    data_replaced = pyqtSignal()

    def __init__(self,
                 count: int = DEFAULT_COUNT,
                 low: float = DEFAULT_LOW,
                 high: float = DEFAULT_HIGH,
                 seed: Optional[int] = None,
                 parent=None):
        super().__init__(parent)
        self.count = count
        self.low = low
        self.high = high
        self._rng = random.Random(seed)
        self.data_list: List[Optional[float]] = random_values(count, low, high, self._rng)

    def set_values(self, values: Iterable[Optional[float]]) -> None:
        self.data_list = list(values)
        self.data_replaced.emit()

    def regenerate(self) -> None:
        logger.debug("regenerating %d values in [%s, %s)", self.count, self.low, self.high)
        self.set_values(random_values(self.count, self.low, self.high, self._rng))

    def __getitem__(self, item):
        return self.data_list[item]

    def __len__(self):
        return len(self.data_list)

    def __iter__(self):
        return iter(self.data_list)

    def __str__(self):
        return str(self.data_list)

    def __repr__(self):
        return repr(self.data_list)
