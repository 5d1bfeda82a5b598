"""
Titan Security Sensor Registry

Owns every sensor record. Other components only see frozen Sensor views;
readings change through set_reading().
"""

import logging
from typing import Iterable, Iterator, Optional, Tuple

from ..domain.enums import SensorCategory
from ..domain.models import Sensor

log = logging.getLogger(__name__)


# Starter set installed by initialize(), in registration order
DEFAULT_SENSORS: Tuple[Sensor, ...] = (
    Sensor(name="Front Door", category=SensorCategory.DOOR, location="Entry", reading=0),
    Sensor(name="Living Room Motion", category=SensorCategory.MOTION, location="Living Room", reading=0),
    Sensor(name="Kitchen Heat", category=SensorCategory.HEAT, location="Kitchen", reading=25),
)


class SensorRegistry:
    """Ordered, index-addressed collection of sensors."""

    def __init__(self, sensors: Optional[Iterable[Sensor]] = None, strict: bool = False):
        self._sensors: list[Sensor] = list(sensors) if sensors is not None else []
        self.strict = strict

    def initialize(self) -> None:
        """Replace the contents with the three starter sensors."""
        self._sensors = list(DEFAULT_SENSORS)

    def set_reading(self, index: int, value: int) -> bool:
        """
        Update the reading of the sensor at index.

        Out-of-range indexes are ignored (returns False) unless the
        registry is strict, in which case IndexError is raised.
        A non-integral value raises ValidationError and leaves the
        sensor unchanged.
        """
        if not 0 <= index < len(self._sensors):
            if self.strict:
                raise IndexError(
                    f"Sensor index {index} out of range (0..{len(self._sensors) - 1})"
                )
            log.debug("Ignoring simulated input for missing sensor index %d", index)
            return False

        self._sensors[index] = self._sensors[index].with_reading(value)
        return True

    def get(self, index: int) -> Optional[Sensor]:
        if 0 <= index < len(self._sensors):
            return self._sensors[index]
        return None

    def items(self) -> Iterator[Tuple[int, Sensor]]:
        """Yield (index, sensor) pairs in registration order."""
        for index, sensor in enumerate(self._sensors):
            yield index, sensor

    def __iter__(self) -> Iterator[Tuple[int, Sensor]]:
        return self.items()

    def __len__(self) -> int:
        return len(self._sensors)

    def list_sensors(self) -> list[dict]:
        """List all sensors."""
        return [
            {
                "index": index,
                "name": s.name,
                "category": s.category.value,
                "location": s.location,
                "reading": s.reading,
            }
            for index, s in self.items()
        ]
