"""Host health snapshot from OS counters."""
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from mission_control.schemas.system import HealthSnapshot

logger = logging.getLogger(__name__)


def clamp_percent(value: float) -> int:
    return max(0, min(100, int(round(value))))


class HealthService:
    """Reads load average, memory and uptime at call time; nothing is cached."""

    def __init__(self, proc_root: Path = Path("/proc")):
        self.proc_root = proc_root

    def _read_meminfo(self) -> Dict[str, int]:
        values: Dict[str, int] = {}
        with open(self.proc_root / "meminfo", encoding="utf-8") as f:
            for line in f:
                key, _, rest = line.partition(":")
                parts = rest.split()
                if parts and parts[0].isdigit():
                    values[key.strip()] = int(parts[0])  # kB
        return values

    def cpu_percent(self) -> int:
        """1-minute load average relative to the CPU count."""
        cpus = os.cpu_count() or 0
        if cpus == 0:
            return 0
        try:
            load1 = os.getloadavg()[0]
        except (AttributeError, OSError):
            logger.debug("Load average unavailable on this platform")
            return 0
        return clamp_percent(load1 / cpus * 100)

    def memory_percent(self) -> int:
        try:
            meminfo = self._read_meminfo()
        except OSError:
            logger.debug("Memory counters unavailable at %s", self.proc_root)
            return 0
        total = meminfo.get("MemTotal", 0)
        if total == 0:
            return 0
        available = meminfo.get("MemAvailable", meminfo.get("MemFree", 0))
        return clamp_percent((total - available) / total * 100)

    def uptime_seconds(self) -> int:
        try:
            with open(self.proc_root / "uptime", encoding="utf-8") as f:
                return int(round(float(f.read().split()[0])))
        except (OSError, ValueError, IndexError):
            return 0

    def snapshot(self, now: Optional[datetime] = None) -> HealthSnapshot:
        return HealthSnapshot(
            status="ok",
            cpu=self.cpu_percent(),
            memory=self.memory_percent(),
            uptime=self.uptime_seconds(),
            timestamp=now or datetime.now(timezone.utc),
        )


health_service = HealthService()
