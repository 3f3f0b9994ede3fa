"""Text shown by the resource monitor."""

from __future__ import annotations

import math

from ossim.scheduler import OperatingSystem


def _percent(part: int, total: int) -> float:
    if total:
        return part / total * 100
    if part == 0:
        return math.nan
    return math.copysign(math.inf, part)


def resource_lines(system: OperatingSystem) -> tuple[str, str, str]:
    """Return the RAM, disk and CPU lines describing free resources."""
    ram = system.available_ram
    hdd = system.available_hdd
    cpu = system.available_cpu
    return (
        f"RAM: {ram}/{system.total_ram} MB ({_percent(ram, system.total_ram):.1f}%)",
        f"HDD: {hdd}/{system.total_hdd} MB ({_percent(hdd, system.total_hdd):.1f}%)",
        f"CPU: {cpu}/{system.cpu_cores} cores available",
    )