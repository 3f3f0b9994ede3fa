import math

from ossim.monitor import resource_lines
from ossim.scheduler import OperatingSystem


def make_system(ram, hdd, cores):
    pids = iter(range(500, 600))
    return OperatingSystem(ram, hdd, cores, launcher=lambda path: next(pids))


def test_fresh_system_is_fully_free():
    ram, hdd, cpu = resource_lines(make_system(8000, 1000, 4))
    assert ram == "RAM: 8000/8000 MB (100.0%)"
    assert hdd == "HDD: 1000/1000 MB (100.0%)"
    assert cpu == "CPU: 4/4 cores available"


def test_lines_after_launch():
    system = make_system(8000, 1000, 4)
    system.create_process("Calculator", "./calculator", 2000, 500, 1.0)
    assert resource_lines(system) == (
        "RAM: 6000/8000 MB (75.0%)",
        "HDD: 500/1000 MB (50.0%)",
        "CPU: 3/4 cores available",
    )


def test_lines_return_after_termination():
    system = make_system(8000, 1000, 4)
    before = resource_lines(system)
    task = system.create_process("Clock", "./clock", 300, 200, 1.0)
    assert resource_lines(system) != before
    system.terminate_task(task.id)
    assert resource_lines(system) == before


def test_listener_sees_current_lines():
    system = make_system(4000, 4000, 2)
    recorded = []
    system.listeners.append(lambda s: recorded.append(resource_lines(s)))
    system.create_process("Clock", "./clock", 100, 100, 1.0)
    assert recorded == [resource_lines(system)]


def test_zero_totals_do_not_raise():
    ram, hdd, cpu = resource_lines(make_system(0, 0, 0))
    assert ram.startswith("RAM: 0/0 MB (")
    assert "nan" in ram
    assert cpu == "CPU: 0/0 cores available"
    assert math.isnan(float(hdd.split("(")[1].rstrip("%)")))