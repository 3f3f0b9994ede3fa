"""Process table, multilevel ready queues and resource accounting."""

from __future__ import annotations

import enum
import logging
import os
import signal
import subprocess
import threading
from dataclasses import dataclass
from typing import Callable

MAX_TASKS = 10
KERNEL_PASSWORD = "password"

log = logging.getLogger(__name__)


class QueueType(enum.IntEnum):
    """Ready queues, in the order they are served."""

    SYSTEM = 0
    INTERACTIVE = 1
    BATCH = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


class SystemMode(enum.Enum):
    USER_MODE = enum.auto()
    KERNEL_MODE = enum.auto()


APP_PATHS: dict[str, str] = {
    "Calculator": "./calculator",
    "Notepad": "./notepad",
    "Calendar": "./calendar",
    "Clock": "./clock",
    "Resource Monitor": "./resource_monitor",
    "File Creator": "./file_creator",
    "File Deletion": "./delete_file",
    "File Mover": "./move_file",
    "Number Guessing Game": "./num_guess",
    "Age Calculator": "./age_calculator",
    "Copy Files": "./copy_file",
    "Tic Tac": "./tic_tac",
    "Encryption": "./encrypt",
    "Decryption": "./decrypt",
    "Factorial Calculator": "./factorial",
    "Fibonacci Game": "./fibonacci",
}


def classify(name: str) -> tuple[QueueType, int]:
    """Return the queue and priority a task of this name belongs to."""
    if name == "Task Manager":
        return QueueType.SYSTEM, 0
    if name in ("Calculator", "Notepad"):
        return QueueType.INTERACTIVE, 1
    return QueueType.BATCH, 2


@dataclass
class Task:
    name: str
    id: int = -1
    exec_path: str = ""
    ram_usage: int = 0
    hdd_usage: int = 0
    cpu_usage: float = 0.0
    is_running: bool = False
    is_queued: bool = False
    ram_required: int = 0
    hdd_required: int = 0
    queue_type: QueueType = QueueType.BATCH
    priority: int = 2


class PermissionDenied(Exception):
    """Raised when an operation needs kernel mode or a correct password."""


def _spawn(exec_path: str) -> int:
    return subprocess.Popen([exec_path]).pid


def _terminate(pid: int) -> None:
    try:
        os.kill(pid, signal.SIGTERM)
    except ProcessLookupError:
        pass


Listener = Callable[["OperatingSystem"], None]


class OperatingSystem:
    """A simulated machine that admits programs while RAM, disk and cores last."""

    def __init__(
        self,
        total_ram: int,
        total_hdd: int,
        cpu_cores: int,
        kernel_password: str = KERNEL_PASSWORD,
        launcher: Callable[[str], int] | None = None,
        killer: Callable[[int], None] | None = None,
    ) -> None:
        self.total_ram = total_ram
        self.total_hdd = total_hdd
        self.cpu_cores = cpu_cores
        self.used_ram = 0
        self.used_hdd = 0
        self.used_cpu = 0
        self.mode = SystemMode.USER_MODE
        self.tasks: list[Task] = []
        self.queues: dict[QueueType, list[Task]] = {q: [] for q in QueueType}
        self.listeners: list[Listener] = []
        self._kernel_password = kernel_password
        self._launch = launcher or _spawn
        self._kill = killer or _terminate
        self._lock = threading.RLock()
        self._stop = threading.Event()
        self._watcher: threading.Thread | None = None

    # resource bookkeeping

    @property
    def available_ram(self) -> int:
        return self.total_ram - self.used_ram

    @property
    def available_hdd(self) -> int:
        return self.total_hdd - self.used_hdd

    @property
    def available_cpu(self) -> int:
        return self.cpu_cores - self.used_cpu

    def _fits(self, ram: int, hdd: int) -> bool:
        return (
            self.available_ram >= ram
            and self.available_hdd >= hdd
            and self.available_cpu >= 1
        )

    def _reserve(self, ram: int, hdd: int) -> None:
        self.used_ram += ram
        self.used_hdd += hdd
        self.used_cpu += 1

    def _release(self, ram: int, hdd: int) -> None:
        self.used_ram -= ram
        self.used_hdd -= hdd
        self.used_cpu -= 1

    def _notify(self) -> None:
        for listener in list(self.listeners):
            listener(self)

    # scheduling

    def create_process(
        self,
        name: str,
        exec_path: str,
        ram_required: int,
        hdd_required: int,
        cpu_usage: float,
    ) -> Task:
        """Launch a program now, or queue it when resources are short."""
        with self._lock:
            if not self._fits(ram_required, hdd_required) or len(self.tasks) >= MAX_TASKS:
                log.info("Insufficient resources for %s. Adding to ready queue.", name)
                task = Task(
                    name=name,
                    cpu_usage=cpu_usage,
                    ram_required=ram_required,
                    hdd_required=hdd_required,
                )
                self.add_to_ready_queue(task, exec_path)
                return task

            self._reserve(ram_required, hdd_required)
            try:
                pid = self._launch(exec_path)
            except OSError:
                self._release(ram_required, hdd_required)
                raise
            queue_type, priority = classify(name)
            task = Task(
                name=name,
                id=pid,
                exec_path=exec_path,
                ram_usage=ram_required,
                hdd_usage=hdd_required,
                cpu_usage=cpu_usage,
                is_running=True,
                ram_required=ram_required,
                hdd_required=hdd_required,
                queue_type=queue_type,
                priority=priority,
            )
            self.tasks.append(task)
            self._notify()
            return task

    def add_to_ready_queue(self, task: Task, exec_path: str) -> bool:
        """Put a task on the queue for its kind; False when that queue is full."""
        queue_type, task.priority = classify(task.name)
        task.queue_type = queue_type
        task.exec_path = exec_path
        with self._lock:
            queue = self.queues[queue_type]
            if len(queue) >= MAX_TASKS:
                return False
            task.is_queued = True
            task.is_running = False
            queue.append(task)
        log.info("Added %s to %s queue", task.name, queue_type.label)
        return True

    def check_ready_queue(self) -> list[Task]:
        """Launch queued tasks that now fit, system queue first; return them."""
        launched: list[Task] = []
        with self._lock:
            for queue in self.queues.values():
                for task in list(queue):
                    if not self._fits(task.ram_required, task.hdd_required):
                        continue
                    if len(self.tasks) >= MAX_TASKS:
                        return launched
                    exec_path = APP_PATHS.get(task.name)
                    if exec_path is None:
                        log.warning("Unknown task type: %s", task.name)
                        continue
                    queue.remove(task)
                    try:
                        pid = self._launch(exec_path)
                    except OSError as exc:
                        task.is_queued = False
                        log.error("Failed to launch queued task %s: %s", task.name, exc)
                        continue
                    self._reserve(task.ram_required, task.hdd_required)
                    task.id = pid
                    task.exec_path = exec_path
                    task.ram_usage = task.ram_required
                    task.hdd_usage = task.hdd_required
                    task.is_running = True
                    task.is_queued = False
                    self.tasks.append(task)
                    launched.append(task)
                    log.info("Launched queued task: %s", task.name)
        return launched

    def terminate_task(self, pid: int) -> bool:
        """Reclaim the resources of an ended process; False if it is unknown."""
        with self._lock:
            for task in self.tasks:
                if task.id != pid:
                    continue
                if not task.is_running:
                    log.info("Process already marked as terminated.")
                    return False
                log.info(
                    "Process (%s) with PID %d terminated. Reclaiming resources.",
                    task.name,
                    pid,
                )
                self._release(task.ram_usage, task.hdd_usage)
                task.is_running = False
                self.tasks.remove(task)
                self._notify()
                self.check_ready_queue()
                return True
        log.info("Task with PID %d not found or already terminated.", pid)
        return False

    def terminate_all_tasks(self) -> list[int]:
        """Signal every running task and clear the table; needs kernel mode."""
        with self._lock:
            if self.mode is not SystemMode.KERNEL_MODE:
                raise PermissionDenied("Permission denied: Requires kernel mode")
            killed = []
            for task in self.tasks:
                if task.is_running:
                    self._kill(task.id)
                    self._release(task.ram_usage, task.hdd_usage)
                    task.is_running = False
                    killed.append(task.id)
            self.tasks.clear()
            self._notify()
            return killed

    def enter_kernel_mode(self, password: str) -> None:
        """Switch to kernel mode if the password matches."""
        if password != self._kernel_password:
            raise PermissionDenied("Incorrect password!")
        with self._lock:
            self.mode = SystemMode.KERNEL_MODE

    # child processes

    def reap_children(self) -> list[int]:
        """Collect every exited child process and account for it."""
        reaped: list[int] = []
        while True:
            try:
                pid, status = os.waitpid(-1, os.WNOHANG)
            except ChildProcessError:
                break
            if pid == 0:
                break
            log.info("Detected process %d terminated with status %d", pid, status)
            self.terminate_task(pid)
            self.check_ready_queue()
            reaped.append(pid)
        return reaped

    def start_watcher(self, interval: float = 0.1) -> threading.Thread:
        """Reap children in a background thread until the system is closed."""
        if self._watcher is not None and self._watcher.is_alive():
            return self._watcher
        self._stop.clear()

        def watch() -> None:
            log.info("Process watcher thread started")
            while not self._stop.is_set():
                self.reap_children()
                self._stop.wait(interval)

        self._watcher = threading.Thread(target=watch, name="process-watcher", daemon=True)
        self._watcher.start()
        return self._watcher

    def __enter__(self) -> OperatingSystem:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._stop.set()
        if self._watcher is not None:
            self._watcher.join()
            self._watcher = None