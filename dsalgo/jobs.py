"""A job queue that runs system jobs before user jobs, shortest first."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Callable
from dataclasses import dataclass

from dsalgo.minheap import MinHeap

_MENU = (
    "\nAvailable commands:\n"
    "1. submit\n"
    "2. execute\n"
    "3. lottery\n"
    "4. quit\n"
    "Enter your choice: "
)


@dataclass
class Job:
    """A submitted job; ``job_type`` is ``"system"`` or ``"user"``."""

    job_type: str
    execution_time: float
    user_id: str
    command_name: str
    resource_list: str = ""

    def _priority(self) -> int:
        return 0 if self.job_type == "system" else 1

    def __lt__(self, other: Job) -> bool:
        if self._priority() != other._priority():
            return self._priority() < other._priority()
        return self.execution_time < other.execution_time


class JobScheduler:
    """Holds pending jobs in priority order."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._queue: MinHeap[Job] = MinHeap()
        self._rng = rng if rng is not None else random.Random()

    def submit(self, job: Job) -> None:
        """Queue ``job``."""
        self._queue.insert(job)

    def execute(self) -> Job | None:
        """Remove and return the highest-priority job, or None if none wait."""
        if not self._queue:
            return None
        return self._queue.extract_min()

    def lottery(self) -> Job | None:
        """Remove and return a randomly chosen job, or None if none wait."""
        if not self._queue:
            return None
        index = self._rng.randrange(len(self._queue))
        skipped = [self._queue.extract_min() for _ in range(index)]
        lucky = self._queue.extract_min()
        for job in skipped:
            self._queue.insert(job)
        return lucky

    def terminate_all(self) -> list[Job]:
        """Remove every pending job and return them in priority order."""
        terminated = []
        while self._queue:
            terminated.append(self._queue.extract_min())
        return terminated

    def __len__(self) -> int:
        return len(self._queue)


def format_job(job: Job, header: str) -> str:
    """Describe ``job`` under ``header``, one field per line."""
    return "\n".join(
        [
            header,
            f"Job Type: {job.job_type}",
            f"Execution Time: {job.execution_time:g}",
            f"User ID: {job.user_id}",
            f"Command Name: {job.command_name}",
            f"Resource List: {job.resource_list}",
        ]
    )


class _TokenStream:
    """Whitespace-separated tokens drawn from a line source."""

    def __init__(self, read: Callable[[], str]) -> None:
        self._read = read
        self._rest = ""

    def token(self) -> str:
        while not self._rest.strip():
            self._rest = self._read()
        stripped = self._rest.lstrip()
        parts = stripped.split(maxsplit=1)
        word = parts[0]
        self._rest = stripped[len(word):]
        return word

    def discard_line(self) -> None:
        self._rest = ""

    def rest_of_line(self) -> str:
        if self._rest:
            rest, self._rest = self._rest[1:], ""
            return rest
        return self._read()


def _positive_number(text: str) -> float | None:
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def read_job(read: Callable[[], str], write: Callable[[str], object]) -> Job:
    """Prompt through ``write`` and build a job from lines returned by ``read``.

    ``read`` returns one line per call and raises EOFError when input ends.
    """
    tokens = _TokenStream(read)

    write("Enter job type (system/user): ")
    job_type = tokens.token()
    while job_type not in ("system", "user"):
        write("Invalid job type. Please enter 'system' or 'user': ")
        job_type = tokens.token()

    write("Enter estimated execution time: ")
    while (execution_time := _positive_number(tokens.token())) is None:
        tokens.discard_line()
        write("Invalid input. Please enter a positive number for execution time: ")

    write("Enter your username: ")
    user_id = tokens.token()

    write("Enter the command name: ")
    command_name = tokens.token()

    write("Enter resource list (comma-separated): ")
    resource_list = tokens.rest_of_line()

    return Job(job_type, execution_time, user_id, command_name, resource_list)


def _read_stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive job menu on standard input and output."""
    scheduler = JobScheduler()
    write = sys.stdout.write
    tokens = _TokenStream(_read_stdin_line)

    try:
        while True:
            write(_MENU)
            command = tokens.token()
            tokens.discard_line()

            if command in ("submit", "1"):
                job = read_job(_read_stdin_line, write)
                scheduler.submit(job)
                print(
                    f"Job '{job.command_name}' submitted successfully "
                    f"by user '{job.user_id}'."
                )
            elif command in ("execute", "2"):
                job = scheduler.execute()
                if job is None:
                    print("No jobs to execute.")
                else:
                    print(format_job(job, "Executing job:"))
            elif command in ("lottery", "3"):
                job = scheduler.lottery()
                if job is None:
                    print("No jobs in the queue to execute.")
                else:
                    print(format_job(job, "Lucky job selected for execution:"))
            elif command in ("quit", "4"):
                print("Terminating all remaining jobs...")
                for job in scheduler.terminate_all():
                    print(format_job(job, "Forcibly terminating job:"))
                print("All jobs have been terminated. Exiting the program.")
                return 0
            else:
                print("Invalid command. Please try again.")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())