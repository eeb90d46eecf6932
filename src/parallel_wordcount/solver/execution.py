"""Worker pool policy: which executor counts the partitions."""

import os
import sys
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import TypeAlias

ExecutorClass: TypeAlias = type[ThreadPoolExecutor] | type[ProcessPoolExecutor] | None

# Environment variable consulted when no explicit policy is given.
WC_EXECUTOR_ENV = "WC_EXECUTOR"

# "serial" counts every partition in the calling thread (handy under a debugger).
_POLICIES: dict[str, ExecutorClass] = {
    "threads": ThreadPoolExecutor,
    "processes": ProcessPoolExecutor,
    "serial": None,
}

EXECUTOR_CHOICES = tuple(_POLICIES)


def is_gil_enabled() -> bool:
    """Check if GIL is enabled."""
    try:
        return sys._is_gil_enabled()
    except AttributeError:
        return True


def resolve_policy(policy: str | None = None) -> str:
    """
    Turn a requested policy into one of EXECUTOR_CHOICES.

    An explicit policy wins over $WC_EXECUTOR; "auto" (or nothing) picks
    threads on a free-threaded interpreter and processes otherwise.
    Unknown names raise ValueError.
    """
    if policy is None or policy.lower() == "auto":
        policy = os.environ.get(WC_EXECUTOR_ENV, "")
    name = policy.strip().lower()

    if name in ("", "auto"):
        return "processes" if is_gil_enabled() else "threads"
    if name not in _POLICIES:
        choices = ", ".join(("auto", *EXECUTOR_CHOICES))
        raise ValueError(f"unknown executor policy {policy!r}, expected one of: {choices}")
    return name


def get_executor_class(policy: str | None = None) -> ExecutorClass:
    """Executor class for the resolved policy; None means serial."""
    return _POLICIES[resolve_policy(policy)]


def describe_executor(executor_class: ExecutorClass) -> str:
    """Convert an executor class into a readable policy name."""
    for name, cls in _POLICIES.items():
        if cls is executor_class:
            return name
    raise ValueError(f"not a known executor class: {executor_class!r}")
