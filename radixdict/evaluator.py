"""Replays operation scripts and reports PASS/FAIL per script."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from radixdict.constants import ABSENT_TEXT, SCRIPT_SUFFIX
from radixdict.dictionary import Dictionary
from radixdict.script import Operation, OperationType, Script, load_script

log = logging.getLogger("radixdict.eval")

_NAME_W, _STATUS_W, _TIME_W = 60, 10, 8


def render(result: str | int | None) -> str:
    """Text form of a query result, as written in scripts."""
    return ABSENT_TEXT if result is None else str(result)


class ScriptResult:
    """Outcome of replaying one script."""

    __slots__ = ("name", "passed", "failed_at", "message", "elapsed_ms")

    def __init__(
        self,
        name: str,
        passed: bool,
        failed_at: int | None = None,
        message: str = "",
        elapsed_ms: int = 0,
    ):
        self.name = name
        self.passed = passed
        self.failed_at = failed_at  # index of the failing operation
        self.message = message
        self.elapsed_ms = elapsed_ms

    @property
    def status(self) -> str:
        return "PASS" if self.passed else "FAIL"

    def row(self) -> str:
        return f"| {self.name:<{_NAME_W}} | {self.status:<{_STATUS_W}} | {self.elapsed_ms:<{_TIME_W}}ms |"


def table_rule() -> str:
    return "+" + "-" * (_NAME_W + 2) + "+" + "-" * (_STATUS_W + 2) + "+" + "-" * (_TIME_W + 4) + "+"


class Evaluator:
    """Runs scripts, each against its own fresh Dictionary."""

    def __init__(self):
        self.dictionary = Dictionary()

    def run(self, script: Script) -> ScriptResult:
        self.dictionary = Dictionary()
        t0 = time.perf_counter()
        failed_at, message = self._run_operations(script.operations)
        elapsed = int((time.perf_counter() - t0) * 1000)
        if failed_at is not None:
            log.warning("%s: test failed at operation %s: %s", script.name, failed_at, message)
        return ScriptResult(script.name, failed_at is None, failed_at, message, elapsed)

    def _run_operations(self, operations: list[Operation]) -> tuple[int | None, str]:
        for i, op in enumerate(operations):
            try:
                actual = self._apply(op)
            except Exception as exc:
                return i, f"{type(exc).__name__}: {exc}"
            if op.expected is not None and render(actual) != op.expected:
                return i, f"[{op!r}]: expected {op.expected} but got {render(actual)}"
        return None, ""

    def _apply(self, op: Operation) -> str | int | None:
        d = self.dictionary
        if op.type is OperationType.ADD:
            d.add(op.word, op.definition)
        elif op.type is OperationType.REMOVE:
            d.remove(op.word)
        elif op.type is OperationType.GET_DEF:
            return d.get_definition(op.word)
        elif op.type is OperationType.GET_SEQ:
            return d.get_sequence(op.word)
        elif op.type is OperationType.COUNT:
            return d.count_prefix(op.word)
        elif op.type is OperationType.COMPRESS:
            d.compress()
        else:
            raise ValueError(f"Invalid operation type: {op.type}")
        return None


def run_script_file(path: str | Path, verbose: bool = False) -> ScriptResult:
    script = load_script(path)
    if verbose:
        print(script)
    return Evaluator().run(script)


def run_path(path: str | Path, pattern: str = f"*{SCRIPT_SUFFIX}", verbose: bool = True) -> list[ScriptResult]:
    """Run one script file, or every matching file in a directory (sorted).

    A single file prints its operation listing first unless ``verbose`` is
    False; files found in a directory never do.
    """
    path = Path(path)
    if not path.is_dir():
        return [run_script_file(path, verbose=verbose)]
    files = sorted(p for p in path.glob(pattern) if p.is_file())
    if not files:
        log.warning("No script files matching %s in %s", pattern, path)
    return [run_script_file(p) for p in files]
