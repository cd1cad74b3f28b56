import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, TextIO


class RuleSink(ABC):
    """Append-only destination for rule trace records.

    Writes are best effort: a failing write is reported through logging and
    never raised, so tracing cannot fail the assertion it accompanies.
    """

    def write(self, record: Dict[str, Any]) -> bool:
        return self.write_many([record])

    def write_many(self, records: Iterable[Dict[str, Any]]) -> bool:
        lines = [json.dumps(record, ensure_ascii=False) + "\n" for record in records]
        if not lines:
            return True
        try:
            self._append(lines)
            return True
        except (OSError, ValueError) as e:
            logging.error(f"Failed to write {len(lines)} rule trace record(s) to {self.describe()}: {e}")
            return False

    @abstractmethod
    def _append(self, lines: List[str]) -> None:
        pass

    @abstractmethod
    def describe(self) -> str:
        pass


class JsonLinesRuleSink(RuleSink):
    """One JSON object per line, appended to a file."""

    def __init__(self, path: str):
        self.path = path

    def _append(self, lines: List[str]) -> None:
        folder = os.path.dirname(self.path)
        if folder and not os.path.exists(folder):
            os.makedirs(folder)
        with open(self.path, "a", encoding="utf-8") as f:
            f.writelines(lines)

    def describe(self) -> str:
        return self.path


class StreamRuleSink(RuleSink):
    """Writes JSON lines to an already open text stream."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def _append(self, lines: List[str]) -> None:
        self.stream.writelines(lines)
        self.stream.flush()

    def describe(self) -> str:
        return getattr(self.stream, "name", repr(self.stream))
