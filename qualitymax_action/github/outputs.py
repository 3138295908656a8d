"""Step outputs, job summary and workflow commands."""

import logging
import sys
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ActionOutputs:
    """Writes results back to the workflow run.

    Outputs and the job summary go to the files the runner exposes through
    GITHUB_OUTPUT and GITHUB_STEP_SUMMARY. Annotations are printed as
    workflow commands on stdout.
    """

    output_path: Path | None = None
    summary_path: Path | None = None
    stream: TextIO | None = field(default=None, repr=False)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "ActionOutputs":
        """Create outputs writer from the runner environment."""
        output = environ.get("GITHUB_OUTPUT")
        summary = environ.get("GITHUB_STEP_SUMMARY")
        return cls(
            output_path=Path(output) if output else None,
            summary_path=Path(summary) if summary else None,
        )

    def set_output(self, name: str, value: str) -> None:
        """Set a step output."""
        if self.output_path is None:
            log.info("GITHUB_OUTPUT not set, skipping output %s=%s", name, value)
            return

        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            line = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
        else:
            line = f"{name}={value}\n"

        with self.output_path.open("a", encoding="utf-8") as f:
            f.write(line)

    def set_outputs(self, outputs: Mapping[str, str]) -> None:
        """Set several step outputs."""
        for name, value in outputs.items():
            self.set_output(name, value)

    def write_summary(self, markdown: str) -> None:
        """Append markdown to the job summary."""
        if self.summary_path is None:
            log.info("GITHUB_STEP_SUMMARY not set, skipping job summary")
            return

        with self.summary_path.open("a", encoding="utf-8") as f:
            f.write(markdown)
            if not markdown.endswith("\n"):
                f.write("\n")

    def error(self, message: str) -> None:
        """Emit an error annotation."""
        self._command("error", message)

    def warning(self, message: str) -> None:
        """Emit a warning annotation."""
        self._command("warning", message)

    def _command(self, command: str, message: str) -> None:
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        print(f"::{command}::{escaped}", file=self.stream or sys.stdout)
