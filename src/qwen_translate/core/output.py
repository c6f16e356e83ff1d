"""Output handlers for different formats."""

import json
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, Protocol

from pydantic import BaseModel, Field

from qwen_translate.core.types import TranslationResponse


class OutputFormat(str, Enum):
    """Supported output formats."""

    TEXT = "text"
    JSON = "json"
    MARKDOWN = "markdown"


class TranslationMetadata(BaseModel):
    """Metadata about a translation call."""

    source_lang: str
    target_lang: str
    model: str
    timestamp: datetime = Field(default_factory=datetime.now)


class TranslationOutput(BaseModel):
    """Translated text together with its metadata."""

    metadata: TranslationMetadata
    result: TranslationResponse


class OutputHandler(Protocol):
    """Protocol for output handlers."""

    def write(
        self,
        output: TranslationOutput,
        file: Optional[Path] = None,
    ) -> None:
        """Write the translation output.

        Args:
            output: The translation output to write
            file: Optional file to write to. If None, writes to stdout.
        """
        ...


def _emit(content: str, file: Optional[Path]) -> None:
    if file:
        file.write_text(content, encoding="utf-8")
    else:
        print(content)


class JSONOutputHandler:
    """Handler for JSON output format."""

    def write(
        self,
        output: TranslationOutput,
        file: Optional[Path] = None,
    ) -> None:
        data = output.model_dump(mode="json")
        _emit(json.dumps(data, indent=2, ensure_ascii=False), file)


class TextOutputHandler:
    """Handler for plain text output format: the translation only."""

    def write(
        self,
        output: TranslationOutput,
        file: Optional[Path] = None,
    ) -> None:
        _emit(output.result.text, file)


class MarkdownOutputHandler:
    """Handler for Markdown output format."""

    def write(
        self,
        output: TranslationOutput,
        file: Optional[Path] = None,
    ) -> None:
        md_lines = [
            "# Translation Results\n",
            "## Metadata",
            f"- Source Language: {output.metadata.source_lang}",
            f"- Target Language: {output.metadata.target_lang}",
            f"- Model: {output.metadata.model}",
            f"- Timestamp: {output.metadata.timestamp.isoformat()}\n",
            "## Translation",
            "```text",
            output.result.text,
            "```\n",
            "## Statistics",
            f"- Time Taken: {output.result.time_taken:.1f}s\n",
        ]
        _emit("\n".join(md_lines), file)


def create_handler(format: OutputFormat) -> OutputHandler:
    """Create an output handler for the specified format.

    Raises:
        ValueError: If the format is not supported
    """
    handlers = {
        OutputFormat.TEXT: TextOutputHandler(),
        OutputFormat.JSON: JSONOutputHandler(),
        OutputFormat.MARKDOWN: MarkdownOutputHandler(),
    }

    handler = handlers.get(format)
    if not handler:
        raise ValueError(f"Unsupported output format: {format}")

    return handler
