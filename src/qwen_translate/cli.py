"""Command-line interface for qwen-translate."""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from qwen_translate.core import QwenConfig, TranslationRequest
from qwen_translate.core.output import (
    OutputFormat,
    TranslationMetadata,
    TranslationOutput,
    create_handler,
)
from qwen_translate.core.translation import TranslationError, create_translator
from qwen_translate.core.transport import DEFAULT_TIMEOUT_SECONDS, HttpxTransport
from qwen_translate.utils.logging import configure_logging, get_logger

app = typer.Typer(
    name="qwen-translate",
    help="Translate text with Qwen models through the DashScope API",
    add_completion=False,
)
console = Console()
logger = get_logger()


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        from qwen_translate import __version__

        console.print(f"qwen-translate version: {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version information and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        "-l",
        help="Set the logging level.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output logs in JSON format.",
    ),
) -> None:
    """qwen-translate - Translate text with Qwen models."""
    try:
        configure_logging(level=log_level, json=json_logs)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")


@app.command()
def translate(
    text: str = typer.Argument(
        ...,
        help="The text to translate. Use '-' to read it from stdin.",
    ),
    source_lang: str = typer.Option(
        "auto",
        "--from",
        "-f",
        help="Source language code, sent as-is (e.g. 'auto', 'en', 'zh').",
    ),
    target_lang: str = typer.Option(
        "en",
        "--to",
        "-t",
        help="Target language code, sent as-is. Defaults to 'en'.",
    ),
    model_name: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        envvar="QWEN_MODEL_NAME",
        help="Model name (e.g. 'qwen-mt-plus', 'qwen-plus'). Defaults to qwen-mt-turbo.",
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        envvar="DASHSCOPE_API_KEY",
        help="DashScope API key.",
        show_default=False,
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-F",
        help="Output format (text, json, or markdown).",
    ),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="The output file. If not specified, prints to stdout.",
    ),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT_SECONDS,
        "--timeout",
        help="HTTP timeout in seconds.",
    ),
) -> None:
    """Translate a piece of text."""
    if text == "-":
        text = sys.stdin.read()

    config = QwenConfig(api_key=api_key, model_name=model_name)
    request = TranslationRequest(
        text=text, source_lang=source_lang, target_lang=target_lang
    )
    translator = create_translator(config, HttpxTransport(timeout=timeout))

    try:
        response = asyncio.run(translator.translate(request))
    except TranslationError as e:
        logger.error("Translation failed", kind=e.kind)
        console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        sys.exit(1)

    output = TranslationOutput(
        metadata=TranslationMetadata(
            source_lang=source_lang,
            target_lang=target_lang,
            model=response.model,
        ),
        result=response,
    )
    create_handler(output_format).write(output, output_file)


if __name__ == "__main__":
    app()
