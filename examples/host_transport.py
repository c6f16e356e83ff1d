"""Example: calling the adapter the way a plugin host does.

The host hands over a plain config dict and its own transport. Here the
transport is backed by httpx; any async callable with the same shape works.
"""

import asyncio
import os
import sys

import httpx
from rich.console import Console
from rich.markup import escape

from qwen_translate.core import (
    QwenConfig,
    RequestOptions,
    TranslationError,
    TransportResponse,
    translate,
)

console = Console()


async def host_fetch(url: str, options: RequestOptions) -> TransportResponse:
    async with httpx.AsyncClient(timeout=30) as client:
        response = await client.request(
            options.method, url, headers=options.headers, json=options.body.payload
        )
    return TransportResponse(
        ok=response.is_success, status=response.status_code, data=response.json()
    )


async def main(text: str) -> None:
    config = QwenConfig.model_validate(
        {"apiKey": os.environ.get("DASHSCOPE_API_KEY", ""), "modelName": "qwen-mt-plus"}
    )
    try:
        result = await translate(text, "auto", "zh", config, host_fetch)
    except TranslationError as e:
        console.print(f"[red]{e.kind}[/red]: {escape(str(e))}", highlight=False)
        return
    console.print(result)


if __name__ == "__main__":
    asyncio.run(main(" ".join(sys.argv[1:]) or "Hello, world!"))
