from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import List, Sequence

import typer
from rich.console import Console
from rich.table import Table

from config import SETTINGS
from translator.base import TranslationResult
from translator.factory import build_orchestrator
from translator.languages import SUPPORTED_LANGUAGES
from utils.lang import detect_language, detect_language_local
from utils.logging_config import configure_logging

app = typer.Typer(add_completion=False)
console = Console()


def _run_async(coro):
    return asyncio.run(coro)


async def _translate_all(texts: Sequence[str], source: str, target: str) -> List[TranslationResult]:
    async with build_orchestrator(SETTINGS) as orchestrator:
        return await orchestrator.translate_batch(texts, source, target)


def _print_json(payload: object) -> None:
    console.print_json(json.dumps(payload, ensure_ascii=False))


@app.command(help="Translate a single piece of text")
def translate(
    text: str = typer.Argument(...),
    source: str = typer.Option(SETTINGS.default_source_lang, "--source", "-s", help="Source language code or 'auto'"),
    target: str = typer.Option(SETTINGS.default_target_lang, "--target", "-t"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
) -> None:
    configure_logging()

    async def runner() -> TranslationResult:
        async with build_orchestrator(SETTINGS) as orchestrator:
            return await orchestrator.translate(text, source, target)

    result = _run_async(runner())
    if as_json:
        _print_json(result.to_dict())
        return
    console.print(result.translated_text)
    console.log(f"provider={result.provider} confidence={result.confidence:.2f}")


@app.command(help="Translate every line of a text file")
def batch(
    input: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    source: str = typer.Option(SETTINGS.default_source_lang, "--source", "-s"),
    target: str = typer.Option(SETTINGS.default_target_lang, "--target", "-t"),
    as_json: bool = typer.Option(False, "--json", help="Print results as a JSON list"),
) -> None:
    configure_logging()
    texts = input.read_text(encoding="utf-8").splitlines()
    if as_json:
        results = _run_async(_translate_all(texts, source, target))
        _print_json([result.to_dict() for result in results])
        return

    with console.status(f"Translating {len(texts)} lines"):
        results = _run_async(_translate_all(texts, source, target))
    table = Table("#", "Original", "Translated", "Provider", "Confidence")
    for index, result in enumerate(results, start=1):
        table.add_row(str(index), result.original_text, result.translated_text, result.provider, f"{result.confidence:.2f}")
    console.print(table)


@app.command(help="Guess the language of a piece of text without any network calls")
def detect(text: str = typer.Argument(...)) -> None:
    configure_logging()
    console.print(f"script heuristic: {detect_language_local(text)}")
    console.print(f"langdetect: {detect_language(text) or 'unknown'}")


@app.command(help="List the supported languages")
def languages() -> None:
    table = Table("Code", "Name", "Native", "Flag", "Direction")
    for language in SUPPORTED_LANGUAGES:
        table.add_row(language.code, language.name, language.native_name, language.flag, language.dir)
    console.print(table)


if __name__ == "__main__":
    app()
