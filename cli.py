#!/usr/bin/env python3
"""
CLI tool for the 2050 scenario narrator.

Generates narratives, prints prompts and renders speech from the terminal
without running the web app.
"""

import base64
import json
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from dotenv import load_dotenv

from scenario2050.axes import AXES, DEFAULT_SCENARIO, LANGUAGES, PROVIDERS, format_axis_value, get_axis
from scenario2050.config import Settings
from scenario2050.models import ScenarioConfig
from scenario2050.normalizer import normalize_config
from scenario2050.prompts import build_prompt
from scenario2050.services import NarrativeService, synthesize_speech
from scenario2050.utils.errors import APIError

# Load environment variables
load_dotenv()


def build_config(
    provider: Optional[str],
    language: Optional[str],
    overrides: Tuple[str, ...],
) -> ScenarioConfig:
    """
    Build a normalized configuration from CLI options.

    Args:
        provider: Provider name, or None to use the default scenario's
        language: Language code, or None to use the default scenario's
        overrides: ``axis=value`` strings, e.g. ``climateC=2.8``

    Returns:
        Normalized ScenarioConfig

    Raises:
        click.BadParameter: If an override is malformed or names an unknown axis
    """
    raw = dict(DEFAULT_SCENARIO)
    for item in overrides:
        key, sep, value = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected axis=value, got '{item}'", param_hint="--set")
        axis = get_axis(key.strip())
        if axis is None:
            raise click.BadParameter(f"unknown axis '{key.strip()}'", param_hint="--set")
        raw[axis.id] = value.strip()
    if provider:
        raw["provider"] = provider
    if language:
        raw["language"] = language
    return normalize_config(raw)


provider_option = click.option(
    '--provider', type=click.Choice(PROVIDERS), help='Narrative provider (default: mock)'
)
language_option = click.option(
    '--language', type=click.Choice(LANGUAGES), help='Narrative language (default: en)'
)
set_option = click.option(
    '--set', 'overrides', multiple=True, metavar='AXIS=VALUE',
    help='Override an axis value, e.g. --set climateC=2.8 (repeatable)'
)


@click.group()
def cli():
    """CLI tool for the 2050 scenario narrator."""
    pass


@cli.command()
@provider_option
@language_option
@set_option
@click.option('--format', 'output_format', type=click.Choice(['text', 'json']),
              default='text', help='Output format (default: text)')
def generate(provider: Optional[str], language: Optional[str], overrides: Tuple[str, ...],
             output_format: str) -> None:
    """Generate a narrative for a scenario."""
    config = build_config(provider, language, overrides)
    result = NarrativeService().generate(config)

    if output_format == 'json':
        click.echo(json.dumps(result.to_response(), indent=2, ensure_ascii=False))
        return

    click.echo(result.text)
    if result.warning:
        click.echo(f"Warning: {result.warning}", err=True)


@cli.command()
@language_option
@set_option
def prompt(language: Optional[str], overrides: Tuple[str, ...]) -> None:
    """Print the prompt that would be sent to a hosted provider."""
    built = build_prompt(build_config(None, language, overrides))
    click.echo("# System")
    click.echo(built.system)
    click.echo()
    click.echo("# User")
    click.echo(built.user)


@cli.command()
@click.option('--language', type=click.Choice(LANGUAGES), default='en',
              help='Label language (default: en)')
def axes(language: str) -> None:
    """List the scenario axes with their ranges and defaults."""
    for axis in AXES:
        default = format_axis_value(axis, DEFAULT_SCENARIO[axis.id])
        click.echo(
            f"{axis.id:<18} {format_axis_value(axis, axis.min):>5} - "
            f"{format_axis_value(axis, axis.max):<5} step {axis.step:<4} "
            f"default {default:<5} {axis.label.get(language)}"
        )


@cli.command()
@click.option('--text', 'text', type=str, help='Text to speak')
@click.option('--input', 'input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Read the text from a file')
@click.option('--language', type=click.Choice(LANGUAGES), default='en', help='Speech language')
@click.option('--voice-id', type=str, help='ElevenLabs voice identifier')
@click.option('--output', 'output_file', type=click.Path(dir_okay=False, path_type=Path),
              required=True, help='Where to write the MP3 audio')
def tts(text: Optional[str], input_file: Optional[Path], language: str,
        voice_id: Optional[str], output_file: Path) -> None:
    """
    Render text to speech and write it as MP3.

    Raises:
        SystemExit: Exits with code 1 if synthesis fails.
    """
    if input_file is not None:
        text = input_file.read_text(encoding='utf-8')
    if not text:
        raise click.UsageError("Provide --text or --input")

    try:
        result = synthesize_speech(text, language=language, voice_id=voice_id)
    except APIError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    output_file.write_bytes(base64.b64decode(result.audio_base64))
    click.echo(f"Wrote {output_file}")


@cli.command()
def check() -> None:
    """Report which backends are configured."""
    settings = Settings.from_env()
    for provider in ("openai", "gemini"):
        status = "configured" if settings.provider_available(provider) else "not configured (falls back to mock)"
        click.echo(f"{provider:<8} {status}")
    click.echo(f"{'tts':<8} {'configured' if settings.speech_configured else 'not configured'}")
    click.echo(f"default provider: {settings.default_provider()}")


if __name__ == '__main__':
    cli()
