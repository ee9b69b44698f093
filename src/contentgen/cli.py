"""CLI entry point for the content generator."""

import base64
import json
import logging
import typer
from pathlib import Path
from typing import Optional

from . import __version__
from .config import config
from .errors import ContentGenerationError

app = typer.Typer(
    name="contentgen",
    help="AI-powered text, image, code and narrated slideshow generator",
    no_args_is_help=True
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"contentgen version {__version__}")
        raise typer.Exit()


def _build_providers():
    from .services import Providers

    try:
        return Providers.from_config(config)
    except ValueError as e:
        typer.echo(f"❌ Configuration error: {e}")
        raise typer.Exit(1)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """Content Generator - Create copy, images, code and narrated slideshows using AI."""
    pass


@app.command()
def video(
    script: Optional[str] = typer.Argument(
        None,
        help="Narration script (or use --script-file)"
    ),
    script_file: Optional[Path] = typer.Option(
        None,
        "--script-file",
        "-f",
        help="Read the script from a text file",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    output: Path = typer.Option(
        Path("video.json"),
        "--output",
        "-o",
        help="Output JSON payload path"
    ),
    audio_out: Optional[Path] = typer.Option(
        None,
        "--audio-out",
        "-a",
        help="Also write the decoded narration audio to this file"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Generate a narrated slideshow from a script."""
    from .video import VideoPipeline

    setup_logging(verbose)

    if script_file:
        script = script_file.read_text(encoding="utf-8")

    if not script or not script.strip():
        typer.echo("❌ Script is required (pass it as an argument or with --script-file)")
        raise typer.Exit(1)

    preview = script[:70] + "..." if len(script) > 70 else script
    typer.echo(f"🎬 Generating video for: {preview}")

    pipeline = VideoPipeline(_build_providers())
    try:
        result = pipeline.run(script)
    except ContentGenerationError as e:
        typer.echo(f"❌ Video generation failed: {e.message}")
        raise typer.Exit(1)

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(result.to_payload(), indent=2), encoding="utf-8")
        typer.echo(f"\n✅ Payload saved: {output}")
    except OSError as e:
        typer.echo(f"❌ Error saving payload: {e}")
        raise typer.Exit(1)

    if audio_out:
        audio_out.parent.mkdir(parents=True, exist_ok=True)
        audio_out.write_bytes(base64.b64decode(result.audio_base64))
        typer.echo(f"   Audio saved: {audio_out}")

    # Show summary
    typer.echo(f"\n📋 Summary:")
    typer.echo(f"   Scenes: {len(result.scenes)}")
    typer.echo(f"   Total duration: {result.total_duration / 1000:.1f}s")

    typer.echo(f"\n📽️  Scene breakdown:")
    for i, scene in enumerate(result.scenes, 1):
        narration_preview = (
            scene.narration[:70] + "..." if len(scene.narration) > 70 else scene.narration
        )
        typer.echo(f"   • scene {i}: {scene.duration / 1000:.1f}s")
        typer.echo(f"     {narration_preview}")


def _run_content(content_type: str, params: dict, verbose: bool) -> None:
    from .content import ContentGenerator

    setup_logging(verbose)
    generator = ContentGenerator(_build_providers())
    try:
        result = generator.generate(content_type, params)
    except ContentGenerationError as e:
        typer.echo(f"❌ Generation failed: {e.message}")
        raise typer.Exit(1)

    typer.echo(result.content)


@app.command()
def text(
    topic: str = typer.Option(..., "--topic", help="What the text is about"),
    tone: str = typer.Option("professional", "--tone", help="Writing tone"),
    audience: str = typer.Option("general audience", "--audience", help="Target audience"),
    goal: str = typer.Option("inform", "--goal", help="What the text should achieve"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Generate marketing copy."""
    _run_content(
        "text",
        {"topic": topic, "tone": tone, "audience": audience, "goal": goal},
        verbose,
    )


@app.command()
def image(
    subject: str = typer.Argument(..., help="What the image shows"),
    style: str = typer.Option("photorealistic", "--style", help="Visual style"),
    lighting: str = typer.Option("natural", "--lighting", help="Lighting description"),
    composition: str = typer.Option("centered", "--composition", help="Composition description"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Generate an image and print its locator."""
    _run_content(
        "image",
        {"subject": subject, "style": style, "lighting": lighting, "composition": composition},
        verbose,
    )


@app.command()
def code(
    task: str = typer.Argument(..., help="What the code should do"),
    language: str = typer.Option("python", "--language", "-l", help="Programming language"),
    context: str = typer.Option("", "--context", help="Surrounding context"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Generate a code snippet."""
    _run_content(
        "code",
        {"task": task, "language": language, "context": context},
        verbose,
    )


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Run the HTTP API."""
    import uvicorn
    from .api import create_app

    setup_logging(verbose)
    typer.echo(f"🌐 Serving on http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    app()
