"""Concurrent per-scene image generation."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

from ..models import RenderedScene, ScenePlan
from ..services.base import ImageGenerator

logger = logging.getLogger(__name__)

IMAGE_PROMPT_TEMPLATE = (
    "Generate a high-quality, cinematic image: {prompt}. "
    "Make it visually stunning and professional."
)
DEFAULT_MAX_WORKERS = 8


def build_image_prompt(image_prompt: str) -> str:
    """Wrap a scene's image prompt in the fixed stylistic directive."""
    return IMAGE_PROMPT_TEMPLATE.format(prompt=image_prompt)


def _render_one(index: int, plan: ScenePlan, generator: ImageGenerator) -> Optional[str]:
    """Request one scene image; any failure yields None."""
    logger.info(f"Generating image {index + 1}: {plan.image_prompt[:50]}")
    try:
        url = generator.generate_image(build_image_prompt(plan.image_prompt))
    except Exception as e:
        logger.error(f"Image {index + 1} generation failed: {e}")
        return None

    if not isinstance(url, str) or not url:
        logger.info(f"Image {index + 1} generated: no image")
        return None

    logger.info(f"Image {index + 1} generated: success")
    return url


def render_scene_images(
    plans: Sequence[ScenePlan],
    generator: ImageGenerator,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> list[RenderedScene]:
    """Request one image per plan concurrently.

    Every request is submitted before any result is awaited, bounded by
    ``max_workers``. Results are collected by plan index, so the returned
    list is in plan order regardless of completion order.

    Args:
        plans: Scene plans in order.
        generator: Image generation capability.
        max_workers: Maximum concurrent image requests.

    Returns:
        One RenderedScene per plan; ``image_url`` is None where generation failed.
    """
    if not plans:
        return []

    workers = max(1, min(max_workers, len(plans)))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="scene-image") as executor:
        futures = [
            executor.submit(_render_one, index, plan, generator)
            for index, plan in enumerate(plans)
        ]
        urls = [future.result() for future in futures]

    return [
        RenderedScene(narration=plan.narration, image_url=url)
        for plan, url in zip(plans, urls)
    ]


def keep_imaged(scenes: Sequence[RenderedScene]) -> list[RenderedScene]:
    """Drop scenes without an image, preserving order."""
    return [scene for scene in scenes if scene.image_url]
