"""Single-shot text, image and code generation."""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from .agents import CodeWriterAgent, CopywriterAgent
from .errors import InvalidInputError, UnknownUpstreamError
from .models import CodeParams, ContentResult, ContentType, ImageParams, TextParams
from .services.providers import Providers

logger = logging.getLogger(__name__)

IMAGE_PROMPT_TEMPLATE = (
    "Create a {style} image of {subject}. Lighting: {lighting}. Composition: {composition}."
)


def _parse_params(model: type[BaseModel], params: Optional[dict]) -> Any:
    try:
        return model.model_validate(params or {})
    except ValidationError as e:
        fields = sorted({".".join(str(part) for part in err["loc"]) for err in e.errors()})
        raise InvalidInputError(f"Invalid or missing parameters: {', '.join(fields)}") from e


class ContentGenerator:
    """Dispatches a content request to the matching generator."""

    def __init__(self, providers: Providers) -> None:
        self._providers = providers
        self._copywriter = CopywriterAgent(providers.text)
        self._code_writer = CodeWriterAgent(providers.text)

    def generate(self, content_type: Any, params: Optional[dict] = None) -> ContentResult:
        """Generate one artifact.

        Args:
            content_type: "text", "image" or "code".
            params: Type-specific parameters.

        Raises:
            InvalidInputError: Unknown type or missing parameters.
            UpstreamRateLimitedError: A collaborator rate limited the request.
            UpstreamQuotaExceededError: A collaborator reported a quota problem.
            UnknownUpstreamError: Any other collaborator failure or empty output.
        """
        try:
            kind = ContentType(content_type)
        except ValueError:
            raise InvalidInputError("Invalid content type")

        logger.info(f"Generating {kind.value} content")

        if kind is ContentType.IMAGE:
            return self.generate_image(_parse_params(ImageParams, params))
        if kind is ContentType.CODE:
            return self.generate_code(_parse_params(CodeParams, params))
        return self.generate_text(_parse_params(TextParams, params))

    def generate_text(self, params: TextParams) -> ContentResult:
        return ContentResult(content=self._require(self._copywriter.run(params)))

    def generate_code(self, params: CodeParams) -> ContentResult:
        return ContentResult(content=self._require(self._code_writer.run(params)))

    def generate_image(self, params: ImageParams) -> ContentResult:
        prompt = IMAGE_PROMPT_TEMPLATE.format(
            style=params.style,
            subject=params.subject,
            lighting=params.lighting,
            composition=params.composition,
        )
        url = self._providers.image.generate_image(prompt)
        if not url:
            raise UnknownUpstreamError("No image generated")
        return ContentResult(content=url, is_image=True)

    @staticmethod
    def _require(content: str) -> str:
        if not content:
            raise UnknownUpstreamError("No content generated")
        return content
