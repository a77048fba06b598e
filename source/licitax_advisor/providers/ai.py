"""Gemini access for the document validation flow.

`AiProvider` is parameterized by the pydantic model the answer must fit. The
model is asked for JSON matching that schema, files travel inline with the
prompt, and the answer is validated before it reaches the caller.
"""

import re
from typing import Generic, TypeVar

import json5
from google import genai
from google.genai import types
from licitax_advisor.providers.config import Config, ConfigProvider
from licitax_advisor.providers.logging import Logger, LoggingProvider
from pydantic import BaseModel, ValidationError

PydanticModel = TypeVar("PydanticModel", bound=BaseModel)

CODE_FENCE = re.compile(r"^\s*```(?:json)?\s*(?P<body>.*?)\s*```\s*$", re.DOTALL)


class Attachment(BaseModel):
    """A file sent to the model inline, next to the prompt.

    Attributes:
        name: The file name, used to label the attachment in the prompt.
        mime_type: The MIME type of the content.
        content: The raw bytes of the file.
    """

    name: str
    mime_type: str
    content: bytes


class AiProvider(Generic[PydanticModel]):
    """Sends prompts to Gemini on Vertex AI and returns validated `output_schema` instances."""

    logger: Logger
    config: Config
    client: genai.Client
    output_schema: type[PydanticModel]

    def __init__(self, output_schema: type[PydanticModel]):
        """Create the Vertex AI client for the configured project and location.

        Args:
            output_schema: The model every answer is validated against.
        """
        self.logger = LoggingProvider().get_logger()
        self.config = ConfigProvider.get_config()
        self.output_schema = output_schema

        self.client = genai.Client(
            vertexai=True,
            project=self.config.GCP_PROJECT,
            location=self.config.GCP_LOCATION,
        )

        self.logger.debug(f"Gemini client ready for '{self.output_schema.__name__}' answers.")

    def get_structured_output(self, prompt: str, attachments: list[Attachment]) -> PydanticModel:
        """Send a prompt with inline attachments and parse the response.

        Each attachment is preceded by a text part naming it, so the model can
        refer to the files by name in its answer.

        Args:
            prompt: The instructions for the model.
            attachments: The files to include in the request.

        Returns:
            The validated answer.
        """
        parts = [types.Part(text=prompt)]
        for attachment in attachments:
            parts.append(types.Part(text=f"--- Document: {attachment.name} ---"))
            parts.append(types.Part.from_bytes(data=attachment.content, mime_type=attachment.mime_type))
            parts.append(types.Part(text=f"--- End Document: {attachment.name} ---"))
        request_contents = types.Content(role="user", parts=parts)

        response = self.client.models.generate_content(
            model=self.config.GCP_GEMINI_MODEL,
            contents=request_contents,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=self.output_schema,
                max_output_tokens=self.config.GCP_GEMINI_MAX_OUTPUT_TOKENS,
            ),
        )

        if response.usage_metadata:
            self.logger.info(
                f"Token usage: {response.usage_metadata.prompt_token_count or 0} input, "
                f"{response.usage_metadata.candidates_token_count or 0} output."
            )

        return self._parse_and_validate_response(response)

    def _parse_and_validate_response(self, response) -> PydanticModel:  # type: ignore
        """Turn the model's answer into an instance of the output schema.

        The answer is read as JSON5, so trailing commas and unquoted keys are
        tolerated, and a Markdown code fence around it is ignored.

        Args:
            response: The complete response object from the `generate_content` call.

        Returns:
            A validated Pydantic model instance.

        Raises:
            ValueError: If the response is empty, blocked, or unparsable.
        """
        text = self._extract_text(response)
        try:
            return self.output_schema.model_validate(json5.loads(text))
        except (ValueError, ValidationError) as e:
            self.logger.error(f"Gemini answer for '{self.output_schema.__name__}' was rejected: {e}")
            raise ValueError(
                f"AI model returned a response that could not be parsed into the expected structure: {e}"
            ) from e

    def _extract_text(self, response) -> str:  # type: ignore
        if not response.candidates:
            feedback = response.prompt_feedback
            if feedback and feedback.block_reason:
                reason = feedback.block_reason.name
                self.logger.error(f"Gemini blocked the prompt: {reason}")
                raise ValueError(f"AI model blocked the response due to: {reason}")
            self.logger.error(f"Gemini returned no candidates: {response}")
            raise ValueError("AI model returned an empty response.")

        match = CODE_FENCE.match(response.text or "")
        return (match.group("body") if match else response.text or "").strip()
