from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class GenerationRequest(BaseModel):
    prompt: StrictStr

    # Only reject blank prompts, the prompt itself is forwarded untouched.
    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("prompt is blank")
        return v


class GenerationResult(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


# Body sent to the text to image service.
class TextToImageRequest(BaseModel):
    text: str
    width: int
    height: int


class ImageInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(alias="imageUrl")
    prompt: str


# Shape handed to image views, width and height are display hints only.
class GeneratedImage(ImageInfo):
    width: str | None = None
    height: str | None = None

    def info(self) -> ImageInfo:
        return ImageInfo(image_url=self.image_url, prompt=self.prompt)
