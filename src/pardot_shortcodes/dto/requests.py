"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from pardot_shortcodes.embed_attributes import RewriteOptions


class DisplayOptions(BaseModel):
    """Display overrides shared by both shortcode kinds."""

    height: str | None = Field(None, description="Height override, e.g. '500' or '100%'")
    width: str | None = Field(None, description="Width override, e.g. '600' or '50%'")
    classes: str | None = Field(None, description="Extra CSS classes, space separated")

    def to_options(self) -> RewriteOptions:
        return RewriteOptions(height=self.height, width=self.width, classes=self.classes)


class FormShortcodeRequest(DisplayOptions):
    """Request DTO for rendering a ``pardot_form`` shortcode."""

    title: str | None = Field(None, description="Form title as shown in Pardot")


class DynamicContentShortcodeRequest(DisplayOptions):
    """Request DTO for rendering a ``pardot_dynamic_content`` shortcode."""

    name: str | None = Field(None, description="Dynamic content name as shown in Pardot")
