"""
Parameter models for the posts tools.

Pydantic models double as the JSON schemas advertised to MCP clients.
Validation is strict: values are type-checked, never coerced, and optional
fields must be omitted rather than sent as null.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class StrictModel(BaseModel):
    """Base model that checks types without converting them."""

    model_config = ConfigDict(strict=True)


class ToolParams(StrictModel):
    """Base class for tool parameter models."""

    def to_payload(self) -> dict:
        """Fields the caller supplied, ready to forward upstream."""
        return self.model_dump(exclude_unset=True)


# =============================================================================
# Relationship references
# =============================================================================

class TagRef(StrictModel):
    """Tag reference (id, name, or slug)."""

    id: str = None
    name: str = None
    slug: str = None


class AuthorRef(StrictModel):
    """Author reference (id, slug, or email)."""

    id: str = None
    slug: str = None
    email: str = None


class TierRef(StrictModel):
    """Tier reference (id or slug)."""

    id: str = None
    slug: str = None


# =============================================================================
# Query models
# =============================================================================

class BrowsePostsParams(ToolParams):
    filter: str = Field(default=None, description="NQL filter, e.g. 'status:published'")
    limit: int = Field(default=None, description="Posts per page")
    page: int = Field(default=None, description="Page number")
    order: str = Field(default=None, description="Sort order, e.g. 'published_at desc'")


class ReadPostParams(ToolParams):
    id: str = Field(default=None, description="Post ID")
    slug: str = Field(default=None, description="Post slug")


class DeletePostParams(ToolParams):
    id: str = Field(..., description="Post ID to delete")


# =============================================================================
# Post payloads
# =============================================================================

class PostFields(ToolParams):
    """Writable post fields shared by add and edit."""

    slug: str = None
    html: str = None
    lexical: str = None
    status: str = None

    # Visibility & access
    visibility: str = Field(default=None, description="Post visibility: public, members, paid, tiers")
    tiers: List[TierRef] = Field(default=None, description="Array of tier objects for tier-based visibility")

    # Featured image
    feature_image: str = Field(default=None, description="URL for the featured/hero image")
    feature_image_alt: str = Field(default=None, description="Alt text for the featured image")
    feature_image_caption: str = Field(default=None, description="Caption for the featured image")

    custom_excerpt: str = Field(default=None, description="Custom excerpt for the post")

    # SEO metadata
    meta_title: str = Field(default=None, description="Custom meta title for SEO")
    meta_description: str = Field(default=None, description="Custom meta description for SEO")
    canonical_url: str = Field(default=None, description="Canonical URL for SEO")

    # Open Graph
    og_title: str = Field(default=None, description="Open Graph title for social sharing")
    og_description: str = Field(default=None, description="Open Graph description for social sharing")
    og_image: str = Field(default=None, description="Open Graph image URL for social sharing")

    # Twitter Card
    twitter_title: str = Field(default=None, description="Twitter card title")
    twitter_description: str = Field(default=None, description="Twitter card description")
    twitter_image: str = Field(default=None, description="Twitter card image URL")

    # Code injection
    codeinjection_head: str = Field(default=None, description="Custom code injected into <head>")
    codeinjection_foot: str = Field(default=None, description="Custom code injected before </body>")

    # Relationships
    tags: List[TagRef] = Field(default=None, description="Array of tag objects (id or name)")
    authors: List[AuthorRef] = Field(default=None, description="Array of author objects (id, slug, or email)")

    # Publishing
    published_at: str = Field(default=None, description="Publication date in ISO 8601 format")
    custom_template: str = Field(default=None, description="Custom Handlebars template for this post")
    email_only: bool = Field(default=None, description="If true, post is only sent via email")
    featured: bool = Field(default=None, description="Whether the post is featured")


class AddPostParams(PostFields):
    title: str = Field(..., description="Post title")


class EditPostParams(PostFields):
    id: str = Field(..., description="Post ID to update")
    updated_at: str = Field(..., description="updated_at of the post being edited, used to detect conflicting edits")
    title: str = Field(default=None, description="Post title")
