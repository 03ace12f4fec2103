"""ORM model for design tokens (named visual constants: colors, spacing, typography, ...)."""

from sqlalchemy import Column, ForeignKey, Index, String, Text
from sqlalchemy.orm import relationship

from app.models.base import Base, JSONDocument, UTCDateTime, generate_object_id, utcnow
from app.services.search import build_search_document

TOKEN_THEMES = ("light", "dark", "all")
TOKEN_STATUSES = ("active", "draft", "deprecated")


class DesignToken(Base):
    """
    One design token. ``createdBy`` references the admin who created it.

    tags is a JSON list; search_document is derived from name, description and tags
    and must be refreshed whenever one of them changes.
    """

    __tablename__ = "design_tokens"
    __table_args__ = (Index("ix_design_tokens_category_created_at", "category", "created_at"),)

    id = Column(String(24), primary_key=True, default=generate_object_id)
    name = Column(String(255), nullable=False, index=True)
    category = Column(String(255), nullable=False, index=True)
    value = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    tags = Column(JSONDocument, nullable=False, default=list)
    theme = Column(String(16), nullable=False, default="all")
    light_value = Column(Text, nullable=True)
    dark_value = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default="active", index=True)
    created_by = Column(String(24), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)
    updated_at = Column(UTCDateTime, nullable=False, default=utcnow)
    search_document = Column(Text, nullable=False, default="")

    creator = relationship("User", lazy="joined")

    def refresh_search_document(self) -> None:
        self.search_document = build_search_document(self.name, self.description, self.tags)
