"""ORM model for reusable UI component metadata."""

from sqlalchemy import Column, ForeignKey, Index, String, Text

from app.models.base import Base, JSONDocument, UTCDateTime, generate_object_id, utcnow
from app.services.search import build_search_document

COMPONENT_TYPES = (
    "button",
    "input",
    "card",
    "modal",
    "navigation",
    "form",
    "layout",
    "typography",
    "icon",
    "other",
)
COMPONENT_STATUSES = ("draft", "active", "deprecated")


class Component(Base):
    """
    Component record: code snippets, styles, usage examples and dependencies.

    styles, code, examples, tags and dependencies are stored as JSON documents in
    their API (camelCase) shape.
    """

    __tablename__ = "components"
    __table_args__ = (
        Index("ix_components_type_status", "type", "status"),
        Index("ix_components_status_created_at", "status", "created_at"),
    )

    id = Column(String(24), primary_key=True, default=generate_object_id)
    name = Column(String(255), nullable=False, index=True)
    type = Column(String(32), nullable=False, index=True)
    description = Column(Text, nullable=True)
    styles = Column(JSONDocument, nullable=False, default=dict)
    code = Column(JSONDocument, nullable=False, default=dict)
    examples = Column(JSONDocument, nullable=False, default=list)
    tags = Column(JSONDocument, nullable=False, default=list)
    status = Column(String(16), nullable=False, default="draft", index=True)
    version = Column(String(64), nullable=False, default="1.0.0")
    dependencies = Column(JSONDocument, nullable=False, default=list)
    created_by = Column(String(24), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)
    updated_at = Column(UTCDateTime, nullable=False, default=utcnow)
    search_document = Column(Text, nullable=False, default="")

    def refresh_search_document(self) -> None:
        self.search_document = build_search_document(self.name, self.description, self.tags)
