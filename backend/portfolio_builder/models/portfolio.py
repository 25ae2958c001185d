from portfolio_builder.extensions import db
from .base import BaseModel


def empty_layout():
    return {"components": []}


class Portfolio(BaseModel):
    __tablename__ = "portfolios"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    user_id = db.Column(
        db.String(36),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(255), nullable=False)

    # {components: [...], theme?: {...}} stored verbatim
    layout = db.Column(db.JSON, nullable=False, default=empty_layout)

    is_published = db.Column(db.Boolean, nullable=False, default=False)
    published_url = db.Column(db.String(512), nullable=True)
    site_name = db.Column(db.String(255), nullable=True)

    owner = db.relationship("User", back_populates="portfolios")

    __table_args__ = (
        db.Index("ix_portfolio_owner_updated", "user_id", "updated_at"),
    )
