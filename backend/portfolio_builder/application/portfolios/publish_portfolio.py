# portfolio_builder/application/portfolios/publish_portfolio.py
import re
from flask import current_app
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.domain.invariants.exceptions import InvariantViolation
from portfolio_builder.utils.transaction import transactional
from .queries import get_portfolio

DEFAULT_URL_TEMPLATE = "https://{site_name}.vercel.app"


def slugify_site_name(raw) -> str:
    """
    Turn a user-chosen site name into a URL-safe slug.

    "My Portfolio!" -> "my-portfolio"
    """
    if not isinstance(raw, str):
        raise InvariantViolation("siteName must be a string.")

    slug = re.sub(r"\s+", "-", raw.strip().lower())
    slug = re.sub(r"[^a-z0-9-]", "", slug)

    if not slug:
        raise InvariantViolation("siteName is required.")
    return slug


def build_published_url(site_name: str, template: str = DEFAULT_URL_TEMPLATE) -> str:
    return template.format(site_name=site_name)


def publish_portfolio(
    *,
    owner_id: str,
    portfolio_id: int,
    site_name,
) -> Portfolio:
    """
    Mark a portfolio published under a URL derived from `site_name`.

    Nothing is deployed. Republishing overwrites the previous URL and
    there is no unpublish.
    """
    slug = slugify_site_name(site_name)
    template = current_app.config.get("PUBLISH_URL_TEMPLATE", DEFAULT_URL_TEMPLATE)

    portfolio = get_portfolio(owner_id=owner_id, portfolio_id=portfolio_id, for_update=True)

    with transactional("portfolio.publish"):
        portfolio.is_published = True
        portfolio.site_name = slug
        portfolio.published_url = build_published_url(slug, template)

    current_app.logger.info(
        "portfolio.publish id=%s url=%s", portfolio.id, portfolio.published_url
    )
    return portfolio
