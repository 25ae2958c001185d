def _iso(ts):
    return ts.isoformat() if ts else None


def normalize_portfolio(portfolio):
    return {
        "id": portfolio.id,
        "userId": portfolio.user_id,
        "name": portfolio.name,
        "layout": portfolio.layout or {"components": []},
        "isPublished": bool(portfolio.is_published),
        "publishedUrl": portfolio.published_url,
        "siteName": portfolio.site_name,
        "createdAt": _iso(portfolio.created_at),
        "updatedAt": _iso(portfolio.updated_at),
    }
