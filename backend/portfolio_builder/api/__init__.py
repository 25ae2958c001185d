from flask import Blueprint

# All JSON endpoints live under /api
api_bp = Blueprint("api", __name__)

# Import route modules so they register with api_bp
from . import health
from . import auth
from . import components
from . import portfolios
