"""
Flask blueprints for the VibeShare catalog API.
"""

from flask import Blueprint

# Create blueprints
catalog_bp = Blueprint('catalog', __name__)

# Import routes to register them
from . import entries
