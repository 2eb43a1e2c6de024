# app/languages/__init__.py
from flask import Blueprint

# Templates live in ../templates, shared with the rest of the app
languages_bp = Blueprint(
    'languages',
    __name__,
    template_folder='../templates'
)

# Import routes to attach them to the blueprint
from . import routes  # noqa: E402,F401
