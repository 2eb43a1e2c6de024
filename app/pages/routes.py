# app/pages/routes.py
from flask import Blueprint, render_template

# Create a Blueprint for the top-level pages
pages_bp = Blueprint('pages', __name__, template_folder='../templates')

@pages_bp.route('/')
def home():
    """
    Renders the homepage, greeting `name` and linking to the language pages.
    """
    return render_template('index.html', name="world")
