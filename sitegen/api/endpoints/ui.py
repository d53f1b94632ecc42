"""
Browser form page for the AI Site Generator.

The page submits to the sites API, polls the run and offers the
bundle download once the run is done.
"""

from flask import Blueprint, render_template, current_app


ui_bp = Blueprint('ui', __name__, template_folder='../templates')


@ui_bp.route('/', methods=['GET'])
def index():
    """Render the generator form."""
    return render_template(
        'generator.html',
        default_redirect_url=current_app.config['DEFAULT_REDIRECT_URL'],
        max_images=current_app.config['MAX_IMAGES'],
        api_title=current_app.config['API_TITLE']
    )
