#!/usr/bin/env python3
"""
WSGI entry point for the AI Site Generator.

Run directly for a development server, or point a WSGI server at
``app:app``.
"""

import os

from sitegen.api.app import create_app

app = create_app(os.environ.get('FLASK_ENV'))

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5001))
    app.run(host='0.0.0.0', port=port, debug=app.config.get('DEBUG', False))
