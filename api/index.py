"""
Vercel Serverless Entry Point

Vercel's Python runtime imports this module and serves the exported 'app'.
All routes (the /api/* JSON endpoints, /auth/* and the /embed pages and
loader scripts) are handled by the Flask blueprints.
"""

from platapay import create_app

app = create_app()
