"""
Vercel serverless function entry point for the Community Board UI.

This file exposes the Flask app as a Vercel serverless function.
Vercel automatically handles the WSGI interface.
"""

import sys
from pathlib import Path

# Add project root to path so `frontend` and `src` are importable
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from frontend.app import app

# Vercel expects the app to be named 'app' or 'handler'
# The Flask app is already named 'app' so this works directly
