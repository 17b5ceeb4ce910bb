"""
AWS Lambda handler — Mangum wrapper for FastAPI.
"""

from mangum import Mangum

from api_inspector.main import app

handler = Mangum(app, lifespan="off")
